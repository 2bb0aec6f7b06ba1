# api/attendees/attendees_schema.py

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from utils.time_utils import UtcDateTime


class AttendeeCreate(BaseModel):
    """
    Registration payload. The QR token is issued server-side.
    """
    name: str = Field(..., min_length=1, max_length=100)
    email: Optional[str] = Field(None, max_length=255)
    company: Optional[str] = Field(None, max_length=200)
    title: Optional[str] = Field(None, max_length=100)
    phone: Optional[str] = Field(None, max_length=50)
    badge_number: Optional[str] = Field(None, max_length=50)


class AttendeeOut(BaseModel):
    id: UUID
    event_id: UUID
    name: str
    email: Optional[str] = None
    company: Optional[str] = None
    title: Optional[str] = None
    phone: Optional[str] = None
    badge_number: Optional[str] = None
    qr_code_token: str
    created_at: Optional[UtcDateTime] = None

    model_config = ConfigDict(from_attributes=True)


class JourneyStepOut(BaseModel):
    scan_id: UUID
    booth_id: UUID
    booth_number: Optional[str] = None
    booth_name: Optional[str] = None
    scanned_at: UtcDateTime
    notes: Optional[str] = None
