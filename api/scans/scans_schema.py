# api/scans/scans_schema.py

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from api.attendees.attendees_schema import AttendeeOut
from api.booths.booths_schema import BoothOut
from utils.time_utils import UtcDateTime


class ScanIn(BaseModel):
    """
    Payload sent by a booth scanner: both QR tokens and the event being worked.
    """
    attendee_token: str = Field(..., min_length=1, max_length=255)
    booth_token: str = Field(..., min_length=1, max_length=255)
    event_id: UUID
    notes: Optional[str] = Field(None, max_length=2000)


class ScanRecordOut(BaseModel):
    id: UUID
    attendee_id: UUID
    booth_id: UUID
    event_id: UUID
    scanned_at: UtcDateTime
    notes: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class ScanResultOut(BaseModel):
    scan: ScanRecordOut
    attendee: AttendeeOut
    booth: BoothOut
    is_first_visit: bool
    is_rapid_repeat: bool = False
