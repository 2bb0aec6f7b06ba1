# api/booths/booths_schema.py

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from utils.time_utils import UtcDateTime


class BoothCreate(BaseModel):
    booth_number: str = Field(..., min_length=1, max_length=50)
    booth_name: str = Field(..., min_length=1, max_length=200)
    company: Optional[str] = Field(None, max_length=200)
    description: Optional[str] = None
    location: Optional[str] = Field(None, max_length=200)


class BoothOut(BaseModel):
    id: UUID
    event_id: UUID
    booth_number: str
    booth_name: str
    company: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    qr_code_token: str
    created_at: Optional[UtcDateTime] = None

    model_config = ConfigDict(from_attributes=True)
