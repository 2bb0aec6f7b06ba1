# api/events/events_schema.py

from datetime import date
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, model_validator

from api.events.events_model import EventStatus
from utils.time_utils import UtcDateTime


class EventCreate(BaseModel):
    event_name: str = Field(..., min_length=1, max_length=200)
    event_code: str = Field(..., min_length=1, max_length=50)
    start_date: date
    end_date: date
    location: Optional[str] = Field(None, max_length=300)
    description: Optional[str] = None
    status: EventStatus = EventStatus.upcoming

    @model_validator(mode="after")
    def check_dates(self):
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class EventOut(BaseModel):
    id: UUID
    event_name: str
    event_code: str
    start_date: date
    end_date: date
    location: Optional[str] = None
    description: Optional[str] = None
    status: EventStatus
    created_at: Optional[UtcDateTime] = None

    model_config = ConfigDict(from_attributes=True)
