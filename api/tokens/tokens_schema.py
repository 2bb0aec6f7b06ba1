# api/tokens/tokens_schema.py

from typing import Optional

from pydantic import BaseModel, Field

from api.attendees.attendees_schema import AttendeeOut
from api.booths.booths_schema import BoothOut
from helpers.token_helper import TokenKind


class VerifyTokenIn(BaseModel):
    token: str = Field(..., max_length=255)


class VerifyTokenOut(BaseModel):
    valid: bool
    kind: Optional[TokenKind] = None
    attendee: Optional[AttendeeOut] = None
    booth: Optional[BoothOut] = None
