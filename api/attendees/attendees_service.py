# api/attendees/attendees_service.py

import logging
from typing import List
from uuid import UUID

from api.attendees.attendees_model import Attendee
from api.attendees.attendees_schema import AttendeeCreate
from helpers.token_helper import TokenKind, issue_unique_token
from stores.interfaces import CheckinStore
from utils.errors import EntityNotFoundError

logger = logging.getLogger(__name__)


class AttendeeService:
    def __init__(self, store: CheckinStore):
        self.store = store

    async def create_attendee(self, event_id: UUID, data: AttendeeCreate) -> Attendee:
        """Register an attendee and issue their badge token."""
        if await self.store.get_event(event_id) is None:
            raise EntityNotFoundError("Event", event_id)

        token = await issue_unique_token(TokenKind.attendee, self.store)
        attendee = await self.store.add_attendee(
            Attendee(event_id=event_id, qr_code_token=token, **data.model_dump())
        )
        logger.info("Registered attendee %s for event %s", attendee.id, event_id)
        return attendee

    async def get_attendee(self, attendee_id: UUID) -> Attendee:
        attendee = await self.store.get_attendee(attendee_id)
        if attendee is None:
            raise EntityNotFoundError("Attendee", attendee_id)
        return attendee

    async def list_attendees(self, event_id: UUID) -> List[Attendee]:
        if await self.store.get_event(event_id) is None:
            raise EntityNotFoundError("Event", event_id)
        return await self.store.list_attendees(event_id)
