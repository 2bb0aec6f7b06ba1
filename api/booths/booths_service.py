# api/booths/booths_service.py

import logging
from typing import List
from uuid import UUID

from api.booths.booths_model import Booth
from api.booths.booths_schema import BoothCreate
from helpers.token_helper import TokenKind, issue_unique_token
from stores.interfaces import CheckinStore
from utils.errors import EntityNotFoundError

logger = logging.getLogger(__name__)


class BoothService:
    def __init__(self, store: CheckinStore):
        self.store = store

    async def create_booth(self, event_id: UUID, data: BoothCreate) -> Booth:
        """Register a booth and issue its poster token."""
        if await self.store.get_event(event_id) is None:
            raise EntityNotFoundError("Event", event_id)

        token = await issue_unique_token(TokenKind.booth, self.store)
        booth = await self.store.add_booth(
            Booth(event_id=event_id, qr_code_token=token, **data.model_dump())
        )
        logger.info("Registered booth %s (%s) for event %s", booth.id, booth.booth_number, event_id)
        return booth

    async def get_booth(self, booth_id: UUID) -> Booth:
        booth = await self.store.get_booth(booth_id)
        if booth is None:
            raise EntityNotFoundError("Booth", booth_id)
        return booth

    async def list_booths(self, event_id: UUID) -> List[Booth]:
        if await self.store.get_event(event_id) is None:
            raise EntityNotFoundError("Event", event_id)
        return await self.store.list_booths(event_id)
