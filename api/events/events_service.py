# api/events/events_service.py

import logging
from uuid import UUID

from api.events.events_model import Event
from api.events.events_schema import EventCreate
from stores.interfaces import CheckinStore
from utils.errors import EntityNotFoundError

logger = logging.getLogger(__name__)


class EventService:
    def __init__(self, store: CheckinStore):
        self.store = store

    async def create_event(self, data: EventCreate) -> Event:
        event = await self.store.add_event(Event(**data.model_dump()))
        logger.info("Created event %s (%s)", event.id, event.event_code)
        return event

    async def get_event(self, event_id: UUID) -> Event:
        event = await self.store.get_event(event_id)
        if event is None:
            raise EntityNotFoundError("Event", event_id)
        return event
