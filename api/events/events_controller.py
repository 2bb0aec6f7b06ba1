# api/events/events_controller.py

from uuid import UUID

from api.events.events_schema import EventCreate, EventOut
from api.events.events_service import EventService
from stores.interfaces import CheckinStore


class EventController:
    @staticmethod
    async def create_event(payload: EventCreate, store: CheckinStore) -> EventOut:
        event = await EventService(store).create_event(payload)
        return EventOut.model_validate(event)

    @staticmethod
    async def get_event(event_id: UUID, store: CheckinStore) -> EventOut:
        event = await EventService(store).get_event(event_id)
        return EventOut.model_validate(event)
