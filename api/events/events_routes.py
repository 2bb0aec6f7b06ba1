# api/events/events_routes.py

from uuid import UUID

from fastapi import APIRouter, Depends, status

from api.events.events_controller import EventController
from api.events.events_schema import EventCreate, EventOut
from stores.interfaces import CheckinStore
from utils.deps import get_store

router = APIRouter(prefix="/events", tags=["events"])


@router.post(
    "",
    response_model=EventOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create an exhibition event",
)
async def create_event(
    payload: EventCreate,
    store: CheckinStore = Depends(get_store),
) -> EventOut:
    return await EventController.create_event(payload, store)


@router.get("/{event_id}", response_model=EventOut)
async def get_event(
    event_id: UUID,
    store: CheckinStore = Depends(get_store),
) -> EventOut:
    return await EventController.get_event(event_id, store)
