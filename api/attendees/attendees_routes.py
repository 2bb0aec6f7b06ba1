# api/attendees/attendees_routes.py

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from api.attendees.attendees_controller import AttendeeController
from api.attendees.attendees_schema import AttendeeCreate, AttendeeOut, JourneyStepOut
from stores.interfaces import CheckinStore
from utils.deps import get_store

router = APIRouter(tags=["attendees"])


@router.post(
    "/events/{event_id}/attendees",
    response_model=AttendeeOut,
    status_code=status.HTTP_201_CREATED,
    summary="Register an attendee and issue their badge QR token",
)
async def create_attendee(
    event_id: UUID,
    payload: AttendeeCreate,
    store: CheckinStore = Depends(get_store),
) -> AttendeeOut:
    return await AttendeeController.create_attendee(event_id, payload, store)


@router.get("/events/{event_id}/attendees", response_model=List[AttendeeOut])
async def list_attendees(
    event_id: UUID,
    store: CheckinStore = Depends(get_store),
) -> List[AttendeeOut]:
    return await AttendeeController.list_attendees(event_id, store)


@router.get("/attendees/{attendee_id}", response_model=AttendeeOut)
async def get_attendee(
    attendee_id: UUID,
    store: CheckinStore = Depends(get_store),
) -> AttendeeOut:
    return await AttendeeController.get_attendee(attendee_id, store)


@router.get(
    "/attendees/{attendee_id}/qrcode",
    response_class=Response,
    responses={200: {"content": {"image/png": {}}}},
    summary="Badge QR code as a PNG image",
)
async def get_attendee_qr_code(
    attendee_id: UUID,
    store: CheckinStore = Depends(get_store),
) -> Response:
    png = await AttendeeController.get_qr_code(attendee_id, store)
    return Response(content=png, media_type="image/png")


@router.get(
    "/attendees/{attendee_id}/journey",
    response_model=List[JourneyStepOut],
    summary="Booths the attendee visited, in scan order",
)
async def get_attendee_journey(
    attendee_id: UUID,
    store: CheckinStore = Depends(get_store),
) -> List[JourneyStepOut]:
    return await AttendeeController.get_journey(attendee_id, store)
