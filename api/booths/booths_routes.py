# api/booths/booths_routes.py

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from api.booths.booths_controller import BoothController
from api.booths.booths_schema import BoothCreate, BoothOut
from stores.interfaces import CheckinStore
from utils.deps import get_store

router = APIRouter(tags=["booths"])


@router.post(
    "/events/{event_id}/booths",
    response_model=BoothOut,
    status_code=status.HTTP_201_CREATED,
    summary="Register a booth and issue its QR token",
)
async def create_booth(
    event_id: UUID,
    payload: BoothCreate,
    store: CheckinStore = Depends(get_store),
) -> BoothOut:
    return await BoothController.create_booth(event_id, payload, store)


@router.get("/events/{event_id}/booths", response_model=List[BoothOut])
async def list_booths(
    event_id: UUID,
    store: CheckinStore = Depends(get_store),
) -> List[BoothOut]:
    return await BoothController.list_booths(event_id, store)


@router.get("/booths/{booth_id}", response_model=BoothOut)
async def get_booth(
    booth_id: UUID,
    store: CheckinStore = Depends(get_store),
) -> BoothOut:
    return await BoothController.get_booth(booth_id, store)


@router.get(
    "/booths/{booth_id}/qrcode",
    response_class=Response,
    responses={200: {"content": {"image/png": {}}}},
    summary="Booth poster QR code as a PNG image",
)
async def get_booth_qr_code(
    booth_id: UUID,
    store: CheckinStore = Depends(get_store),
) -> Response:
    png = await BoothController.get_qr_code(booth_id, store)
    return Response(content=png, media_type="image/png")
