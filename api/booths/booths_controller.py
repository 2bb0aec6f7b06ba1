# api/booths/booths_controller.py

from typing import List
from uuid import UUID

from api.booths.booths_schema import BoothCreate, BoothOut
from api.booths.booths_service import BoothService
from helpers.qr_helper import render_qr_png
from stores.interfaces import CheckinStore


class BoothController:
    @staticmethod
    async def create_booth(event_id: UUID, payload: BoothCreate, store: CheckinStore) -> BoothOut:
        booth = await BoothService(store).create_booth(event_id, payload)
        return BoothOut.model_validate(booth)

    @staticmethod
    async def list_booths(event_id: UUID, store: CheckinStore) -> List[BoothOut]:
        booths = await BoothService(store).list_booths(event_id)
        return [BoothOut.model_validate(b) for b in booths]

    @staticmethod
    async def get_booth(booth_id: UUID, store: CheckinStore) -> BoothOut:
        booth = await BoothService(store).get_booth(booth_id)
        return BoothOut.model_validate(booth)

    @staticmethod
    async def get_qr_code(booth_id: UUID, store: CheckinStore) -> bytes:
        booth = await BoothService(store).get_booth(booth_id)
        return render_qr_png(booth.qr_code_token)
