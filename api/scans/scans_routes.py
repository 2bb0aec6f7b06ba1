# api/scans/scans_routes.py

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status

from api.scans.scans_controller import ScanController
from api.scans.scans_schema import ScanIn, ScanRecordOut, ScanResultOut
from stores.interfaces import CheckinStore
from utils.deps import get_store

router = APIRouter(prefix="/scans", tags=["scans"])


@router.post(
    "",
    response_model=ScanResultOut,
    status_code=status.HTTP_201_CREATED,
    summary="Record an attendee visit to a booth from both QR tokens",
)
async def record_scan(
    payload: ScanIn,
    store: CheckinStore = Depends(get_store),
) -> ScanResultOut:
    return await ScanController.record_scan(payload, store)


@router.get(
    "",
    response_model=List[ScanRecordOut],
    summary="List scan records, newest first",
)
async def list_scans(
    event_id: Optional[UUID] = None,
    booth_id: Optional[UUID] = None,
    attendee_id: Optional[UUID] = None,
    store: CheckinStore = Depends(get_store),
) -> List[ScanRecordOut]:
    return await ScanController.list_scans(store, event_id, booth_id, attendee_id)
