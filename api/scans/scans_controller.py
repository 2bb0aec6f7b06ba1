# api/scans/scans_controller.py

from typing import List, Optional
from uuid import UUID

from api.analytics.analytics_controller import AnalyticsController
from api.attendees.attendees_schema import AttendeeOut
from api.booths.booths_schema import BoothOut
from api.scans.scans_schema import ScanIn, ScanRecordOut, ScanResultOut
from api.scans.scans_service import ScanService
from stores.interfaces import CheckinStore


class ScanController:
    @staticmethod
    async def record_scan(payload: ScanIn, store: CheckinStore) -> ScanResultOut:
        outcome = await ScanService(store).record_scan(
            attendee_token=payload.attendee_token,
            booth_token=payload.booth_token,
            event_id=payload.event_id,
            notes=payload.notes,
        )
        await AnalyticsController.invalidate_event_stats()
        return ScanResultOut(
            scan=ScanRecordOut.model_validate(outcome.record),
            attendee=AttendeeOut.model_validate(outcome.attendee),
            booth=BoothOut.model_validate(outcome.booth),
            is_first_visit=outcome.is_first_visit,
            is_rapid_repeat=outcome.is_rapid_repeat,
        )

    @staticmethod
    async def list_scans(
        store: CheckinStore,
        event_id: Optional[UUID] = None,
        booth_id: Optional[UUID] = None,
        attendee_id: Optional[UUID] = None,
    ) -> List[ScanRecordOut]:
        rows = await ScanService(store).list_scans(event_id, booth_id, attendee_id)
        return [ScanRecordOut.model_validate(r) for r in rows]
