# api/scans/scans_service.py

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable, List, Optional
from uuid import UUID

from api.attendees.attendees_model import Attendee
from api.booths.booths_model import Booth
from api.scans.scan_records_model import ScanRecord
from api.tokens.tokens_service import TokenService
from config.settings import settings
from helpers.token_helper import TokenKind
from stores.interfaces import CheckinStore
from utils.errors import CrossEventMismatchError, EntityNotFoundError, InvalidTokenError
from utils.time_utils import as_utc, utc_now

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScanOutcome:
    record: ScanRecord
    attendee: Attendee
    booth: Booth
    is_first_visit: bool
    is_rapid_repeat: bool = False


class ScanService:
    def __init__(
        self,
        store: CheckinStore,
        clock: Callable[[], datetime] = utc_now,
        duplicate_window_seconds: Optional[int] = None,
    ):
        self.store = store
        self.tokens = TokenService(store)
        self.clock = clock
        if duplicate_window_seconds is None:
            duplicate_window_seconds = settings.DUPLICATE_SCAN_WINDOW_SECONDS
        self.duplicate_window = timedelta(seconds=duplicate_window_seconds)

    async def record_scan(
        self,
        attendee_token: str,
        booth_token: str,
        event_id: UUID,
        notes: Optional[str] = None,
    ) -> ScanOutcome:
        attendee_check = await self.tokens.verify_token(attendee_token)
        if not attendee_check.valid or attendee_check.kind != TokenKind.attendee:
            logger.warning("Rejected scan for event %s: unrecognized attendee token", event_id)
            raise InvalidTokenError("attendee")

        booth_check = await self.tokens.verify_token(booth_token)
        if not booth_check.valid or booth_check.kind != TokenKind.booth:
            logger.warning("Rejected scan for event %s: unrecognized booth token", event_id)
            raise InvalidTokenError("booth")

        attendee, booth = attendee_check.entity, booth_check.entity

        event = await self.store.get_event(event_id)
        if event is None:
            raise EntityNotFoundError("Event", event_id)

        if attendee.event_id != event_id or booth.event_id != event_id:
            logger.warning(
                "Rejected cross-event scan: target=%s attendee_event=%s booth_event=%s",
                event_id, attendee.event_id, booth.event_id,
            )
            raise CrossEventMismatchError(
                event_id,
                attendee_event_id=attendee.event_id,
                booth_event_id=booth.event_id,
            )

        now = self.clock()
        previous = await self.store.last_scan_for_pair(attendee.id, booth.id)
        is_rapid_repeat = (
            previous is not None
            and now - as_utc(previous.scanned_at) <= self.duplicate_window
        )
        if is_rapid_repeat:
            # Still recorded; repeat visits are kept as a signal
            logger.warning(
                "Rapid repeat scan: attendee=%s booth=%s within %ss",
                attendee.id, booth.id, int(self.duplicate_window.total_seconds()),
            )

        rec = await self.store.add_scan(
            attendee_id=attendee.id,
            booth_id=booth.id,
            event_id=event_id,
            scanned_at=now,
            notes=notes,
        )
        logger.info("Recorded scan %s: attendee=%s booth=%s event=%s", rec.id, attendee.id, booth.id, event_id)

        return ScanOutcome(
            record=rec,
            attendee=attendee,
            booth=booth,
            is_first_visit=previous is None,
            is_rapid_repeat=is_rapid_repeat,
        )

    async def list_scans(
        self,
        event_id: Optional[UUID] = None,
        booth_id: Optional[UUID] = None,
        attendee_id: Optional[UUID] = None,
    ) -> List[ScanRecord]:
        """Newest first."""
        rows = await self.store.list_scans(event_id=event_id, booth_id=booth_id, attendee_id=attendee_id)
        return sorted(rows, key=lambda r: as_utc(r.scanned_at), reverse=True)

    async def attendee_journey(self, attendee_id: UUID) -> List[dict]:
        """Booths an attendee visited, in the order they were scanned."""
        attendee = await self.store.get_attendee(attendee_id)
        if attendee is None:
            raise EntityNotFoundError("Attendee", attendee_id)

        booths = {b.id: b for b in await self.store.list_booths(attendee.event_id)}
        journey = []
        for rec in await self.store.list_scans(attendee_id=attendee_id):
            booth = booths.get(rec.booth_id)
            journey.append({
                "scan_id": rec.id,
                "booth_id": rec.booth_id,
                "booth_number": booth.booth_number if booth else None,
                "booth_name": booth.booth_name if booth else None,
                "scanned_at": as_utc(rec.scanned_at),
                "notes": rec.notes,
            })
        return journey
