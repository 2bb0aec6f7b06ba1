"""
In-memory CheckinStore and Redis stand-ins for unit tests.

Enforces the same uniqueness rules as the relational schema so services can
be exercised without a database.
"""

import fnmatch
import uuid
from datetime import datetime, timezone
from typing import Dict, List, Optional
from uuid import UUID

from api.attendees.attendees_model import Attendee
from api.booths.booths_model import Booth
from api.events.events_model import Event, EventStatus
from api.scans.scan_records_model import ScanRecord
from stores.interfaces import CheckinStore
from utils.errors import DuplicateConstraintError
from utils.time_utils import as_utc


class InMemoryCheckinStore(CheckinStore):
    def __init__(self):
        self.events: Dict[UUID, Event] = {}
        self.attendees: Dict[UUID, Attendee] = {}
        self.booths: Dict[UUID, Booth] = {}
        self.scans: List[ScanRecord] = []

    # Events

    async def get_event(self, event_id: UUID) -> Optional[Event]:
        return self.events.get(event_id)

    async def add_event(self, event: Event) -> Event:
        if any(e.event_code == event.event_code for e in self.events.values()):
            raise DuplicateConstraintError("Event code already exists")
        event.id = event.id or uuid.uuid4()
        if event.status is None:
            event.status = EventStatus.upcoming
        self.events[event.id] = event
        return event

    # Attendees and booths

    async def get_attendee(self, attendee_id: UUID) -> Optional[Attendee]:
        return self.attendees.get(attendee_id)

    async def get_booth(self, booth_id: UUID) -> Optional[Booth]:
        return self.booths.get(booth_id)

    async def find_attendee_by_token(self, token: str) -> Optional[Attendee]:
        return next((a for a in self.attendees.values() if a.qr_code_token == token), None)

    async def find_booth_by_token(self, token: str) -> Optional[Booth]:
        return next((b for b in self.booths.values() if b.qr_code_token == token), None)

    async def token_exists(self, token: str) -> bool:
        return (
            await self.find_attendee_by_token(token) is not None
            or await self.find_booth_by_token(token) is not None
        )

    async def add_attendee(self, attendee: Attendee) -> Attendee:
        if await self.token_exists(attendee.qr_code_token):
            raise DuplicateConstraintError("QR token already issued")
        if attendee.email and any(
            a.event_id == attendee.event_id and a.email == attendee.email
            for a in self.attendees.values()
        ):
            raise DuplicateConstraintError("Attendee email already registered for this event")
        attendee.id = attendee.id or uuid.uuid4()
        self.attendees[attendee.id] = attendee
        return attendee

    async def add_booth(self, booth: Booth) -> Booth:
        if await self.token_exists(booth.qr_code_token):
            raise DuplicateConstraintError("QR token already issued")
        if any(
            b.event_id == booth.event_id and b.booth_number == booth.booth_number
            for b in self.booths.values()
        ):
            raise DuplicateConstraintError("Booth number already registered for this event")
        booth.id = booth.id or uuid.uuid4()
        self.booths[booth.id] = booth
        return booth

    async def list_attendees(self, event_id: UUID) -> List[Attendee]:
        rows = [a for a in self.attendees.values() if a.event_id == event_id]
        return sorted(rows, key=lambda a: a.name)

    async def list_booths(self, event_id: UUID) -> List[Booth]:
        rows = [b for b in self.booths.values() if b.event_id == event_id]
        return sorted(rows, key=lambda b: b.booth_number)

    # Scan log

    async def add_scan(
        self,
        attendee_id: UUID,
        booth_id: UUID,
        event_id: UUID,
        scanned_at: datetime,
        notes: Optional[str] = None,
    ) -> ScanRecord:
        rec = ScanRecord(
            attendee_id=attendee_id,
            booth_id=booth_id,
            event_id=event_id,
            scanned_at=scanned_at,
            notes=notes,
        )
        self.scans.append(rec)
        return rec

    async def last_scan_for_pair(self, attendee_id: UUID, booth_id: UUID) -> Optional[ScanRecord]:
        rows = [
            r for r in self.scans
            if r.attendee_id == attendee_id and r.booth_id == booth_id
        ]
        return max(rows, key=lambda r: as_utc(r.scanned_at), default=None)

    async def list_scans(
        self,
        event_id: Optional[UUID] = None,
        booth_id: Optional[UUID] = None,
        attendee_id: Optional[UUID] = None,
    ) -> List[ScanRecord]:
        rows = [
            r for r in self.scans
            if (event_id is None or r.event_id == event_id)
            and (booth_id is None or r.booth_id == booth_id)
            and (attendee_id is None or r.attendee_id == attendee_id)
        ]
        return sorted(rows, key=lambda r: as_utc(r.scanned_at))


class StepClock:
    """Deterministic clock: returns the given instants in order, then repeats the last."""

    def __init__(self, *instants: datetime):
        self.instants = list(instants)

    def set(self, *instants: datetime) -> None:
        self.instants = list(instants)

    def __call__(self) -> datetime:
        if len(self.instants) > 1:
            return self.instants.pop(0)
        return self.instants[0]


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


class FakeRedis:
    """Just enough of redis.asyncio.Redis for the cache layer."""

    def __init__(self):
        self.data = {}
        self.ttl = {}

    async def get(self, key):
        return self.data.get(key)

    async def setex(self, key, ttl, value):
        self.data[key] = value
        self.ttl[key] = ttl
        return True

    async def scan_iter(self, match=None):
        for key in list(self.data):
            if match is None or fnmatch.fnmatch(key, match):
                yield key

    async def delete(self, *keys):
        removed = 0
        for key in keys:
            removed += self.data.pop(key, None) is not None
        return removed
