"""SQLAlchemy (async) implementation of the CheckinStore."""

import logging
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import exists, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from api.attendees.attendees_model import Attendee
from api.booths.booths_model import Booth
from api.events.events_model import Event
from api.scans.scan_records_model import ScanRecord
from stores.interfaces import CheckinStore
from utils.errors import DuplicateConstraintError

logger = logging.getLogger(__name__)


class SqlAlchemyCheckinStore(CheckinStore):
    """Relational store; one instance per request session."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def _insert(self, obj, duplicate_message: str):
        self.db.add(obj)
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            logger.info("Rejected duplicate %s: %s", type(obj).__name__, e.orig)
            raise DuplicateConstraintError(duplicate_message) from e
        await self.db.refresh(obj)
        return obj

    async def get_event(self, event_id: UUID) -> Optional[Event]:
        return await self.db.get(Event, event_id)

    async def add_event(self, event: Event) -> Event:
        return await self._insert(event, "Event code already exists")

    async def get_attendee(self, attendee_id: UUID) -> Optional[Attendee]:
        return await self.db.get(Attendee, attendee_id)

    async def get_booth(self, booth_id: UUID) -> Optional[Booth]:
        return await self.db.get(Booth, booth_id)

    async def find_attendee_by_token(self, token: str) -> Optional[Attendee]:
        result = await self.db.execute(
            select(Attendee).where(Attendee.qr_code_token == token)
        )
        return result.scalar_one_or_none()

    async def find_booth_by_token(self, token: str) -> Optional[Booth]:
        result = await self.db.execute(
            select(Booth).where(Booth.qr_code_token == token)
        )
        return result.scalar_one_or_none()

    async def token_exists(self, token: str) -> bool:
        stmt = select(
            or_(
                exists().where(Attendee.qr_code_token == token),
                exists().where(Booth.qr_code_token == token),
            )
        )
        return bool(await self.db.scalar(stmt))

    async def add_attendee(self, attendee: Attendee) -> Attendee:
        return await self._insert(attendee, "Attendee email or QR token already registered for this event")

    async def add_booth(self, booth: Booth) -> Booth:
        return await self._insert(booth, "Booth number or QR token already registered for this event")

    async def list_attendees(self, event_id: UUID) -> List[Attendee]:
        result = await self.db.execute(
            select(Attendee)
            .where(Attendee.event_id == event_id)
            .order_by(Attendee.name.asc())
        )
        return list(result.scalars().all())

    async def list_booths(self, event_id: UUID) -> List[Booth]:
        result = await self.db.execute(
            select(Booth)
            .where(Booth.event_id == event_id)
            .order_by(Booth.booth_number.asc())
        )
        return list(result.scalars().all())

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
        self.db.add(rec)
        await self.db.commit()
        return rec

    async def last_scan_for_pair(self, attendee_id: UUID, booth_id: UUID) -> Optional[ScanRecord]:
        result = await self.db.execute(
            select(ScanRecord)
            .where(ScanRecord.attendee_id == attendee_id, ScanRecord.booth_id == booth_id)
            .order_by(ScanRecord.scanned_at.desc())
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def list_scans(
        self,
        event_id: Optional[UUID] = None,
        booth_id: Optional[UUID] = None,
        attendee_id: Optional[UUID] = None,
    ) -> List[ScanRecord]:
        query = select(ScanRecord)
        if event_id:
            query = query.where(ScanRecord.event_id == event_id)
        if booth_id:
            query = query.where(ScanRecord.booth_id == booth_id)
        if attendee_id:
            query = query.where(ScanRecord.attendee_id == attendee_id)
        result = await self.db.execute(query.order_by(ScanRecord.scanned_at.asc()))
        return list(result.scalars().all())
