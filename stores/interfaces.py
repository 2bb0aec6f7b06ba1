"""Store interfaces (repository pattern).

Services receive a CheckinStore at construction and never reach for a
session or engine themselves, so every service can run against the
SQLAlchemy store in production and an in-memory store in tests.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from api.attendees.attendees_model import Attendee
from api.booths.booths_model import Booth
from api.events.events_model import Event
from api.scans.scan_records_model import ScanRecord


class CheckinStore(ABC):
    """Interface for event, attendee, booth and scan-log persistence."""

    # Events

    @abstractmethod
    async def get_event(self, event_id: UUID) -> Optional[Event]:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    async def add_event(self, event: Event) -> Event:
        """Persist a new event.

        Raises:
            DuplicateConstraintError: If the event code is taken.
        """
        ...

    # Attendees and booths

    @abstractmethod
    async def get_attendee(self, attendee_id: UUID) -> Optional[Attendee]:
        ...

    @abstractmethod
    async def get_booth(self, booth_id: UUID) -> Optional[Booth]:
        ...

    @abstractmethod
    async def find_attendee_by_token(self, token: str) -> Optional[Attendee]:
        """Return the attendee holding this QR token, or None."""
        ...

    @abstractmethod
    async def find_booth_by_token(self, token: str) -> Optional[Booth]:
        """Return the booth holding this QR token, or None."""
        ...

    @abstractmethod
    async def token_exists(self, token: str) -> bool:
        """Check whether any attendee or booth already holds the token."""
        ...

    @abstractmethod
    async def add_attendee(self, attendee: Attendee) -> Attendee:
        """Persist a new attendee.

        Raises:
            DuplicateConstraintError: On a taken token or (event, email) pair.
        """
        ...

    @abstractmethod
    async def add_booth(self, booth: Booth) -> Booth:
        """Persist a new booth.

        Raises:
            DuplicateConstraintError: On a taken token or (event, booth number) pair.
        """
        ...

    @abstractmethod
    async def list_attendees(self, event_id: UUID) -> List[Attendee]:
        """Return all attendees of an event ordered by name."""
        ...

    @abstractmethod
    async def list_booths(self, event_id: UUID) -> List[Booth]:
        """Return all booths of an event ordered by booth number."""
        ...

    # Scan log

    @abstractmethod
    async def add_scan(
        self,
        attendee_id: UUID,
        booth_id: UUID,
        event_id: UUID,
        scanned_at: datetime,
        notes: Optional[str] = None,
    ) -> ScanRecord:
        """Append a scan record. Never merges with earlier rows."""
        ...

    @abstractmethod
    async def last_scan_for_pair(self, attendee_id: UUID, booth_id: UUID) -> Optional[ScanRecord]:
        """Return the most recent scan of this attendee at this booth, or None."""
        ...

    @abstractmethod
    async def list_scans(
        self,
        event_id: Optional[UUID] = None,
        booth_id: Optional[UUID] = None,
        attendee_id: Optional[UUID] = None,
    ) -> List[ScanRecord]:
        """Return scans matching every given filter, ordered by scanned_at ascending."""
        ...
