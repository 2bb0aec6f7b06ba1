from sqlalchemy import Column, Text, DateTime, ForeignKey, Index, Uuid
import uuid
from config.database import Base


class ScanRecord(Base):
    """One attendee seen at one booth. Rows are append-only."""

    __tablename__ = "scan_records"
    __table_args__ = (
        Index("ix_scan_records_booth_scanned_at", "booth_id", "scanned_at"),
        Index("ix_scan_records_attendee_scanned_at", "attendee_id", "scanned_at"),
    )

    id          = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    attendee_id = Column(Uuid(as_uuid=True), ForeignKey("attendees.id", ondelete="CASCADE"), nullable=False)
    booth_id    = Column(Uuid(as_uuid=True), ForeignKey("booths.id", ondelete="CASCADE"), nullable=False)
    event_id    = Column(Uuid(as_uuid=True), ForeignKey("events.id", ondelete="CASCADE"), nullable=False, index=True)
    scanned_at  = Column(DateTime(timezone=True), nullable=False)
    notes       = Column(Text, nullable=True)

    def __init__(self, attendee_id, booth_id, event_id, scanned_at, notes=None, id=None):
        self.id          = id or uuid.uuid4()
        self.attendee_id = attendee_id
        self.booth_id    = booth_id
        self.event_id    = event_id
        self.scanned_at  = scanned_at
        self.notes       = notes
