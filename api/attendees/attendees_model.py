from sqlalchemy import Column, String, DateTime, ForeignKey, UniqueConstraint, Uuid, func
import uuid
from config.database import Base


class Attendee(Base):
    __tablename__ = "attendees"
    __table_args__ = (
        # Same email may register for different events, never twice for one
        UniqueConstraint("event_id", "email", name="uq_attendee_event_email"),
    )

    id            = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    event_id      = Column(Uuid(as_uuid=True), ForeignKey("events.id", ondelete="CASCADE"), nullable=False, index=True)
    name          = Column(String(100), nullable=False)
    email         = Column(String(255), nullable=True)
    company       = Column(String(200), nullable=True)
    title         = Column(String(100), nullable=True)
    phone         = Column(String(50), nullable=True)
    qr_code_token = Column(String(255), nullable=False, unique=True)
    badge_number  = Column(String(50), nullable=True)
    created_at    = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at    = Column(DateTime(timezone=True), nullable=False,
                           server_default=func.now(), onupdate=func.now())
