from sqlalchemy import Column, String, Text, DateTime, ForeignKey, UniqueConstraint, Uuid, func
import uuid
from config.database import Base


class Booth(Base):
    __tablename__ = "booths"
    __table_args__ = (
        UniqueConstraint("event_id", "booth_number", name="uq_booth_event_number"),
    )

    id            = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    event_id      = Column(Uuid(as_uuid=True), ForeignKey("events.id", ondelete="CASCADE"), nullable=False, index=True)
    booth_number  = Column(String(50), nullable=False)
    booth_name    = Column(String(200), nullable=False)
    company       = Column(String(200), nullable=True)
    description   = Column(Text, nullable=True)
    location      = Column(String(200), nullable=True)
    qr_code_token = Column(String(255), nullable=False, unique=True)
    created_at    = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
