# Every table module, imported once so Base.metadata is complete for
# create_all and for alembic autogenerate.
from config.database import engine, SessionLocal, Base
from api.events.events_model import Event
from api.attendees.attendees_model import Attendee
from api.booths.booths_model import Booth
from api.scans.scan_records_model import ScanRecord

models = {
    model.__tablename__: model
    for model in (Event, Attendee, Booth, ScanRecord)
}

__all__ = ["engine", "SessionLocal", "Base", "models"]
