# api/attendees/attendees_controller.py

from typing import List
from uuid import UUID

from api.attendees.attendees_schema import AttendeeCreate, AttendeeOut, JourneyStepOut
from api.attendees.attendees_service import AttendeeService
from api.scans.scans_service import ScanService
from helpers.qr_helper import render_qr_png
from stores.interfaces import CheckinStore


class AttendeeController:
    @staticmethod
    async def create_attendee(
        event_id: UUID,
        payload: AttendeeCreate,
        store: CheckinStore,
    ) -> AttendeeOut:
        attendee = await AttendeeService(store).create_attendee(event_id, payload)
        return AttendeeOut.model_validate(attendee)

    @staticmethod
    async def list_attendees(event_id: UUID, store: CheckinStore) -> List[AttendeeOut]:
        attendees = await AttendeeService(store).list_attendees(event_id)
        return [AttendeeOut.model_validate(a) for a in attendees]

    @staticmethod
    async def get_attendee(attendee_id: UUID, store: CheckinStore) -> AttendeeOut:
        attendee = await AttendeeService(store).get_attendee(attendee_id)
        return AttendeeOut.model_validate(attendee)

    @staticmethod
    async def get_qr_code(attendee_id: UUID, store: CheckinStore) -> bytes:
        attendee = await AttendeeService(store).get_attendee(attendee_id)
        return render_qr_png(attendee.qr_code_token)

    @staticmethod
    async def get_journey(attendee_id: UUID, store: CheckinStore) -> List[JourneyStepOut]:
        steps = await ScanService(store).attendee_journey(attendee_id)
        return [JourneyStepOut.model_validate(step) for step in steps]
