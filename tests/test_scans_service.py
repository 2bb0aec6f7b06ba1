import logging
import uuid

import pytest

from api.scans.scans_service import ScanService
from helpers.token_helper import TokenKind, issue_token
from utils.errors import CrossEventMismatchError, EntityNotFoundError, ErrorCode, InvalidTokenError
from tests.fakes import utc


@pytest.fixture
def scans(store, clock):
    return ScanService(store, clock=clock, duplicate_window_seconds=5)


class TestRecordScan:
    @pytest.mark.asyncio
    async def test_records_a_first_visit(self, scans, store, event, make_attendee, make_booth):
        attendee = await make_attendee(event, "Ada")
        booth = await make_booth(event, "A-01")

        outcome = await scans.record_scan(attendee.qr_code_token, booth.qr_code_token, event.id, notes="demo")

        assert outcome.is_first_visit
        assert not outcome.is_rapid_repeat
        assert outcome.attendee is attendee and outcome.booth is booth
        assert outcome.record.attendee_id == attendee.id
        assert outcome.record.booth_id == booth.id
        assert outcome.record.event_id == event.id
        assert outcome.record.scanned_at == utc(2025, 3, 10, 9, 0, 0)
        assert outcome.record.notes == "demo"
        assert store.scans == [outcome.record]

    @pytest.mark.asyncio
    async def test_second_visit_is_appended_not_merged(self, scans, store, clock, event, make_attendee, make_booth):
        attendee = await make_attendee(event, "Ada")
        booth = await make_booth(event, "A-01")
        clock.set(utc(2025, 3, 10, 9, 0), utc(2025, 3, 10, 11, 0))

        first = await scans.record_scan(attendee.qr_code_token, booth.qr_code_token, event.id)
        second = await scans.record_scan(attendee.qr_code_token, booth.qr_code_token, event.id)

        assert not second.is_first_visit
        assert not second.is_rapid_repeat
        assert len(store.scans) == 2
        assert first.record.id != second.record.id
        assert first.record.scanned_at == utc(2025, 3, 10, 9, 0)

    @pytest.mark.asyncio
    async def test_rapid_repeat_is_recorded_and_flagged(
        self, scans, store, clock, event, make_attendee, make_booth, caplog
    ):
        attendee = await make_attendee(event, "Ada")
        booth = await make_booth(event, "A-01")
        clock.set(utc(2025, 3, 10, 9, 0, 0), utc(2025, 3, 10, 9, 0, 3))

        await scans.record_scan(attendee.qr_code_token, booth.qr_code_token, event.id)
        with caplog.at_level(logging.WARNING, logger="api.scans.scans_service"):
            repeat = await scans.record_scan(attendee.qr_code_token, booth.qr_code_token, event.id)

        assert repeat.is_rapid_repeat
        assert len(store.scans) == 2
        assert "Rapid repeat scan" in caplog.text

    @pytest.mark.asyncio
    async def test_rapid_repeat_window_is_per_booth(self, scans, clock, event, make_attendee, make_booth):
        attendee = await make_attendee(event, "Ada")
        x = await make_booth(event, "X")
        y = await make_booth(event, "Y")
        clock.set(utc(2025, 3, 10, 9, 0, 0), utc(2025, 3, 10, 9, 0, 1))

        await scans.record_scan(attendee.qr_code_token, x.qr_code_token, event.id)
        other = await scans.record_scan(attendee.qr_code_token, y.qr_code_token, event.id)

        assert other.is_first_visit
        assert not other.is_rapid_repeat

    @pytest.mark.asyncio
    async def test_unknown_attendee_token(self, scans, store, event, make_booth):
        booth = await make_booth(event, "A-01")

        with pytest.raises(InvalidTokenError) as exc:
            await scans.record_scan("garbage", booth.qr_code_token, event.id)

        assert exc.value.code == ErrorCode.INVALID_TOKEN
        assert exc.value.role == "attendee"
        assert "not recognized" in exc.value.message
        assert store.scans == []

    @pytest.mark.asyncio
    async def test_swapped_tokens_are_rejected(self, scans, store, event, make_attendee, make_booth):
        attendee = await make_attendee(event, "Ada")
        booth = await make_booth(event, "A-01")

        with pytest.raises(InvalidTokenError) as exc:
            await scans.record_scan(booth.qr_code_token, attendee.qr_code_token, event.id)

        assert exc.value.role == "attendee"
        assert store.scans == []

    @pytest.mark.asyncio
    async def test_unknown_booth_token(self, scans, store, event, make_attendee):
        attendee = await make_attendee(event, "Ada")

        with pytest.raises(InvalidTokenError) as exc:
            await scans.record_scan(attendee.qr_code_token, issue_token(TokenKind.booth), event.id)

        assert exc.value.role == "booth"
        assert store.scans == []

    @pytest.mark.asyncio
    async def test_unknown_event(self, scans, store, event, other_event, make_attendee, make_booth):
        attendee = await make_attendee(event, "Ada")
        booth = await make_booth(event, "A-01")
        del store.events[other_event.id]

        with pytest.raises(EntityNotFoundError):
            await scans.record_scan(attendee.qr_code_token, booth.qr_code_token, other_event.id)

    @pytest.mark.asyncio
    async def test_booth_from_another_event(self, scans, store, event, other_event, make_attendee, make_booth):
        attendee = await make_attendee(event, "Ada")
        booth = await make_booth(other_event, "A-01")

        with pytest.raises(CrossEventMismatchError) as exc:
            await scans.record_scan(attendee.qr_code_token, booth.qr_code_token, event.id)

        assert exc.value.mismatched == ["booth"]
        assert exc.value.message == "Booth does not belong to this event"
        assert store.scans == []

    @pytest.mark.asyncio
    async def test_both_sides_from_another_event(self, scans, store, event, other_event, make_attendee, make_booth):
        attendee = await make_attendee(other_event, "Ada")
        booth = await make_booth(other_event, "A-01")

        with pytest.raises(CrossEventMismatchError) as exc:
            await scans.record_scan(attendee.qr_code_token, booth.qr_code_token, event.id)

        assert exc.value.mismatched == ["attendee", "booth"]
        assert store.scans == []


class TestScanQueries:
    @pytest.mark.asyncio
    async def test_list_scans_newest_first(self, scans, clock, event, make_attendee, make_booth):
        ada = await make_attendee(event, "Ada")
        bob = await make_attendee(event, "Bob")
        booth = await make_booth(event, "A-01")
        clock.set(utc(2025, 3, 10, 9, 0), utc(2025, 3, 10, 10, 0))

        await scans.record_scan(ada.qr_code_token, booth.qr_code_token, event.id)
        await scans.record_scan(bob.qr_code_token, booth.qr_code_token, event.id)

        rows = await scans.list_scans(booth_id=booth.id)
        assert [r.attendee_id for r in rows] == [bob.id, ada.id]

        rows = await scans.list_scans(attendee_id=ada.id)
        assert [r.attendee_id for r in rows] == [ada.id]

    @pytest.mark.asyncio
    async def test_attendee_journey_in_scan_order(self, scans, clock, event, make_attendee, make_booth):
        ada = await make_attendee(event, "Ada")
        x = await make_booth(event, "X", "Xylophones")
        y = await make_booth(event, "Y", "Yachts")
        clock.set(utc(2025, 3, 10, 9, 0), utc(2025, 3, 10, 9, 30), utc(2025, 3, 10, 10, 0))

        await scans.record_scan(ada.qr_code_token, y.qr_code_token, event.id)
        await scans.record_scan(ada.qr_code_token, x.qr_code_token, event.id)
        await scans.record_scan(ada.qr_code_token, y.qr_code_token, event.id)

        journey = await scans.attendee_journey(ada.id)

        assert [step["booth_name"] for step in journey] == ["Yachts", "Xylophones", "Yachts"]
        assert journey[0]["scanned_at"] == utc(2025, 3, 10, 9, 0)

    @pytest.mark.asyncio
    async def test_journey_for_unknown_attendee(self, scans):
        with pytest.raises(EntityNotFoundError):
            await scans.attendee_journey(uuid.uuid4())
