# api/analytics/analytics_service.py

"""
Read-only statistics over the scan log.

Every view pulls the rows it needs through the store and groups them in
memory. Distinct counts are over identifiers, totals are over rows (repeat
scans included). Calendar buckets are taken in the reporting timezone.
"""

from collections import defaultdict
from datetime import date, datetime, tzinfo
from typing import Callable, Dict, Iterable, List, Optional
from uuid import UUID

from api.scans.scan_records_model import ScanRecord
from config.settings import settings
from stores.interfaces import CheckinStore
from utils.errors import EntityNotFoundError
from utils.time_utils import as_utc, local_date, local_hour, utc_now


def _pct(part: float, whole: float) -> float:
    return round(part / whole * 100, 2) if whole else 0.0


def _ratio(part: float, whole: float) -> float:
    return round(part / whole, 2) if whole else 0.0


class _Bucket:
    __slots__ = ("attendees", "booths", "total", "first", "last")

    def __init__(self):
        self.attendees = set()
        self.booths = set()
        self.total = 0
        self.first = None
        self.last = None

    def add(self, rec: ScanRecord) -> None:
        at = as_utc(rec.scanned_at)
        self.attendees.add(rec.attendee_id)
        self.booths.add(rec.booth_id)
        self.total += 1
        if self.first is None or at < self.first:
            self.first = at
        if self.last is None or at > self.last:
            self.last = at


def _group(rows: Iterable[ScanRecord], key) -> Dict:
    buckets = defaultdict(_Bucket)
    for rec in rows:
        buckets[key(rec)].add(rec)
    return buckets


class AnalyticsService:
    def __init__(
        self,
        store: CheckinStore,
        tz: Optional[tzinfo] = None,
        top_limit: Optional[int] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.store = store
        self.tz = tz or settings.report_tz
        self.top_limit = settings.TOP_RANKING_LIMIT if top_limit is None else top_limit
        self.clock = clock

    def _limit(self, limit: Optional[int]) -> int:
        return self.top_limit if limit is None else limit

    # ─── Loaders ────────────────────────────────────────────────────────────

    async def _require_event(self, event_id: UUID):
        event = await self.store.get_event(event_id)
        if event is None:
            raise EntityNotFoundError("Event", event_id)
        return event

    async def _require_booth(self, booth_id: UUID):
        booth = await self.store.get_booth(booth_id)
        if booth is None:
            raise EntityNotFoundError("Booth", booth_id)
        return booth

    async def _require_attendee(self, attendee_id: UUID):
        attendee = await self.store.get_attendee(attendee_id)
        if attendee is None:
            raise EntityNotFoundError("Attendee", attendee_id)
        return attendee

    # ─── Per-entity views ───────────────────────────────────────────────────

    async def attendee_stats(self, attendee_id: UUID) -> dict:
        """Booths visited, total scans and last scan for one attendee."""
        await self._require_attendee(attendee_id)
        bucket = _Bucket()
        for rec in await self.store.list_scans(attendee_id=attendee_id):
            bucket.add(rec)
        return {
            "entity_id": attendee_id,
            "counterpart_count": len(bucket.booths),
            "total_scans": bucket.total,
            "last_scan": bucket.last,
        }

    async def booth_stats(self, booth_id: UUID) -> dict:
        """Unique visitors, total scans and last scan for one booth."""
        await self._require_booth(booth_id)
        bucket = _Bucket()
        for rec in await self.store.list_scans(booth_id=booth_id):
            bucket.add(rec)
        return {
            "entity_id": booth_id,
            "counterpart_count": len(bucket.attendees),
            "total_scans": bucket.total,
            "last_scan": bucket.last,
        }

    async def daily_histogram(
        self,
        booth_id: UUID,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        tz: Optional[tzinfo] = None,
    ) -> List[dict]:
        await self._require_booth(booth_id)
        tz = tz or self.tz
        buckets = _group(
            await self.store.list_scans(booth_id=booth_id),
            lambda rec: local_date(rec.scanned_at, tz),
        )
        return [
            {"date": day, "unique_visitors": len(b.attendees), "total_scans": b.total}
            for day, b in sorted(buckets.items())
            if (start_date is None or day >= start_date)
            and (end_date is None or day <= end_date)
        ]

    async def hourly_histogram(
        self,
        booth_id: UUID,
        on_date: Optional[date] = None,
        tz: Optional[tzinfo] = None,
    ) -> List[dict]:
        await self._require_booth(booth_id)
        tz = tz or self.tz
        rows = await self.store.list_scans(booth_id=booth_id)
        if on_date is not None:
            rows = [rec for rec in rows if local_date(rec.scanned_at, tz) == on_date]
        buckets = _group(rows, lambda rec: local_hour(rec.scanned_at, tz))
        return [
            {"hour": hour, "unique_visitors": len(b.attendees), "total_scans": b.total}
            for hour, b in sorted(buckets.items())
        ]

    async def repeat_visitors(self, booth_id: UUID) -> List[dict]:
        """Attendees scanned more than once at this booth, most visits first."""
        booth = await self._require_booth(booth_id)
        buckets = _group(
            await self.store.list_scans(booth_id=booth_id),
            lambda rec: rec.attendee_id,
        )
        attendees = {a.id: a for a in await self.store.list_attendees(booth.event_id)}

        rows = []
        for attendee_id, b in buckets.items():
            if b.total <= 1:
                continue
            attendee = attendees.get(attendee_id)
            rows.append({
                "attendee_id": attendee_id,
                "attendee_name": attendee.name if attendee else None,
                "attendee_company": attendee.company if attendee else None,
                "visit_count": b.total,
                "first_visit": b.first,
                "last_visit": b.last,
            })
        rows.sort(key=lambda r: (-r["visit_count"], r["first_visit"], str(r["attendee_id"])))
        return rows

    async def booth_correlation(self, booth_id: UUID, limit: Optional[int] = None) -> List[dict]:
        """Other booths this booth's visitors also went to, by shared visitors."""
        booth = await self._require_booth(booth_id)
        scans = await self.store.list_scans(event_id=booth.event_id)
        visitors = {rec.attendee_id for rec in scans if rec.booth_id == booth_id}
        buckets = _group(
            (rec for rec in scans if rec.attendee_id in visitors and rec.booth_id != booth_id),
            lambda rec: rec.booth_id,
        )
        booths = {b.id: b for b in await self.store.list_booths(booth.event_id)}

        rows = []
        for other_id, b in buckets.items():
            other = booths.get(other_id)
            rows.append({
                "booth_id": other_id,
                "booth_number": other.booth_number if other else None,
                "booth_name": other.booth_name if other else None,
                "company": other.company if other else None,
                "common_visitors": len(b.attendees),
            })
        rows.sort(key=lambda r: (-r["common_visitors"], r["booth_number"] or ""))
        return rows[:self._limit(limit)]

    async def attendee_interactions(self, attendee_id: UUID, limit: Optional[int] = None) -> List[dict]:
        """Other attendees seen at the same booths, by number of booths shared."""
        attendee = await self._require_attendee(attendee_id)
        scans = await self.store.list_scans(event_id=attendee.event_id)
        visited = {rec.booth_id for rec in scans if rec.attendee_id == attendee_id}
        buckets = _group(
            (rec for rec in scans if rec.booth_id in visited and rec.attendee_id != attendee_id),
            lambda rec: rec.attendee_id,
        )
        attendees = {a.id: a for a in await self.store.list_attendees(attendee.event_id)}

        rows = []
        for other_id, b in buckets.items():
            other = attendees.get(other_id)
            rows.append({
                "attendee_id": other_id,
                "attendee_name": other.name if other else None,
                "attendee_company": other.company if other else None,
                "common_booths": len(b.booths),
            })
        rows.sort(key=lambda r: (-r["common_booths"], r["attendee_name"] or ""))
        return rows[:self._limit(limit)]

    # ─── Event-wide views ───────────────────────────────────────────────────

    async def _booth_rows(self, event_id: UUID) -> List[dict]:
        booths = await self.store.list_booths(event_id)
        buckets = _group(
            await self.store.list_scans(event_id=event_id),
            lambda rec: rec.booth_id,
        )
        rows = []
        for booth in booths:
            b = buckets.get(booth.id) or _Bucket()
            unique = len(b.attendees)
            rows.append({
                "booth_id": booth.id,
                "booth_number": booth.booth_number,
                "booth_name": booth.booth_name,
                "company": booth.company,
                "location": booth.location,
                "unique_visitors": unique,
                "total_scans": b.total,
                "first_visit": b.first,
                "last_visit": b.last,
                "repeat_visit_rate": round((1 - unique / b.total) * 100, 2) if b.total else 0.0,
            })
        return rows

    async def event_booth_stats(self, event_id: UUID) -> dict:
        """Booth coverage for an event plus the most and least visited booths."""
        await self._require_event(event_id)
        rows = await self._booth_rows(event_id)
        with_scans = sum(1 for r in rows if r["total_scans"] > 0)

        ranked = sorted(rows, key=lambda r: (-r["unique_visitors"], -r["total_scans"], r["booth_number"]))
        least = sorted(rows, key=lambda r: (r["unique_visitors"], r["total_scans"], r["booth_number"]))
        return {
            "total": len(rows),
            "with_scans": with_scans,
            "without_scans": len(rows) - with_scans,
            "top_booths": ranked[:self.top_limit],
            "least_visited_booths": least[:self.top_limit],
            "no_visitor_booths": [r for r in least if r["total_scans"] == 0],
        }

    async def event_attendee_stats(self, event_id: UUID) -> dict:
        """Attendee coverage for an event plus the company ranking."""
        await self._require_event(event_id)
        attendees = await self.store.list_attendees(event_id)
        scans = await self.store.list_scans(event_id=event_id)
        scanned = {rec.attendee_id for rec in scans}
        with_scans = sum(1 for a in attendees if a.id in scanned)
        return {
            "total": len(attendees),
            "with_scans": with_scans,
            "without_scans": len(attendees) - with_scans,
            "top_companies": self._company_ranking(attendees, scans),
        }

    def _company_ranking(self, attendees, scans: List[ScanRecord]) -> List[dict]:
        company_of = {a.id: a.company for a in attendees if a.company}
        buckets = _group(
            (rec for rec in scans if rec.attendee_id in company_of),
            lambda rec: company_of[rec.attendee_id],
        )
        rows = [
            {
                "company": company,
                "unique_visitors": len(b.attendees),
                "visited_booths": len(b.booths),
                "total_scans": b.total,
            }
            for company, b in buckets.items()
        ]
        rows.sort(key=lambda r: (-r["unique_visitors"], -r["total_scans"], r["company"]))
        return rows[:self.top_limit]

    async def top_attendees(self, event_id: UUID, limit: Optional[int] = None) -> List[dict]:
        """Most active attendees by distinct booths visited, then by scans."""
        await self._require_event(event_id)
        attendees = {a.id: a for a in await self.store.list_attendees(event_id)}
        buckets = _group(
            await self.store.list_scans(event_id=event_id),
            lambda rec: rec.attendee_id,
        )
        rows = []
        for attendee_id, b in buckets.items():
            attendee = attendees.get(attendee_id)
            rows.append({
                "attendee_id": attendee_id,
                "name": attendee.name if attendee else None,
                "company": attendee.company if attendee else None,
                "badge_number": attendee.badge_number if attendee else None,
                "visited_booths": len(b.booths),
                "total_scans": b.total,
                "first_scan": b.first,
                "last_scan": b.last,
            })
        rows.sort(key=lambda r: (-r["visited_booths"], -r["total_scans"], r["name"] or ""))
        return rows[:self._limit(limit)]

    async def event_summary(self, event_id: UUID) -> dict:
        event = await self._require_event(event_id)
        total_attendees = len(await self.store.list_attendees(event_id))
        total_booths = len(await self.store.list_booths(event_id))
        scans = await self.store.list_scans(event_id=event_id)

        active_attendees = len({rec.attendee_id for rec in scans})
        active_booths = len({rec.booth_id for rec in scans})
        return {
            "event": {
                "id": event.id,
                "event_name": event.event_name,
                "event_code": event.event_code,
                "start_date": event.start_date,
                "end_date": event.end_date,
                "status": event.status,
            },
            "overview": {
                "total_attendees": total_attendees,
                "active_attendees": active_attendees,
                "inactive_attendees": total_attendees - active_attendees,
                "attendee_participation_rate": _pct(active_attendees, total_attendees),
                "total_booths": total_booths,
                "active_booths": active_booths,
                "inactive_booths": total_booths - active_booths,
                "booth_participation_rate": _pct(active_booths, total_booths),
                "total_scans": len(scans),
                "avg_scans_per_attendee": _ratio(len(scans), active_attendees),
                "avg_visitors_per_booth": _ratio(active_attendees, active_booths),
            },
        }

    async def peak_hours(
        self,
        event_id: UUID,
        on_date: Optional[date] = None,
        tz: Optional[tzinfo] = None,
    ) -> dict:
        """Event-wide hourly traffic and the busiest hour."""
        await self._require_event(event_id)
        tz = tz or self.tz
        rows = await self.store.list_scans(event_id=event_id)
        if on_date is not None:
            rows = [rec for rec in rows if local_date(rec.scanned_at, tz) == on_date]
        buckets = _group(rows, lambda rec: local_hour(rec.scanned_at, tz))
        hourly = [
            {
                "hour": hour,
                "unique_visitors": len(b.attendees),
                "active_booths": len(b.booths),
                "total_scans": b.total,
            }
            for hour, b in sorted(buckets.items())
        ]
        # max() keeps the earliest hour on ties
        peak = max(hourly, key=lambda h: h["total_scans"]) if hourly else None
        return {"event_id": event_id, "hourly": hourly, "peak_hour": peak}

    async def event_daily_stats(
        self,
        event_id: UUID,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        tz: Optional[tzinfo] = None,
    ) -> List[dict]:
        await self._require_event(event_id)
        tz = tz or self.tz
        buckets = _group(
            await self.store.list_scans(event_id=event_id),
            lambda rec: local_date(rec.scanned_at, tz),
        )
        return [
            {
                "date": day,
                "unique_visitors": len(b.attendees),
                "active_booths": len(b.booths),
                "total_scans": b.total,
            }
            for day, b in sorted(buckets.items())
            if (start_date is None or day >= start_date)
            and (end_date is None or day <= end_date)
        ]

    async def event_realtime_stats(self, event_id: UUID, recent_limit: int = 10) -> dict:
        """Running totals, today's scan count and the newest scans for an event."""
        await self._require_event(event_id)
        scans = await self.store.list_scans(event_id=event_id)
        today = local_date(self.clock(), self.tz)
        attendees = {a.id: a for a in await self.store.list_attendees(event_id)}
        booths = {b.id: b for b in await self.store.list_booths(event_id)}

        recent = []
        for rec in sorted(scans, key=lambda r: as_utc(r.scanned_at), reverse=True)[:recent_limit]:
            attendee = attendees.get(rec.attendee_id)
            booth = booths.get(rec.booth_id)
            recent.append({
                "scan_id": rec.id,
                "attendee_id": rec.attendee_id,
                "attendee_name": attendee.name if attendee else None,
                "booth_id": rec.booth_id,
                "booth_number": booth.booth_number if booth else None,
                "booth_name": booth.booth_name if booth else None,
                "scanned_at": as_utc(rec.scanned_at),
            })
        return {
            "event_id": event_id,
            "total_scans": len(scans),
            "unique_visitors": len({rec.attendee_id for rec in scans}),
            "active_booths": len({rec.booth_id for rec in scans}),
            "today_scans": sum(1 for rec in scans if local_date(rec.scanned_at, self.tz) == today),
            "recent_scans": recent,
        }

    async def underperforming_booths(self, event_id: UUID) -> dict:
        """
        Booths with no visitors, and visited booths whose distinct visitor
        count is below the mean over visited booths.
        """
        await self._require_event(event_id)
        rows = await self._booth_rows(event_id)
        visited = [r for r in rows if r["total_scans"] > 0]
        average = sum(r["unique_visitors"] for r in visited) / len(visited) if visited else 0.0

        no_visitors = sorted(
            (r for r in rows if r["total_scans"] == 0),
            key=lambda r: r["booth_number"],
        )
        below = sorted(
            (r for r in visited if r["unique_visitors"] < average),
            key=lambda r: (r["unique_visitors"], r["total_scans"], r["booth_number"]),
        )
        return {
            "event_id": event_id,
            "average_visitors": round(average, 2),
            "no_visitor_booths": no_visitors,
            "below_average_booths": below,
            "total_underperforming": len(no_visitors) + len(below),
        }
