# api/analytics/analytics_routes.py

from datetime import date
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from api.analytics.analytics_controller import AnalyticsController
from api.analytics.analytics_schema import (
    AttendeeInteractionOut,
    AttendeeRankingOut,
    BoothCorrelationOut,
    DailyBucketOut,
    EntityStatsOut,
    EventAttendeeStatsOut,
    EventBoothStatsOut,
    EventDailyBucketOut,
    EventSummaryOut,
    HourlyBucketOut,
    PeakHoursOut,
    RealtimeStatsOut,
    RepeatVisitorOut,
    UnderperformingBoothsOut,
)
from stores.interfaces import CheckinStore
from utils.deps import get_store

router = APIRouter(tags=["analytics"])


# ─── Attendee / booth views ──────────────────────────────────────────────────

@router.get(
    "/attendees/{attendee_id}/stats",
    response_model=EntityStatsOut,
    summary="Distinct booths visited, total scans and last scan for an attendee",
)
async def get_attendee_stats(
    attendee_id: UUID,
    store: CheckinStore = Depends(get_store),
) -> EntityStatsOut:
    return await AnalyticsController.attendee_stats(attendee_id, store)


@router.get(
    "/booths/{booth_id}/stats",
    response_model=EntityStatsOut,
    summary="Unique visitors, total scans and last scan for a booth",
)
async def get_booth_stats(
    booth_id: UUID,
    store: CheckinStore = Depends(get_store),
) -> EntityStatsOut:
    return await AnalyticsController.booth_stats(booth_id, store)


@router.get("/booths/{booth_id}/daily", response_model=List[DailyBucketOut])
async def get_booth_daily_histogram(
    booth_id: UUID,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    store: CheckinStore = Depends(get_store),
) -> List[DailyBucketOut]:
    return await AnalyticsController.daily_histogram(booth_id, store, start_date, end_date)


@router.get("/booths/{booth_id}/hourly", response_model=List[HourlyBucketOut])
async def get_booth_hourly_histogram(
    booth_id: UUID,
    on_date: Optional[date] = Query(None, alias="date"),
    store: CheckinStore = Depends(get_store),
) -> List[HourlyBucketOut]:
    return await AnalyticsController.hourly_histogram(booth_id, store, on_date)


@router.get(
    "/booths/{booth_id}/repeat-visitors",
    response_model=List[RepeatVisitorOut],
    summary="Attendees scanned more than once at this booth",
)
async def get_booth_repeat_visitors(
    booth_id: UUID,
    store: CheckinStore = Depends(get_store),
) -> List[RepeatVisitorOut]:
    return await AnalyticsController.repeat_visitors(booth_id, store)


@router.get(
    "/booths/{booth_id}/correlation",
    response_model=List[BoothCorrelationOut],
    summary="Other booths visited by this booth's visitors",
)
async def get_booth_correlation(
    booth_id: UUID,
    limit: Optional[int] = Query(None, ge=1, le=200),
    store: CheckinStore = Depends(get_store),
) -> List[BoothCorrelationOut]:
    return await AnalyticsController.booth_correlation(booth_id, store, limit)


@router.get(
    "/attendees/{attendee_id}/interactions",
    response_model=List[AttendeeInteractionOut],
    summary="Other attendees who visited the same booths",
)
async def get_attendee_interactions(
    attendee_id: UUID,
    limit: Optional[int] = Query(None, ge=1, le=200),
    store: CheckinStore = Depends(get_store),
) -> List[AttendeeInteractionOut]:
    return await AnalyticsController.attendee_interactions(attendee_id, store, limit)


# ─── Event-wide views ────────────────────────────────────────────────────────

@router.get(
    "/events/{event_id}/booth-stats",
    response_model=EventBoothStatsOut,
    summary="Booth coverage with top and least visited booths",
)
async def get_event_booth_stats(
    event_id: UUID,
    store: CheckinStore = Depends(get_store),
):
    return await AnalyticsController.event_booth_stats(event_id, store)


@router.get(
    "/events/{event_id}/attendee-stats",
    response_model=EventAttendeeStatsOut,
    summary="Attendee coverage with the company ranking",
)
async def get_event_attendee_stats(
    event_id: UUID,
    store: CheckinStore = Depends(get_store),
):
    return await AnalyticsController.event_attendee_stats(event_id, store)


@router.get("/events/{event_id}/summary", response_model=EventSummaryOut)
async def get_event_summary(
    event_id: UUID,
    store: CheckinStore = Depends(get_store),
):
    return await AnalyticsController.event_summary(event_id, store)


@router.get("/events/{event_id}/rankings/attendees", response_model=List[AttendeeRankingOut])
async def get_attendee_ranking(
    event_id: UUID,
    limit: Optional[int] = Query(None, ge=1, le=200),
    store: CheckinStore = Depends(get_store),
) -> List[AttendeeRankingOut]:
    return await AnalyticsController.top_attendees(event_id, store, limit)


@router.get("/events/{event_id}/peak-hours", response_model=PeakHoursOut)
async def get_event_peak_hours(
    event_id: UUID,
    on_date: Optional[date] = Query(None, alias="date"),
    store: CheckinStore = Depends(get_store),
) -> PeakHoursOut:
    return await AnalyticsController.peak_hours(event_id, store, on_date)


@router.get("/events/{event_id}/daily", response_model=List[EventDailyBucketOut])
async def get_event_daily_stats(
    event_id: UUID,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    store: CheckinStore = Depends(get_store),
) -> List[EventDailyBucketOut]:
    return await AnalyticsController.event_daily_stats(event_id, store, start_date, end_date)


@router.get(
    "/events/{event_id}/realtime",
    response_model=RealtimeStatsOut,
    summary="Running totals, today's scans and the latest scans",
)
async def get_event_realtime_stats(
    event_id: UUID,
    store: CheckinStore = Depends(get_store),
) -> RealtimeStatsOut:
    return await AnalyticsController.event_realtime_stats(event_id, store)


@router.get(
    "/events/{event_id}/underperforming-booths",
    response_model=UnderperformingBoothsOut,
    summary="Booths with no visitors or fewer visitors than the event average",
)
async def get_underperforming_booths(
    event_id: UUID,
    store: CheckinStore = Depends(get_store),
) -> UnderperformingBoothsOut:
    return await AnalyticsController.underperforming_booths(event_id, store)
