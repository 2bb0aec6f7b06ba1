# api/analytics/analytics_controller.py

from datetime import date
from typing import List, Optional
from uuid import UUID

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
from api.analytics.analytics_service import AnalyticsService
from stores.interfaces import CheckinStore
from utils.cache_utils import cache_result


class AnalyticsController:
    @staticmethod
    async def attendee_stats(attendee_id: UUID, store: CheckinStore) -> EntityStatsOut:
        stats = await AnalyticsService(store).attendee_stats(attendee_id)
        return EntityStatsOut.model_validate(stats)

    @staticmethod
    async def booth_stats(booth_id: UUID, store: CheckinStore) -> EntityStatsOut:
        stats = await AnalyticsService(store).booth_stats(booth_id)
        return EntityStatsOut.model_validate(stats)

    @staticmethod
    async def daily_histogram(
        booth_id: UUID,
        store: CheckinStore,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> List[DailyBucketOut]:
        rows = await AnalyticsService(store).daily_histogram(booth_id, start_date, end_date)
        return [DailyBucketOut.model_validate(r) for r in rows]

    @staticmethod
    async def hourly_histogram(
        booth_id: UUID,
        store: CheckinStore,
        on_date: Optional[date] = None,
    ) -> List[HourlyBucketOut]:
        rows = await AnalyticsService(store).hourly_histogram(booth_id, on_date)
        return [HourlyBucketOut.model_validate(r) for r in rows]

    @staticmethod
    async def repeat_visitors(booth_id: UUID, store: CheckinStore) -> List[RepeatVisitorOut]:
        rows = await AnalyticsService(store).repeat_visitors(booth_id)
        return [RepeatVisitorOut.model_validate(r) for r in rows]

    @staticmethod
    async def booth_correlation(
        booth_id: UUID,
        store: CheckinStore,
        limit: Optional[int] = None,
    ) -> List[BoothCorrelationOut]:
        rows = await AnalyticsService(store).booth_correlation(booth_id, limit)
        return [BoothCorrelationOut.model_validate(r) for r in rows]

    @staticmethod
    async def attendee_interactions(
        attendee_id: UUID,
        store: CheckinStore,
        limit: Optional[int] = None,
    ) -> List[AttendeeInteractionOut]:
        rows = await AnalyticsService(store).attendee_interactions(attendee_id, limit)
        return [AttendeeInteractionOut.model_validate(r) for r in rows]

    @staticmethod
    @cache_result(key_prefix="event_booth_stats")
    async def event_booth_stats(event_id: UUID, store: CheckinStore) -> EventBoothStatsOut:
        stats = await AnalyticsService(store).event_booth_stats(event_id)
        return EventBoothStatsOut.model_validate(stats)

    @staticmethod
    @cache_result(key_prefix="event_attendee_stats")
    async def event_attendee_stats(event_id: UUID, store: CheckinStore) -> EventAttendeeStatsOut:
        stats = await AnalyticsService(store).event_attendee_stats(event_id)
        return EventAttendeeStatsOut.model_validate(stats)

    @staticmethod
    @cache_result(key_prefix="event_summary")
    async def event_summary(event_id: UUID, store: CheckinStore) -> EventSummaryOut:
        summary = await AnalyticsService(store).event_summary(event_id)
        return EventSummaryOut.model_validate(summary)

    @staticmethod
    async def top_attendees(
        event_id: UUID,
        store: CheckinStore,
        limit: Optional[int] = None,
    ) -> List[AttendeeRankingOut]:
        rows = await AnalyticsService(store).top_attendees(event_id, limit)
        return [AttendeeRankingOut.model_validate(r) for r in rows]

    @staticmethod
    async def peak_hours(
        event_id: UUID,
        store: CheckinStore,
        on_date: Optional[date] = None,
    ) -> PeakHoursOut:
        result = await AnalyticsService(store).peak_hours(event_id, on_date)
        return PeakHoursOut.model_validate(result)

    @staticmethod
    async def event_daily_stats(
        event_id: UUID,
        store: CheckinStore,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> List[EventDailyBucketOut]:
        rows = await AnalyticsService(store).event_daily_stats(event_id, start_date, end_date)
        return [EventDailyBucketOut.model_validate(r) for r in rows]

    @staticmethod
    async def event_realtime_stats(event_id: UUID, store: CheckinStore) -> RealtimeStatsOut:
        stats = await AnalyticsService(store).event_realtime_stats(event_id)
        return RealtimeStatsOut.model_validate(stats)

    @staticmethod
    async def underperforming_booths(event_id: UUID, store: CheckinStore) -> UnderperformingBoothsOut:
        result = await AnalyticsService(store).underperforming_booths(event_id)
        return UnderperformingBoothsOut.model_validate(result)

    @staticmethod
    async def invalidate_event_stats() -> None:
        """Drop cached event-wide views; keys are hashed, so every event's entries go."""
        for view in (
            AnalyticsController.event_booth_stats,
            AnalyticsController.event_attendee_stats,
            AnalyticsController.event_summary,
        ):
            await view.cache_clear()
