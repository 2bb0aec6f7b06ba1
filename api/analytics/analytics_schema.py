# api/analytics/analytics_schema.py

from datetime import date
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from api.events.events_model import EventStatus
from utils.time_utils import UtcDateTime


class EntityStatsOut(BaseModel):
    entity_id: UUID
    counterpart_count: int = Field(..., description="Distinct booths (for an attendee) or visitors (for a booth)")
    total_scans: int
    last_scan: Optional[UtcDateTime] = None


class DailyBucketOut(BaseModel):
    date: date
    unique_visitors: int
    total_scans: int


class HourlyBucketOut(BaseModel):
    hour: int = Field(..., ge=0, le=23)
    unique_visitors: int
    total_scans: int


class RepeatVisitorOut(BaseModel):
    attendee_id: UUID
    attendee_name: Optional[str] = None
    attendee_company: Optional[str] = None
    visit_count: int
    first_visit: UtcDateTime
    last_visit: UtcDateTime


class BoothRankingOut(BaseModel):
    booth_id: UUID
    booth_number: str
    booth_name: str
    company: Optional[str] = None
    location: Optional[str] = None
    unique_visitors: int
    total_scans: int
    first_visit: Optional[UtcDateTime] = None
    last_visit: Optional[UtcDateTime] = None
    repeat_visit_rate: float


class EventBoothStatsOut(BaseModel):
    total: int
    with_scans: int
    without_scans: int
    top_booths: List[BoothRankingOut]
    least_visited_booths: List[BoothRankingOut]
    no_visitor_booths: List[BoothRankingOut]


class CompanyRankingOut(BaseModel):
    company: str
    unique_visitors: int
    visited_booths: int
    total_scans: int


class EventAttendeeStatsOut(BaseModel):
    total: int
    with_scans: int
    without_scans: int
    top_companies: List[CompanyRankingOut]


class AttendeeRankingOut(BaseModel):
    attendee_id: UUID
    name: Optional[str] = None
    company: Optional[str] = None
    badge_number: Optional[str] = None
    visited_booths: int
    total_scans: int
    first_scan: UtcDateTime
    last_scan: UtcDateTime


class EventHeaderOut(BaseModel):
    id: UUID
    event_name: str
    event_code: str
    start_date: date
    end_date: date
    status: EventStatus


class EventOverviewOut(BaseModel):
    total_attendees: int
    active_attendees: int
    inactive_attendees: int
    attendee_participation_rate: float
    total_booths: int
    active_booths: int
    inactive_booths: int
    booth_participation_rate: float
    total_scans: int
    avg_scans_per_attendee: float
    avg_visitors_per_booth: float


class EventSummaryOut(BaseModel):
    event: EventHeaderOut
    overview: EventOverviewOut


class PeakHourOut(BaseModel):
    hour: int
    unique_visitors: int
    active_booths: int
    total_scans: int


class PeakHoursOut(BaseModel):
    event_id: UUID
    hourly: List[PeakHourOut]
    peak_hour: Optional[PeakHourOut] = None


class BoothCorrelationOut(BaseModel):
    booth_id: UUID
    booth_number: Optional[str] = None
    booth_name: Optional[str] = None
    company: Optional[str] = None
    common_visitors: int


class AttendeeInteractionOut(BaseModel):
    attendee_id: UUID
    attendee_name: Optional[str] = None
    attendee_company: Optional[str] = None
    common_booths: int


class EventDailyBucketOut(BaseModel):
    date: date
    unique_visitors: int
    active_booths: int
    total_scans: int


class RecentScanOut(BaseModel):
    scan_id: UUID
    attendee_id: UUID
    attendee_name: Optional[str] = None
    booth_id: UUID
    booth_number: Optional[str] = None
    booth_name: Optional[str] = None
    scanned_at: UtcDateTime


class RealtimeStatsOut(BaseModel):
    event_id: UUID
    total_scans: int
    unique_visitors: int
    active_booths: int
    today_scans: int
    recent_scans: List[RecentScanOut]


class UnderperformingBoothsOut(BaseModel):
    event_id: UUID
    average_visitors: float
    no_visitor_booths: List[BoothRankingOut]
    below_average_booths: List[BoothRankingOut]
    total_underperforming: int
