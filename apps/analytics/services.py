# analytics/services.py
"""
Read-side aggregation of visitor rows for the admin dashboard.
"""
import datetime
from typing import Optional, Tuple

from django.conf import settings
from django.db.models import Count
from django.utils import timezone

from .models import VisitorAnalytics

TODAY = "today"
WEEK = "week"
MONTH = "month"
YEAR = "year"

DEFAULT_PERIOD = WEEK

# days covered by each period, today included
PERIOD_DAYS = {
    TODAY: 1,
    WEEK: 7,
    MONTH: 30,
    YEAR: 365,
}


def period_bounds(period: str, today: Optional[datetime.date] = None) -> Tuple[datetime.date, datetime.date]:
    if period not in PERIOD_DAYS:
        raise ValueError(f"Unknown analytics period: {period}")
    today = today or timezone.localdate()
    start = today - datetime.timedelta(days=PERIOD_DAYS[period] - 1)
    return start, today


def visits_between(start: datetime.date, end: datetime.date):
    return VisitorAnalytics.objects.filter(visit_date__range=(start, end))


def visits_by_date(visits):
    rows = visits.values("visit_date").annotate(visits=Count("id")).order_by("visit_date")
    return [{"date": row["visit_date"].isoformat(), "visits": row["visits"]} for row in rows]


def visits_by_device(visits):
    rows = visits.values("device_type").annotate(visits=Count("id")).order_by("-visits", "device_type")
    return [{"device_type": row["device_type"], "visits": row["visits"]} for row in rows]


def visits_by_page(visits, limit: int):
    rows = visits.values("page_visited").annotate(visits=Count("id")).order_by("-visits", "page_visited")[:limit]
    return [{"page_visited": row["page_visited"], "visits": row["visits"]} for row in rows]


def recent_visitors(visits, limit: int):
    recent = visits.order_by("-visit_date", "-visit_time", "-id")[:limit]
    return [
        {
            "id": visit.id,
            "page_visited": visit.page_visited,
            "visit_date": visit.visit_date.isoformat(),
            "visit_time": visit.visit_time.strftime("%H:%M:%S"),
            "formatted_date": visit.formatted_date,
            "formatted_time": visit.formatted_time,
            "device_type": visit.device_type,
            "country": visit.country,
            "city": visit.city,
            "referrer": visit.referrer,
        }
        for visit in recent
    ]


def summarize_visits(period: str = DEFAULT_PERIOD, today: Optional[datetime.date] = None) -> dict:
    start, end = period_bounds(period, today)
    visits = visits_between(start, end).order_by()
    return {
        "period": period,
        "start_date": start.isoformat(),
        "end_date": end.isoformat(),
        "total_visits": visits.count(),
        "visits_by_date": visits_by_date(visits),
        "visits_by_device": visits_by_device(visits),
        "visits_by_page": visits_by_page(visits, settings.ANALYTICS_TOP_PAGES),
        "recent_visitors": recent_visitors(visits, settings.ANALYTICS_RECENT_VISITORS),
    }
