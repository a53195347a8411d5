import datetime
from unittest import mock

from django.contrib.auth import get_user_model
from django.test import TestCase
from rest_framework.test import APITestCase

from .models import VisitorAnalytics
from . import services

User = get_user_model()

TODAY = datetime.date(2026, 10, 19)


def visit(days_ago=0, page="/", device="desktop", time=datetime.time(12, 0)):
    return VisitorAnalytics.objects.create(
        page_visited=page,
        visit_date=TODAY - datetime.timedelta(days=days_ago),
        visit_time=time,
        device_type=device,
    )


class VisitorFormattingTests(TestCase):
    def test_formatted_date_and_time(self):
        v = visit(time=datetime.time(15, 5))
        self.assertEqual(v.formatted_date, "October 19, 2026")
        self.assertEqual(v.formatted_time, "3:05 PM")

    def test_midnight_and_noon(self):
        self.assertEqual(visit(time=datetime.time(0, 7)).formatted_time, "12:07 AM")
        self.assertEqual(visit(time=datetime.time(12, 30)).formatted_time, "12:30 PM")


class PeriodBoundsTests(TestCase):
    def test_periods(self):
        self.assertEqual(services.period_bounds("today", TODAY), (TODAY, TODAY))
        self.assertEqual(services.period_bounds("week", TODAY), (datetime.date(2026, 10, 13), TODAY))
        self.assertEqual(services.period_bounds("month", TODAY), (datetime.date(2026, 9, 20), TODAY))
        self.assertEqual(services.period_bounds("year", TODAY), (datetime.date(2025, 10, 20), TODAY))

    def test_unknown_period(self):
        with self.assertRaises(ValueError):
            services.period_bounds("decade", TODAY)


class SummaryTests(TestCase):
    def setUp(self):
        visit(0, "/", "desktop", datetime.time(9, 0))
        visit(0, "/projects", "mobile", datetime.time(10, 0))
        visit(2, "/", "mobile")
        visit(10, "/", "tablet")  # outside the week

    def test_week_summary(self):
        summary = services.summarize_visits("week", TODAY)
        self.assertEqual(summary["start_date"], "2026-10-13")
        self.assertEqual(summary["end_date"], "2026-10-19")
        self.assertEqual(summary["total_visits"], 3)
        self.assertEqual(
            summary["visits_by_date"],
            [{"date": "2026-10-17", "visits": 1}, {"date": "2026-10-19", "visits": 2}],
        )
        self.assertEqual(summary["visits_by_device"][0], {"device_type": "mobile", "visits": 2})
        self.assertEqual(summary["visits_by_page"][0], {"page_visited": "/", "visits": 2})

    def test_recent_visitors_newest_first(self):
        recent = services.summarize_visits("week", TODAY)["recent_visitors"]
        self.assertEqual([r["page_visited"] for r in recent], ["/projects", "/", "/"])
        self.assertEqual(recent[0]["formatted_time"], "10:00 AM")
        self.assertEqual(recent[0]["formatted_date"], "October 19, 2026")

    def test_today_summary(self):
        self.assertEqual(services.summarize_visits("today", TODAY)["total_visits"], 2)

    def test_empty_period(self):
        VisitorAnalytics.objects.all().delete()
        summary = services.summarize_visits("year", TODAY)
        self.assertEqual(summary["total_visits"], 0)
        self.assertEqual(summary["visits_by_date"], [])
        self.assertEqual(summary["recent_visitors"], [])


class VisitorAnalyticsApiTests(APITestCase):
    def setUp(self):
        self.admin = User.objects.create_user(username="admin", password="not-a-real-password", is_staff=True)

    def test_requires_admin(self):
        resp = self.client.get("/api/analytics")
        self.assertIn(resp.status_code, (401, 403))

    def test_default_period_is_week(self):
        self.client.force_authenticate(user=self.admin)
        with mock.patch("apps.analytics.services.timezone.localdate", return_value=TODAY):
            visit(1)
            resp = self.client.get("/api/analytics")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.data["period"], "week")
        self.assertEqual(resp.data["total_visits"], 1)

    def test_invalid_period(self):
        self.client.force_authenticate(user=self.admin)
        resp = self.client.get("/api/analytics", {"period": "decade"})
        self.assertEqual(resp.status_code, 422)
        self.assertIn("period", resp.data["errors"])
