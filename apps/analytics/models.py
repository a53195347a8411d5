from django.db import models

from common.models import TimestampedModel


class VisitorAnalytics(TimestampedModel):
    """
    One page visit. Rows are written by the tracking collaborator; this app only reads them.
    """
    ip_address = models.CharField(max_length=64, null=True, blank=True)
    user_agent = models.TextField(null=True, blank=True)
    page_visited = models.CharField(max_length=255)
    visit_date = models.DateField(db_index=True)
    visit_time = models.TimeField()
    country = models.CharField(max_length=128, null=True, blank=True)
    city = models.CharField(max_length=128, null=True, blank=True)
    referrer = models.CharField(max_length=255, null=True, blank=True)
    device_type = models.CharField(max_length=32, null=True, blank=True)

    class Meta:
        verbose_name_plural = "visitor analytics"
        ordering = ["-visit_date", "-visit_time", "-id"]
        indexes = [
            models.Index(fields=["visit_date", "page_visited"]),
        ]

    def __str__(self):
        return f"{self.page_visited} @ {self.visit_date} {self.visit_time}"

    @property
    def formatted_date(self) -> str:
        # "October 19, 2026"
        return f"{self.visit_date:%B} {self.visit_date.day}, {self.visit_date.year}"

    @property
    def formatted_time(self) -> str:
        # "3:05 PM"
        hour = self.visit_time.hour % 12 or 12
        suffix = "AM" if self.visit_time.hour < 12 else "PM"
        return f"{hour}:{self.visit_time.minute:02d} {suffix}"
