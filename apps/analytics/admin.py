from django.contrib import admin
from .models import VisitorAnalytics


@admin.register(VisitorAnalytics)
class VisitorAnalyticsAdmin(admin.ModelAdmin):
    list_display = ("id", "page_visited", "visit_date", "visit_time", "device_type", "country", "city")
    list_filter = ("device_type", "visit_date", "country")
    search_fields = ("page_visited", "referrer", "city", "country")
    date_hierarchy = "visit_date"
