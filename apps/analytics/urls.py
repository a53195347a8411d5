from django.urls import path
from . import views

urlpatterns = [
    path("analytics", views.VisitorAnalyticsView.as_view(), name="visitor-analytics"),
]
