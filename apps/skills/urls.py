# skills/urls.py
from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

router = SimpleRouter(trailing_slash=False)
router.register(r"skills", views.SkillViewSet, basename="skill")

urlpatterns = [
    path("skill-analytics", views.SkillAnalyticsView.as_view(), name="skill-analytics"),
    path("", include(router.urls)),
]
