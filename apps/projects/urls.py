from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

router = SimpleRouter(trailing_slash=False)
router.register(r"featured-projects", views.FeaturedProjectViewSet, basename="featured-project")

urlpatterns = [
    path("", include(router.urls)),
]
