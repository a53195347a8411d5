from django.contrib import admin
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView
from rest_framework_simplejwt.views import (
    TokenObtainPairView,   # POST: username/password -> { access, refresh }
    TokenRefreshView,      # POST: { refresh } -> { access }
    TokenVerifyView,       # POST: { token } -> {} if valid
)

urlpatterns = [
    path("admin/", admin.site.urls),

    path("api/", include("apps.skills.urls")),
    path("api/", include("apps.projects.urls")),
    path("api/", include("apps.inbox.urls")),
    path("api/", include("apps.profile_settings.urls")),
    path("api/", include("apps.analytics.urls")),

    # admin dashboard login
    path("api/auth/jwt/create", TokenObtainPairView.as_view(), name="jwt-create"),
    path("api/auth/jwt/refresh", TokenRefreshView.as_view(), name="jwt-refresh"),
    path("api/auth/jwt/verify", TokenVerifyView.as_view(), name="jwt-verify"),

    path("api/schema", SpectacularAPIView.as_view(), name="schema"),
    path("api/docs", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
]
