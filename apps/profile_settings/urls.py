from django.urls import path
from . import views

urlpatterns = [
    path("profile-settings", views.ProfileSettingListView.as_view(), name="profile-settings"),
    path("profile-settings/batch", views.ProfileSettingBatchView.as_view(), name="profile-settings-batch"),
    path("profile-settings/<str:key>", views.ProfileSettingDetailView.as_view(), name="profile-setting-detail"),
]
