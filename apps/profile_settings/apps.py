from django.apps import AppConfig


class ProfileSettingsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.profile_settings"
    verbose_name = "Profile Settings"
