# profile_settings/store.py
"""
Key/value store for profile settings (contact details, about-me paragraphs).

Views build one ``SettingsStore`` per request; nothing is cached between requests.
"""
import logging
from typing import Dict, Optional

from django.db import DatabaseError, transaction

from .models import ProfileSetting

logger = logging.getLogger(__name__)


class SettingsStore:
    def __init__(self, queryset=None):
        self._queryset = queryset if queryset is not None else ProfileSetting.objects.all()

    def get(self, key: str) -> Optional[str]:
        return self._queryset.filter(key=key).values_list("value", flat=True).first()

    def set(self, key: str, value: str) -> bool:
        """Insert or update ``key``. Returns False when the database refuses the write."""
        try:
            with transaction.atomic():
                ProfileSetting.objects.update_or_create(key=key, defaults={"value": value})
        except DatabaseError:
            logger.exception("Failed to store profile setting %r", key)
            return False
        return True

    def all(self) -> Dict[str, str]:
        return dict(self._queryset.order_by("key").values_list("key", "value"))
