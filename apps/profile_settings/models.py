from django.db import models

from common.models import TimestampedModel


class ProfileSetting(TimestampedModel):
    key = models.CharField(max_length=255, unique=True)
    value = models.TextField()

    class Meta:
        ordering = ["key"]

    def __str__(self):
        return self.key
