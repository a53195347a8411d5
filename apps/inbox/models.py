from django.db import models

from common.models import TimestampedModel


class Message(TimestampedModel):
    """Contact-form submission. Only the read flag changes after creation."""
    sender = models.CharField(max_length=255)
    email = models.EmailField(max_length=255)
    subject = models.CharField(max_length=255)
    content = models.TextField()
    read = models.BooleanField(default=False, db_index=True)

    class Meta:
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return f"Message from {self.sender}: {self.subject}"
