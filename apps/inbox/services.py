import logging

from django.utils import timezone

from .models import Message

logger = logging.getLogger(__name__)


def create_message(sender, email, subject, content) -> Message:
    message = Message.objects.create(sender=sender, email=email, subject=subject, content=content, read=False)
    logger.info("New contact message %s from %s", message.pk, email)
    return message


def list_messages():
    return Message.objects.order_by("-created_at", "-id")


def mark_read(message: Message) -> Message:
    if not message.read:
        message.read = True
        message.save(update_fields=["read", "updated_at"])
    return message


def toggle_read(message: Message) -> Message:
    message.read = not message.read
    message.save(update_fields=["read", "updated_at"])
    return message


def mark_all_read() -> int:
    return Message.objects.filter(read=False).update(read=True, updated_at=timezone.now())
