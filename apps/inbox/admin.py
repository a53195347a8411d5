from django.contrib import admin
from .models import Message


@admin.register(Message)
class MessageAdmin(admin.ModelAdmin):
    list_display = ("id", "sender", "email", "subject", "read", "created_at")
    list_filter = ("read",)
    search_fields = ("sender", "email", "subject", "content")
    readonly_fields = ("sender", "email", "subject", "content", "created_at", "updated_at")
