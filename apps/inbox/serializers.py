from rest_framework import serializers

from .models import Message
from . import services


class MessageSerializer(serializers.ModelSerializer):
    class Meta:
        model = Message
        fields = ("id", "sender", "email", "subject", "content", "read", "created_at")
        read_only_fields = ("id", "read", "created_at")

    def create(self, validated_data):
        return services.create_message(**validated_data)
