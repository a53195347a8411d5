from rest_framework import serializers

from common.serializers import OrderItemSerializer
from .models import FeaturedProject
from . import services


class FeaturedProjectSerializer(serializers.ModelSerializer):
    technologies = serializers.ListField(child=serializers.CharField(max_length=100), required=False, allow_null=True)
    order = serializers.IntegerField(required=False, allow_null=True)
    is_active = serializers.BooleanField(required=False)

    class Meta:
        model = FeaturedProject
        fields = (
            "id", "title", "description", "image_url", "project_url", "github_url",
            "technologies", "order", "is_active", "created_at", "updated_at",
        )
        read_only_fields = ("id", "created_at", "updated_at")

    def validate_technologies(self, value):
        return value or []

    def validate_order(self, value):
        if value is None and self.instance is not None:
            return self.instance.order
        return value

    def create(self, validated_data):
        return services.create_project(**validated_data)


class ProjectReorderSerializer(serializers.Serializer):
    projects = OrderItemSerializer(many=True, allow_empty=False)
