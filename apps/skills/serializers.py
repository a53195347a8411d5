from collections.abc import Mapping

from rest_framework import serializers

from common.serializers import OrderItemSerializer
from .models import Skill, SkillCategory, MIN_PROFICIENCY, MAX_PROFICIENCY
from . import services


class SkillSerializer(serializers.ModelSerializer):
    category = serializers.ChoiceField(choices=SkillCategory.choices)
    order = serializers.IntegerField(required=False, allow_null=True)
    proficiency = serializers.IntegerField(required=False, min_value=MIN_PROFICIENCY, max_value=MAX_PROFICIENCY)
    to_study = serializers.BooleanField(required=False)
    study_notes = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)

    class Meta:
        model = Skill
        fields = ("id", "name", "category", "order", "proficiency", "to_study", "study_notes", "created_at", "updated_at")
        read_only_fields = ("id", "created_at", "updated_at")

    def to_internal_value(self, data):
        # null / non-string notes become "" on create, and on update when sent
        if isinstance(data, Mapping) and ("study_notes" in data or not self.partial):
            data = data.copy()
            data["study_notes"] = services.coerce_study_notes(data.get("study_notes"))
        return super().to_internal_value(data)

    def validate_order(self, value):
        if value is None and self.instance is not None:
            raise serializers.ValidationError("This field may not be null.")
        return value

    def create(self, validated_data):
        return services.create_skill(**validated_data)


class SkillReorderSerializer(serializers.Serializer):
    skills = OrderItemSerializer(many=True, allow_empty=False)


class StudyNotesSerializer(serializers.Serializer):
    study_notes = serializers.CharField(allow_blank=True, allow_null=True, required=False, trim_whitespace=False)


class ProficiencySerializer(serializers.Serializer):
    proficiency = serializers.IntegerField(min_value=MIN_PROFICIENCY, max_value=MAX_PROFICIENCY)
