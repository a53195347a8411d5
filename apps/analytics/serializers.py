from rest_framework import serializers

from .services import PERIOD_DAYS, DEFAULT_PERIOD


class AnalyticsQuerySerializer(serializers.Serializer):
    period = serializers.ChoiceField(choices=list(PERIOD_DAYS), default=DEFAULT_PERIOD)
