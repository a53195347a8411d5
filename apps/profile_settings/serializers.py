from rest_framework import serializers


class SettingValueSerializer(serializers.Serializer):
    value = serializers.CharField(trim_whitespace=False)


class SettingItemSerializer(serializers.Serializer):
    key = serializers.CharField(max_length=255)
    value = serializers.CharField(trim_whitespace=False)


class SettingsBatchSerializer(serializers.Serializer):
    settings = SettingItemSerializer(many=True, allow_empty=False)
