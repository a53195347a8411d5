import logging

from rest_framework import status
from rest_framework.exceptions import NotFound
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema, OpenApiResponse

from common.responses import envelope, bulk_result
from .serializers import SettingValueSerializer, SettingsBatchSerializer
from .store import SettingsStore

logger = logging.getLogger(__name__)


class StoreMixin:
    def get_store(self) -> SettingsStore:
        return SettingsStore()


class ProfileSettingListView(StoreMixin, APIView):
    @extend_schema(summary="All profile settings as key/value pairs", responses={200: OpenApiResponse(description="settings map")}, tags=["Profile settings"])
    def get(self, request):
        return envelope(self.get_store().all())


class ProfileSettingDetailView(StoreMixin, APIView):
    @extend_schema(summary="Retrieve one profile setting", responses={200: OpenApiResponse(description="key/value"), 404: OpenApiResponse(description="unknown key")}, tags=["Profile settings"])
    def get(self, request, key):
        value = self.get_store().get(key)
        if value is None:
            raise NotFound("Setting not found")
        return envelope({"key": key, "value": value})

    @extend_schema(summary="Create or update a profile setting", request=SettingValueSerializer, responses={200: OpenApiResponse(description="stored")}, tags=["Profile settings"])
    def put(self, request, key):
        serializer = SettingValueSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        value = serializer.validated_data["value"]

        if not self.get_store().set(key, value):
            return envelope(
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
                error="Failed to update setting",
            )
        return envelope({"key": key, "value": value}, message="Setting updated successfully")


class ProfileSettingBatchView(StoreMixin, APIView):
    @extend_schema(
        summary="Update several profile settings",
        request=SettingsBatchSerializer,
        responses={200: OpenApiResponse(description="all stored"), 207: OpenApiResponse(description="partial failure")},
        tags=["Profile settings"],
    )
    def post(self, request):
        serializer = SettingsBatchSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        store = self.get_store()
        updated, errors = [], []
        for item in serializer.validated_data["settings"]:
            if store.set(item["key"], item["value"]):
                updated.append({"key": item["key"], "value": item["value"]})
            else:
                errors.append(f"Failed to update setting: {item['key']}")

        if errors:
            logger.warning("Batch settings update: %d stored, %d failed", len(updated), len(errors))
        return bulk_result(
            updated,
            errors,
            ok_message="All settings updated successfully",
            partial_message="Some settings failed to update",
        )
