from rest_framework import viewsets, status
from rest_framework.exceptions import NotFound

from .responses import envelope


class EnvelopeModelViewSet(viewsets.ModelViewSet):
    """
    ModelViewSet that answers with ``{"data": ...}`` / ``{"message", "data"}``
    bodies and treats every update as partial.
    """
    resource_name = "Record"
    lookup_value_regex = r"\d+"

    def get_object(self):
        lookup_url_kwarg = self.lookup_url_kwarg or self.lookup_field
        queryset = self.filter_queryset(self.get_queryset())
        obj = queryset.filter(**{self.lookup_field: self.kwargs[lookup_url_kwarg]}).first()
        if obj is None:
            raise NotFound(f"{self.resource_name} not found")
        self.check_object_permissions(self.request, obj)
        return obj

    def list(self, request, *args, **kwargs):
        queryset = self.filter_queryset(self.get_queryset())
        serializer = self.get_serializer(queryset, many=True)
        return envelope(serializer.data)

    def retrieve(self, request, *args, **kwargs):
        return envelope(self.get_serializer(self.get_object()).data)

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.perform_create(serializer)
        return envelope(
            serializer.data,
            message=f"{self.resource_name} created successfully",
            status=status.HTTP_201_CREATED,
        )

    def update(self, request, *args, **kwargs):
        instance = self.get_object()
        serializer = self.get_serializer(instance, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        self.perform_update(serializer)
        return envelope(serializer.data, message=f"{self.resource_name} updated successfully")

    def destroy(self, request, *args, **kwargs):
        self.perform_destroy(self.get_object())
        return envelope(message=f"{self.resource_name} deleted successfully")
