from rest_framework import mixins, viewsets, status
from rest_framework.decorators import action
from rest_framework.exceptions import NotFound
from rest_framework.permissions import AllowAny
from drf_spectacular.utils import extend_schema, extend_schema_view, OpenApiResponse

from common.permissions import IsStaff
from common.responses import envelope
from .serializers import MessageSerializer
from . import services


@extend_schema_view(
    list=extend_schema(summary="List Messages", responses={200: MessageSerializer(many=True)}, tags=["Inbox"]),
    create=extend_schema(summary="Send a contact message", request=MessageSerializer, responses={201: MessageSerializer}, tags=["Inbox"]),
    destroy=extend_schema(summary="Delete Message", responses={200: OpenApiResponse(description="deleted")}, tags=["Inbox"]),
)
class MessageViewSet(mixins.CreateModelMixin, mixins.ListModelMixin, mixins.DestroyModelMixin, viewsets.GenericViewSet):
    serializer_class = MessageSerializer
    permission_classes = [IsStaff]
    lookup_value_regex = r"\d+"

    def get_queryset(self):
        return services.list_messages()

    def get_permissions(self):
        # the contact form is public, the rest is the admin inbox
        if self.action == "create":
            return [AllowAny()]
        return super().get_permissions()

    def get_object(self):
        message = self.get_queryset().filter(pk=self.kwargs["pk"]).first()
        if message is None:
            raise NotFound("Message not found")
        self.check_object_permissions(self.request, message)
        return message

    def list(self, request, *args, **kwargs):
        return envelope(self.get_serializer(self.get_queryset(), many=True).data)

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return envelope(serializer.data, message="Message sent successfully", status=status.HTTP_201_CREATED)

    def destroy(self, request, *args, **kwargs):
        self.get_object().delete()
        return envelope(message="Message deleted successfully")

    @extend_schema(summary="Mark a message as read", request=None, responses={200: MessageSerializer}, tags=["Inbox"])
    @action(detail=True, methods=["put"])
    def read(self, request, pk=None):
        message = services.mark_read(self.get_object())
        return envelope(MessageSerializer(message).data, message="Message marked as read")

    @extend_schema(summary="Toggle read state", request=None, responses={200: MessageSerializer}, tags=["Inbox"])
    @action(detail=True, methods=["put"], url_path="toggle-read")
    def toggle_read(self, request, pk=None):
        message = services.toggle_read(self.get_object())
        state = "read" if message.read else "unread"
        return envelope(MessageSerializer(message).data, message=f"Message marked as {state}")

    @extend_schema(summary="Mark every message as read", request=None, responses={200: OpenApiResponse(description="count updated")}, tags=["Inbox"])
    @action(detail=False, methods=["put"], url_path="mark-all-read")
    def mark_all_read(self, request):
        updated = services.mark_all_read()
        return envelope({"updated": updated}, message="All messages marked as read")
