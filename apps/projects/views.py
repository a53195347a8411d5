from rest_framework.decorators import action
from drf_spectacular.utils import extend_schema, extend_schema_view, OpenApiResponse

from common.responses import bulk_result
from common.viewsets import EnvelopeModelViewSet
from .models import FeaturedProject
from .serializers import FeaturedProjectSerializer, ProjectReorderSerializer
from . import services


@extend_schema_view(
    list=extend_schema(summary="List Featured Projects", responses={200: FeaturedProjectSerializer(many=True)}, tags=["Featured projects"]),
    retrieve=extend_schema(summary="Retrieve Featured Project", responses={200: FeaturedProjectSerializer}, tags=["Featured projects"]),
    create=extend_schema(summary="Create Featured Project", request=FeaturedProjectSerializer, responses={201: FeaturedProjectSerializer}, tags=["Featured projects"]),
    update=extend_schema(summary="Update Featured Project", request=FeaturedProjectSerializer, responses={200: FeaturedProjectSerializer}, tags=["Featured projects"]),
    partial_update=extend_schema(summary="Update Featured Project", request=FeaturedProjectSerializer, responses={200: FeaturedProjectSerializer}, tags=["Featured projects"]),
    destroy=extend_schema(summary="Delete Featured Project", responses={200: OpenApiResponse(description="deleted")}, tags=["Featured projects"]),
)
class FeaturedProjectViewSet(EnvelopeModelViewSet):
    queryset = FeaturedProject.objects.all()
    serializer_class = FeaturedProjectSerializer
    filterset_fields = ["is_active"]
    resource_name = "Project"

    def get_queryset(self):
        return services.list_projects()

    @extend_schema(
        summary="Reorder featured projects",
        request=ProjectReorderSerializer,
        responses={200: OpenApiResponse(description="all applied"), 207: OpenApiResponse(description="some ids unknown")},
        tags=["Featured projects"],
    )
    @action(detail=False, methods=["post"])
    def reorder(self, request):
        serializer = ProjectReorderSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = services.reorder_projects(serializer.validated_data["projects"])
        return bulk_result(
            result.updated,
            result.error_messages("Project"),
            ok_message="Projects reordered successfully",
            partial_message="Some projects could not be reordered",
        )
