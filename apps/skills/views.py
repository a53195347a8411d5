from collections.abc import Mapping

from rest_framework.decorators import action
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema, extend_schema_view, OpenApiResponse

from common.responses import envelope, bulk_result
from common.viewsets import EnvelopeModelViewSet
from .models import Skill
from .serializers import SkillSerializer, SkillReorderSerializer, StudyNotesSerializer, ProficiencySerializer
from . import analytics, services


@extend_schema_view(
    list=extend_schema(summary="List Skills", responses={200: SkillSerializer(many=True)}, tags=["Skills"]),
    retrieve=extend_schema(summary="Retrieve Skill", responses={200: SkillSerializer}, tags=["Skills"]),
    create=extend_schema(summary="Create Skill", request=SkillSerializer, responses={201: SkillSerializer}, tags=["Skills"]),
    update=extend_schema(summary="Update Skill", request=SkillSerializer, responses={200: SkillSerializer}, tags=["Skills"]),
    partial_update=extend_schema(summary="Update Skill", request=SkillSerializer, responses={200: SkillSerializer}, tags=["Skills"]),
    destroy=extend_schema(summary="Delete Skill", responses={200: OpenApiResponse(description="deleted")}, tags=["Skills"]),
)
class SkillViewSet(EnvelopeModelViewSet):
    queryset = Skill.objects.all()
    serializer_class = SkillSerializer
    filterset_fields = ["category", "to_study"]
    resource_name = "Skill"

    def get_queryset(self):
        return services.list_skills()

    @extend_schema(summary="Skills grouped by category", responses={200: SkillSerializer(many=True)}, tags=["Skills"])
    @action(detail=False, methods=["get"])
    def grouped(self, request):
        grouped = services.grouped_by_category()
        data = {category: SkillSerializer(skills, many=True).data for category, skills in grouped.items()}
        return envelope(data)

    @extend_schema(summary="Skills on the study list", responses={200: SkillSerializer(many=True)}, tags=["Study list"])
    @action(detail=False, methods=["get"], url_path="study-list")
    def study_list(self, request):
        return envelope(SkillSerializer(services.study_list(), many=True).data)

    @extend_schema(
        summary="Reorder skills",
        request=SkillReorderSerializer,
        responses={200: OpenApiResponse(description="all applied"), 207: OpenApiResponse(description="some ids unknown")},
        tags=["Skills"],
    )
    @action(detail=False, methods=["post"])
    def reorder(self, request):
        serializer = SkillReorderSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = services.reorder_skills(serializer.validated_data["skills"])
        return bulk_result(
            result.updated,
            result.error_messages("Skill"),
            ok_message="Skills reordered successfully",
            partial_message="Some skills could not be reordered",
        )

    @extend_schema(summary="Toggle study list membership", request=None, responses={200: SkillSerializer}, tags=["Study list"])
    @action(detail=True, methods=["put"], url_path="toggle-study")
    def toggle_study(self, request, pk=None):
        skill = services.toggle_study(self.get_object())
        message = "Skill added to study list" if skill.to_study else "Skill removed from study list"
        return envelope(SkillSerializer(skill).data, message=message)

    @extend_schema(summary="Update study notes", request=StudyNotesSerializer, responses={200: SkillSerializer}, tags=["Study list"])
    @action(detail=True, methods=["put"], url_path="study-notes")
    def study_notes(self, request, pk=None):
        skill = self.get_object()
        notes = request.data.get("study_notes") if isinstance(request.data, Mapping) else None
        skill = services.update_notes(skill, notes)
        return envelope(SkillSerializer(skill).data, message="Study notes updated successfully")

    @extend_schema(summary="Update proficiency", request=ProficiencySerializer, responses={200: SkillSerializer}, tags=["Study list"])
    @action(detail=True, methods=["put"])
    def proficiency(self, request, pk=None):
        skill = self.get_object()
        serializer = ProficiencySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        skill = services.update_proficiency(skill, serializer.validated_data["proficiency"])
        return envelope(SkillSerializer(skill).data, message="Proficiency updated successfully")


class SkillAnalyticsView(APIView):
    permission_classes = [AllowAny]

    @extend_schema(
        summary="Skill distribution, top skills and seniority analysis",
        responses={200: OpenApiResponse(description="analytics report")},
        tags=["Skill analytics"],
    )
    def get(self, request):
        return Response(analytics.build_report())
