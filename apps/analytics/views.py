from rest_framework.response import Response
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse, OpenApiTypes

from common.permissions import IsStaff
from .serializers import AnalyticsQuerySerializer
from . import services


class VisitorAnalyticsView(APIView):
    permission_classes = [IsStaff]

    @extend_schema(
        summary="Visitor analytics for a period",
        parameters=[
            OpenApiParameter(
                name="period",
                required=False,
                location=OpenApiParameter.QUERY,
                type=OpenApiTypes.STR,
                enum=list(services.PERIOD_DAYS),
                description="today, week (default), month or year",
            ),
        ],
        responses={200: OpenApiResponse(description="visit summary")},
        tags=["Visitor analytics"],
    )
    def get(self, request):
        query = AnalyticsQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        return Response(services.summarize_visits(query.validated_data["period"]))
