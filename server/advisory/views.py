from __future__ import annotations

from django.conf import settings
from rest_framework import status
from rest_framework.parsers import JSONParser
from rest_framework.response import Response
from rest_framework.views import APIView

from planner_core.domain.errors import PlanningError
from planner_core.domain.models import PROJECTION_END_YEAR
from planner_core.io import serialize
from planner_core.services import alignment, planning, projection

from .repository import OrmRepository
from .serializers import (
    AlignmentResponseSerializer,
    PlanningStatsSerializer,
    ProjectionPointSerializer,
    ProjectionRequestSerializer,
    validation_message,
)


def _bad_request(message: str) -> Response:
    return Response({"message": message}, status=status.HTTP_400_BAD_REQUEST)


class ProjectionView(APIView):
    parser_classes = [JSONParser]

    def post(self, request, client_id):
        serializer = ProjectionRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return _bad_request(validation_message(serializer.errors))
        annual_rate = serializer.validated_data["annualRate"]

        try:
            points = projection.generate_projection_for_client(
                OrmRepository(),
                str(client_id),
                annual_rate,
                end_year=getattr(settings, "PLANNER_END_YEAR", PROJECTION_END_YEAR),
            )
        except PlanningError as exc:
            return _bad_request(str(exc))

        payload = ProjectionPointSerializer(serialize.projection_to_json(points), many=True).data
        return Response(payload)


class AlignmentView(APIView):
    def get(self, request, client_id):
        try:
            result = alignment.calculate_alignment_for_client(OrmRepository(), str(client_id))
        except PlanningError as exc:
            return _bad_request(str(exc))
        return Response(AlignmentResponseSerializer(serialize.alignment_to_json(result)).data)


class PlanningStatsView(APIView):
    def get(self, request):
        stats = planning.planning_stats(OrmRepository())
        return Response(PlanningStatsSerializer(serialize.stats_to_json(stats)).data)
