from __future__ import annotations

import csv

from django.http import HttpResponse
from django.utils import timezone
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import extend_schema
from rest_framework.views import APIView
from rest_framework.response import Response

from apps.core.utility import get_or_404
from apps.surveys.models import Survey
from . import services
from .serializers import SurveyResultsSerializer, SurveyStatsSerializer, OverviewSerializer

CSV_HEADER = ["response_id", "survey_title", "created_at", "selection_count", "platforms"]


class SurveyResultsView(APIView):
    """
    Public results for one survey.

    Response:
      { total_responses: int, platform_counts: [{platform_name, count}, ...] }
    Unknown survey ids yield zero totals rather than 404.
    """

    @extend_schema(responses=SurveyResultsSerializer)
    def get(self, request, survey_id):
        return Response(SurveyResultsSerializer(services.survey_results(survey_id)).data)


class SurveyStatsView(APIView):
    """Results plus the 10 most recent responses, each with its platforms joined by ', '."""

    @extend_schema(responses=SurveyStatsSerializer)
    def get(self, request, survey_id):
        return Response(SurveyStatsSerializer(services.survey_stats(survey_id)).data)


class OverviewView(APIView):
    """Dashboard totals across all surveys, zero-filled against the platform vocabulary."""

    @extend_schema(responses=OverviewSerializer)
    def get(self, request):
        return Response(OverviewSerializer(services.overview()).data)


class SurveyExportView(APIView):
    """CSV download of every response of a survey, newest first."""

    @extend_schema(responses={(200, "text/csv"): OpenApiTypes.STR})
    def get(self, request, survey_id):
        survey = get_or_404(Survey.objects, "Survey not found", pk=survey_id)
        filename = f"survey_results_{timezone.now().date().isoformat()}.csv"

        out = HttpResponse(content_type="text/csv; charset=utf-8")
        out["Content-Disposition"] = f'attachment; filename="{filename}"'
        out.write("\ufeff")  # BOM so spreadsheet apps pick UTF-8

        writer = csv.writer(out)
        writer.writerow(CSV_HEADER)
        for resp in services.responses_with_selections(survey.id):
            names = [sel.platform_name for sel in resp.selections.all()]
            writer.writerow([resp.id, survey.title, resp.created_at.isoformat(), len(names), "; ".join(names)])
        return out
