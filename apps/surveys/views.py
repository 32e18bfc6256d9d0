from __future__ import annotations

import logging

from django.db import transaction
from drf_spectacular.utils import extend_schema, inline_serializer
from rest_framework import serializers, status
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.core.utility import get_or_404
from .models import Survey
from .serializers import SurveyReadSerializer, SurveyCreateSerializer, SurveyUpdateSerializer

logger = logging.getLogger(__name__)

SURVEY_NOT_FOUND = "Survey not found"


class SurveyListCreateView(APIView):
    """
    GET: Surveys listed to respondents (is_visible), newest first. Unpaginated.
    POST: Create a survey; is_active / is_visible default to true.
    """

    @extend_schema(responses=SurveyReadSerializer(many=True))
    def get(self, request):
        qs = Survey.objects.filter(is_visible=True).order_by("-created_at", "-id")
        return Response(SurveyReadSerializer(qs, many=True).data)

    @extend_schema(request=SurveyCreateSerializer, responses={201: SurveyReadSerializer})
    @transaction.atomic
    def post(self, request):
        ser = SurveyCreateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        survey = ser.save()
        logger.info("Created survey %s (%r)", survey.id, survey.title)
        return Response(SurveyReadSerializer(survey).data, status=status.HTTP_201_CREATED)


class SurveyAllListView(APIView):
    """GET: Every survey regardless of flags, newest first (admin listing)."""

    @extend_schema(responses=SurveyReadSerializer(many=True))
    def get(self, request):
        qs = Survey.objects.all().order_by("-created_at", "-id")
        return Response(SurveyReadSerializer(qs, many=True).data)


class SurveyDetailView(APIView):
    """
    GET: One survey.
    PUT: Full replacement of title, description, is_active, is_visible.
    DELETE: Remove survey; responses and selections go with it.
    """

    @extend_schema(responses=SurveyReadSerializer)
    def get(self, request, survey_id):
        survey = get_or_404(Survey.objects, SURVEY_NOT_FOUND, pk=survey_id)
        return Response(SurveyReadSerializer(survey).data)

    @extend_schema(request=SurveyUpdateSerializer, responses=SurveyReadSerializer)
    @transaction.atomic
    def put(self, request, survey_id):
        survey = get_or_404(Survey.objects, SURVEY_NOT_FOUND, pk=survey_id)
        ser = SurveyUpdateSerializer(survey, data=request.data)
        ser.is_valid(raise_exception=True)
        survey = ser.save()
        logger.info("Updated survey %s", survey.id)
        return Response(SurveyReadSerializer(survey).data)

    @extend_schema(responses=inline_serializer("SurveyDeleted", {"message": serializers.CharField()}))
    @transaction.atomic
    def delete(self, request, survey_id):
        survey = get_or_404(Survey.objects, SURVEY_NOT_FOUND, pk=survey_id)
        _, per_model = survey.delete()
        logger.info("Deleted survey %s (cascade: %s)", survey_id, per_model)
        return Response({"message": "Survey deleted successfully"})
