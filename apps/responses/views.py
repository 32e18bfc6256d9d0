from drf_spectacular.utils import extend_schema
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status

from .serializers import SubmitResponseSerializer, SubmitResponseResultSerializer, ResetResultSerializer
from .services import submit_response, reset_responses


class SubmitResponseView(APIView):
    """
    Accepts { "survey_id": S, "platforms": ["A", "B", ...] }.
    Shape is validated here; nothing else about the submission is checked.
    """

    @extend_schema(request=SubmitResponseSerializer, responses={201: SubmitResponseResultSerializer})
    def post(self, request):
        ser = SubmitResponseSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        resp = submit_response(ser.validated_data["survey_id"], ser.validated_data["platforms"])
        return Response(
            {"id": str(resp.id), "message": "Response submitted successfully"},
            status=status.HTTP_201_CREATED,
        )


class SurveyResponsesResetView(APIView):
    """DELETE: Remove all responses (and their selections) of one survey."""

    @extend_schema(responses=ResetResultSerializer)
    def delete(self, request, survey_id):
        deleted = reset_responses(survey_id)
        return Response({"message": "All responses deleted successfully", "deleted_count": deleted})
