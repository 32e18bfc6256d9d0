from django.http import JsonResponse
from django.utils import timezone
from django.views.decorators.csrf import csrf_exempt
from drf_spectacular.utils import extend_schema, inline_serializer
from rest_framework import serializers
from rest_framework.response import Response
from rest_framework.views import APIView

from .enums import Platform


class HealthView(APIView):
    """Liveness probe; does not touch the database."""

    @extend_schema(responses=inline_serializer("Health", {
        "status": serializers.CharField(),
        "timestamp": serializers.DateTimeField(),
    }))
    def get(self, request):
        return Response({"status": "ok", "timestamp": timezone.now().isoformat().replace("+00:00", "Z")})


class PlatformListView(APIView):
    """The platform vocabulary offered to respondents."""

    @extend_schema(responses={200: {"type": "array", "items": {"type": "string"}}})
    def get(self, request):
        return Response(Platform.names())


@csrf_exempt
def not_found(request, exception=None, *args, **kwargs):
    return JsonResponse({"error": "Not found", "path": request.path}, status=404)
