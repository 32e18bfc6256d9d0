from rest_framework import serializers
from .models import Survey


class SurveyReadSerializer(serializers.ModelSerializer):
    class Meta:
        model = Survey
        fields = ["id", "title", "description", "is_active", "is_visible", "created_at", "updated_at"]


class SurveyCreateSerializer(serializers.ModelSerializer):
    title = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    is_active = serializers.BooleanField(required=False, default=True)
    is_visible = serializers.BooleanField(required=False, default=True)

    class Meta:
        model = Survey
        fields = ["title", "description", "is_active", "is_visible"]


class SurveyUpdateSerializer(serializers.ModelSerializer):
    """Full replacement: every mutable field must be sent."""
    title = serializers.CharField(max_length=255)
    description = serializers.CharField(allow_blank=True, allow_null=True)
    is_active = serializers.BooleanField()
    is_visible = serializers.BooleanField()

    class Meta:
        model = Survey
        fields = ["title", "description", "is_active", "is_visible"]
