from rest_framework import serializers
from apps.responses.models import SurveyResponse
from .services import joined_platforms


class PlatformCountSerializer(serializers.Serializer):
    platform_name = serializers.CharField()
    count = serializers.IntegerField()


class RecentResponseSerializer(serializers.ModelSerializer):
    platforms = serializers.SerializerMethodField()

    class Meta:
        model = SurveyResponse
        fields = ["id", "created_at", "platforms"]

    def get_platforms(self, obj: SurveyResponse) -> str:
        return joined_platforms(obj)


class SurveyResultsSerializer(serializers.Serializer):
    total_responses = serializers.IntegerField()
    platform_counts = PlatformCountSerializer(many=True)


class SurveyStatsSerializer(SurveyResultsSerializer):
    recent_responses = RecentResponseSerializer(many=True)


class OverviewPlatformCountSerializer(PlatformCountSerializer):
    percentage = serializers.FloatField()


class OverviewRecentResponseSerializer(RecentResponseSerializer):
    survey_id = serializers.UUIDField(read_only=True)
    survey_title = serializers.SerializerMethodField()

    class Meta(RecentResponseSerializer.Meta):
        fields = ["id", "survey_id", "survey_title", "created_at", "platforms"]

    def get_survey_title(self, obj: SurveyResponse) -> str:
        return obj.survey.title


class OverviewSerializer(serializers.Serializer):
    total_responses = serializers.IntegerField()
    total_selections = serializers.IntegerField()
    average_selections_per_response = serializers.FloatField()
    platform_counts = OverviewPlatformCountSerializer(many=True)
    recent_responses = OverviewRecentResponseSerializer(many=True)
