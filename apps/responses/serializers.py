from rest_framework import serializers


class SubmitResponseSerializer(serializers.Serializer):
    survey_id = serializers.UUIDField()
    # Vocabulary membership, blanks, length and duplicates are not checked
    platforms = serializers.ListField(
        child=serializers.CharField(allow_blank=True, trim_whitespace=False),
        allow_empty=False,
    )


class SubmitResponseResultSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    message = serializers.CharField()


class ResetResultSerializer(serializers.Serializer):
    message = serializers.CharField()
    deleted_count = serializers.IntegerField()
