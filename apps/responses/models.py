import uuid

from django.db import models
from apps.core.models import CreatedModel
from apps.surveys.models import Survey


class SurveyResponse(CreatedModel):
    survey = models.ForeignKey(Survey, on_delete=models.CASCADE, related_name="responses")
    # Generated per submission; record-keeping only, never used for dedup or identity
    session_id = models.UUIDField(default=uuid.uuid4, editable=False)

    class Meta:
        indexes = [
            models.Index(fields=["survey", "-created_at"], name="idx_response_survey_time"),
        ]

    def __str__(self):
        return f"response#{self.id} survey#{self.survey_id}"


class PlatformSelection(CreatedModel):
    response = models.ForeignKey(SurveyResponse, on_delete=models.CASCADE, related_name="selections")
    platform_name = models.TextField(db_index=True)
    position = models.PositiveSmallIntegerField(default=0)  # insertion order within the response

    class Meta:
        ordering = ["position"]

    def __str__(self):
        return f"sel#{self.id} {self.platform_name}"
