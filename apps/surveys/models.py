from django.db import models
from apps.core.models import TimeStampedModel
from auditlog.registry import auditlog


class Survey(TimeStampedModel):
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True, null=True)
    is_active = models.BooleanField(default=True)    # accepts new responses
    is_visible = models.BooleanField(default=True)   # listed to respondents

    class Meta:
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["is_visible", "-created_at"], name="idx_survey_visible_time"),
        ]

    def __str__(self):
        return self.title


# Register audit logging for survey mutations
auditlog.register(Survey)
