import uuid
from datetime import timedelta

from django.db import models
from django.utils import timezone


class CreatedModel(models.Model):
    """Abstract base: opaque UUID primary key + creation timestamp."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    created_at = models.DateTimeField(default=timezone.now, editable=False)

    class Meta:
        abstract = True


class TimeStampedModel(CreatedModel):
    """
    Adds `updated_at`, which equals `created_at` on insert and moves strictly
    forward on every later save.
    """
    updated_at = models.DateTimeField(editable=False)

    class Meta:
        abstract = True

    def save(self, *args, **kwargs):
        if self._state.adding:
            self.updated_at = self.created_at
        else:
            now = timezone.now()
            if self.updated_at and now <= self.updated_at:
                now = self.updated_at + timedelta(microseconds=1)
            self.updated_at = now
            update_fields = kwargs.get("update_fields")
            if update_fields is not None and "updated_at" not in update_fields:
                kwargs["update_fields"] = [*update_fields, "updated_at"]
        super().save(*args, **kwargs)
