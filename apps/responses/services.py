from __future__ import annotations

import logging
from typing import Iterable
from uuid import UUID

from django.db import transaction

from .models import SurveyResponse, PlatformSelection

logger = logging.getLogger(__name__)


@transaction.atomic
def submit_response(survey_id: UUID, platforms: Iterable[str]) -> SurveyResponse:
    """
    Persist one anonymous submission: a SurveyResponse plus one PlatformSelection
    per entry in `platforms`, all-or-nothing.

    Notes:
        - Entries are stored as given: no vocabulary check, no dedup; `position`
          keeps their order.
        - The survey is not looked up. An unknown `survey_id` violates the
          foreign key and surfaces as an IntegrityError.
    """
    response = SurveyResponse.objects.create(survey_id=survey_id)
    selections = [
        PlatformSelection(
            response=response,
            platform_name=name,
            position=pos,
            created_at=response.created_at,
        )
        for pos, name in enumerate(platforms)
    ]
    PlatformSelection.objects.bulk_create(selections)
    logger.info("Recorded response %s for survey %s (%d selections)", response.id, survey_id, len(selections))
    return response


@transaction.atomic
def reset_responses(survey_id: UUID) -> int:
    """
    Delete every response of a survey (selections cascade) and return how many
    response rows went away. The survey itself is kept; zero matches is fine.
    """
    _, per_model = SurveyResponse.objects.filter(survey_id=survey_id).delete()
    deleted = per_model.get(SurveyResponse._meta.label, 0)
    logger.info("Reset survey %s: %d responses deleted", survey_id, deleted)
    return deleted
