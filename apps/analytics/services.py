from __future__ import annotations

from typing import Any, Dict, List, Optional
from uuid import UUID

from django.db.models import Count, Prefetch, QuerySet

from apps.core.enums import Platform
from apps.responses.models import SurveyResponse, PlatformSelection

RECENT_RESPONSES_LIMIT = 10
PLATFORM_DELIMITER = ", "


def total_responses(survey_id: Optional[UUID] = None) -> int:
    qs = SurveyResponse.objects.all()
    if survey_id is not None:
        qs = qs.filter(survey_id=survey_id)
    return qs.count()


def platform_counts(survey_id: Optional[UUID] = None) -> List[Dict[str, Any]]:
    """
    Selections grouped by platform name, most selected first; ties broken by name.
    Platforms nobody picked are absent.
    """
    qs = PlatformSelection.objects.all()
    if survey_id is not None:
        qs = qs.filter(response__survey_id=survey_id)
    series = (
        qs.values("platform_name")
          .annotate(count=Count("id"))
          .order_by("-count", "platform_name")
    )
    return [{"platform_name": row["platform_name"], "count": row["count"]} for row in series]


def responses_with_selections(survey_id: Optional[UUID] = None) -> QuerySet:
    """Responses newest first, with their selections prefetched in insertion order."""
    qs = SurveyResponse.objects.prefetch_related(
        Prefetch("selections", queryset=PlatformSelection.objects.order_by("position", "created_at"))
    )
    if survey_id is not None:
        qs = qs.filter(survey_id=survey_id)
    return qs.order_by("-created_at", "-id")


def joined_platforms(response: SurveyResponse, delimiter: str = PLATFORM_DELIMITER) -> str:
    return delimiter.join(sel.platform_name for sel in response.selections.all())


def survey_results(survey_id: UUID) -> Dict[str, Any]:
    """Totals for one survey. An unknown survey simply yields zeros."""
    return {
        "total_responses": total_responses(survey_id),
        "platform_counts": platform_counts(survey_id),
    }


def survey_stats(survey_id: UUID) -> Dict[str, Any]:
    data = survey_results(survey_id)
    data["recent_responses"] = list(responses_with_selections(survey_id)[:RECENT_RESPONSES_LIMIT])
    return data


def overview() -> Dict[str, Any]:
    """
    Dashboard numbers across every survey.

    Platform counts are zero-filled against the Platform vocabulary (names seen
    outside it are kept too) and carry a percentage of responses that picked them.
    """
    total = total_responses()
    counts = {name: 0 for name in Platform.names()}
    for row in platform_counts():
        counts[row["platform_name"]] = row["count"]

    total_selections = sum(counts.values())
    ranked = sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))
    return {
        "total_responses": total,
        "total_selections": total_selections,
        "average_selections_per_response": round(total_selections / total, 1) if total else 0.0,
        "platform_counts": [
            {
                "platform_name": name,
                "count": count,
                "percentage": round(count / total * 100, 1) if total else 0.0,
            }
            for name, count in ranked
        ],
        "recent_responses": list(responses_with_selections().select_related("survey")[:RECENT_RESPONSES_LIMIT]),
    }
