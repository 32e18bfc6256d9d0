from __future__ import annotations

from rest_framework.exceptions import NotFound


def get_or_404(queryset, message: str, **lookup):
    """Fetch a single row or raise DRF NotFound with a readable message."""
    obj = queryset.filter(**lookup).first()
    if obj is None:
        raise NotFound(message)
    return obj
