"""
Survey API client
=================
One method per backend endpoint. Any non-2xx reply raises ApiError; nothing is
retried.

The base URL defaults to SURVEY_API_URL (or http://localhost:3001/api).
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

import requests

DEFAULT_BASE_URL = "http://localhost:3001/api"
DEFAULT_TIMEOUT = 10.0


class ApiError(Exception):
    """Raised for any non-2xx response."""

    def __init__(self, status_code: int, message: str, payload: Any = None):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message
        self.payload = payload


@dataclass(frozen=True)
class Survey:
    id: str
    title: str
    description: Optional[str]
    is_active: bool
    is_visible: bool
    created_at: str
    updated_at: str

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Survey":
        return cls(
            id=data["id"],
            title=data["title"],
            description=data.get("description"),
            is_active=bool(data["is_active"]),
            is_visible=bool(data["is_visible"]),
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )


class SurveyApiClient:
    """Thin wrapper over the HTTP API. Pass `session` to reuse or stub the transport."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.base_url = (base_url or os.getenv("SURVEY_API_URL") or DEFAULT_BASE_URL).rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _request(self, method: str, path: str, payload: Optional[dict] = None) -> requests.Response:
        resp = self.session.request(method, f"{self.base_url}{path}", json=payload, timeout=self.timeout)
        if not resp.ok:
            try:
                body = resp.json()
            except ValueError:
                body = None
            message = body.get("error") if isinstance(body, dict) else None
            raise ApiError(resp.status_code, message or resp.reason or "Request failed", body)
        return resp

    # ---- Surveys ----

    def get_surveys(self) -> List[Survey]:
        return [Survey.from_json(s) for s in self._request("GET", "/surveys").json()]

    def get_all_surveys(self) -> List[Survey]:
        return [Survey.from_json(s) for s in self._request("GET", "/surveys/all").json()]

    def get_survey(self, survey_id: str) -> Survey:
        return Survey.from_json(self._request("GET", f"/surveys/{survey_id}").json())

    def create_survey(
        self,
        title: str,
        description: Optional[str] = None,
        is_active: bool = True,
        is_visible: bool = True,
    ) -> Survey:
        payload = {"title": title, "description": description, "is_active": is_active, "is_visible": is_visible}
        return Survey.from_json(self._request("POST", "/surveys", payload).json())

    def update_survey(
        self,
        survey_id: str,
        title: str,
        description: Optional[str],
        is_active: bool,
        is_visible: bool,
    ) -> Survey:
        payload = {"title": title, "description": description, "is_active": is_active, "is_visible": is_visible}
        return Survey.from_json(self._request("PUT", f"/surveys/{survey_id}", payload).json())

    def delete_survey(self, survey_id: str) -> None:
        self._request("DELETE", f"/surveys/{survey_id}")

    # ---- Responses ----

    def submit_response(self, survey_id: str, platforms: Sequence[str]) -> Dict[str, str]:
        payload = {"survey_id": survey_id, "platforms": list(platforms)}
        return self._request("POST", "/responses", payload).json()

    def delete_all_responses(self, survey_id: str) -> Dict[str, Any]:
        return self._request("DELETE", f"/surveys/{survey_id}/responses").json()

    # ---- Results ----

    def get_survey_results(self, survey_id: str) -> Dict[str, Any]:
        return self._request("GET", f"/surveys/{survey_id}/results").json()

    def get_survey_stats(self, survey_id: str) -> Dict[str, Any]:
        return self._request("GET", f"/surveys/{survey_id}/stats").json()

    def get_overview(self) -> Dict[str, Any]:
        return self._request("GET", "/stats").json()

    def export_survey_csv(self, survey_id: str) -> str:
        resp = self._request("GET", f"/surveys/{survey_id}/export")
        resp.encoding = "utf-8-sig"
        return resp.text

    def get_platforms(self) -> List[str]:
        return self._request("GET", "/platforms").json()

    def health_check(self) -> Dict[str, str]:
        return self._request("GET", "/health").json()
