from datetime import timedelta
from unittest import mock
import csv
import io
import uuid

from django.db import OperationalError
from django.test import TestCase
from django.utils import timezone
from rest_framework.test import APIClient
from apps.analytics import services
from apps.core.enums import Platform
from apps.surveys.models import Survey
from apps.responses.models import SurveyResponse, PlatformSelection


def _make_response(survey, platforms, created_at=None):
    resp = SurveyResponse.objects.create(survey=survey, created_at=created_at or timezone.now())
    for pos, name in enumerate(platforms):
        PlatformSelection.objects.create(response=resp, platform_name=name, position=pos, created_at=resp.created_at)
    return resp


class ResultsApiTests(TestCase):
    def setUp(self):
        self.client = APIClient()

    def test_create_submit_results_scenario(self):
        survey_id = self.client.post("/api/surveys", {"title": "T"}, format="json").json()["id"]
        self.client.post("/api/responses", {"survey_id": survey_id, "platforms": ["A", "B"]}, format="json")
        self.client.post("/api/responses", {"survey_id": survey_id, "platforms": ["A"]}, format="json")

        resp = self.client.get(f"/api/surveys/{survey_id}/results")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {
            "total_responses": 2,
            "platform_counts": [
                {"platform_name": "A", "count": 2},
                {"platform_name": "B", "count": 1},
            ],
        })

    def test_counts_sum_to_selections_and_ignore_other_surveys(self):
        survey = Survey.objects.create(title="S")
        other = Survey.objects.create(title="O")
        _make_response(survey, ["LINE", "Instagram", "LINE"])
        _make_response(survey, ["TikTok"])
        _make_response(survey, ["Instagram", "LINE"])
        _make_response(other, ["LINE", "YouTube"])

        body = self.client.get(f"/api/surveys/{survey.id}/results").json()
        self.assertEqual(body["total_responses"], 3)
        counts = body["platform_counts"]
        self.assertEqual(sum(c["count"] for c in counts), 6)
        self.assertEqual(counts[0], {"platform_name": "LINE", "count": 3})
        self.assertNotIn("YouTube", [c["platform_name"] for c in counts])
        values = [c["count"] for c in counts]
        self.assertEqual(values, sorted(values, reverse=True))

    def test_ties_break_by_platform_name(self):
        survey = Survey.objects.create(title="S")
        _make_response(survey, ["Zeta", "Alpha", "Mid"])
        names = [c["platform_name"] for c in self.client.get(f"/api/surveys/{survey.id}/results").json()["platform_counts"]]
        self.assertEqual(names, ["Alpha", "Mid", "Zeta"])

    def test_unknown_survey_gives_zero_totals(self):
        resp = self.client.get(f"/api/surveys/{uuid.uuid4()}/results")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"total_responses": 0, "platform_counts": []})

    def test_store_failure_is_500_with_raw_message(self):
        survey = Survey.objects.create(title="S")
        with mock.patch("apps.analytics.services.total_responses", side_effect=OperationalError("database is locked")):
            resp = self.client.get(f"/api/surveys/{survey.id}/results")
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json(), {"error": "database is locked"})


class StatsApiTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.survey = Survey.objects.create(title="Stats")
        base = timezone.now() - timedelta(hours=1)
        self.responses = [
            _make_response(self.survey, ["B", "A"] if i % 2 else ["A"], created_at=base + timedelta(minutes=i))
            for i in range(12)
        ]

    def test_recent_responses_capped_and_newest_first(self):
        resp = self.client.get(f"/api/surveys/{self.survey.id}/stats")
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertEqual(body["total_responses"], 12)
        self.assertEqual(body["platform_counts"], [
            {"platform_name": "A", "count": 12},
            {"platform_name": "B", "count": 6},
        ])
        recent = body["recent_responses"]
        self.assertEqual(len(recent), 10)
        expected_ids = [str(r.id) for r in reversed(self.responses)][:10]
        self.assertEqual([r["id"] for r in recent], expected_ids)
        stamps = [r["created_at"] for r in recent]
        self.assertEqual(stamps, sorted(stamps, reverse=True))
        self.assertEqual(len(set(stamps)), len(stamps))

    def test_platforms_joined_in_insertion_order(self):
        recent = self.client.get(f"/api/surveys/{self.survey.id}/stats").json()["recent_responses"]
        # newest is i=11 (odd) -> ["B", "A"], next i=10 -> ["A"]
        self.assertEqual(recent[0]["platforms"], "B, A")
        self.assertEqual(recent[1]["platforms"], "A")

    def test_response_without_selections_has_empty_platforms(self):
        bare = SurveyResponse.objects.create(survey=self.survey)
        recent = self.client.get(f"/api/surveys/{self.survey.id}/stats").json()["recent_responses"]
        self.assertEqual(recent[0]["id"], str(bare.id))
        self.assertEqual(recent[0]["platforms"], "")

    def test_per_survey_listing_does_not_join_surveys(self):
        sql = str(services.responses_with_selections(self.survey.id).query)
        self.assertNotIn("JOIN", sql.upper())
        with self.assertNumQueries(4):
            data = services.survey_stats(self.survey.id)
        self.assertEqual(len(data["recent_responses"]), 10)


class OverviewApiTests(TestCase):
    def setUp(self):
        self.client = APIClient()

    def test_empty_overview_zero_fills_vocabulary(self):
        body = self.client.get("/api/stats").json()
        self.assertEqual(body["total_responses"], 0)
        self.assertEqual(body["total_selections"], 0)
        self.assertEqual(body["average_selections_per_response"], 0.0)
        self.assertEqual(
            sorted(c["platform_name"] for c in body["platform_counts"]),
            sorted(Platform.names()),
        )
        self.assertTrue(all(c["count"] == 0 and c["percentage"] == 0.0 for c in body["platform_counts"]))
        self.assertEqual(body["recent_responses"], [])

    def test_overview_across_surveys(self):
        first = Survey.objects.create(title="First")
        second = Survey.objects.create(title="Second")
        base = timezone.now() - timedelta(minutes=10)
        _make_response(first, [Platform.LINE.value, Platform.INSTAGRAM.value], created_at=base)
        _make_response(second, [Platform.LINE.value, "Mastodon"], created_at=base + timedelta(minutes=1))
        latest = _make_response(second, [Platform.LINE.value], created_at=base + timedelta(minutes=2))

        body = self.client.get("/api/stats").json()
        self.assertEqual(body["total_responses"], 3)
        self.assertEqual(body["total_selections"], 5)
        self.assertEqual(body["average_selections_per_response"], 1.7)

        counts = {c["platform_name"]: c for c in body["platform_counts"]}
        self.assertEqual(body["platform_counts"][0]["platform_name"], Platform.LINE.value)
        self.assertEqual(counts[Platform.LINE.value]["count"], 3)
        self.assertEqual(counts[Platform.LINE.value]["percentage"], 100.0)
        self.assertEqual(counts[Platform.INSTAGRAM.value]["percentage"], 33.3)
        self.assertEqual(counts["Mastodon"]["count"], 1)
        self.assertEqual(counts[Platform.TIKTOK.value]["count"], 0)

        recent = body["recent_responses"]
        self.assertEqual(len(recent), 3)
        self.assertEqual(recent[0]["id"], str(latest.id))
        self.assertEqual(recent[0]["survey_id"], str(second.id))
        self.assertEqual(recent[0]["survey_title"], "Second")


class ExportApiTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.survey = Survey.objects.create(title="Export me")
        base = timezone.now() - timedelta(minutes=5)
        self.older = _make_response(self.survey, ["A", "B"], created_at=base)
        self.newer = _make_response(self.survey, ["C"], created_at=base + timedelta(minutes=1))

    def test_csv_rows(self):
        resp = self.client.get(f"/api/surveys/{self.survey.id}/export")
        self.assertEqual(resp.status_code, 200)
        self.assertTrue(resp["Content-Type"].startswith("text/csv"))
        self.assertIn("attachment; filename=\"survey_results_", resp["Content-Disposition"])

        text = resp.content.decode("utf-8")
        self.assertTrue(text.startswith("\ufeff"))
        rows = list(csv.reader(io.StringIO(text.lstrip("\ufeff"))))
        self.assertEqual(rows[0], ["response_id", "survey_title", "created_at", "selection_count", "platforms"])
        self.assertEqual(len(rows), 3)
        self.assertEqual(rows[1][0], str(self.newer.id))
        self.assertEqual(rows[1][1:2], ["Export me"])
        self.assertEqual(rows[2][3:], ["2", "A; B"])

    def test_csv_unknown_survey_is_404(self):
        resp = self.client.get(f"/api/surveys/{uuid.uuid4()}/export")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {"error": "Survey not found"})
