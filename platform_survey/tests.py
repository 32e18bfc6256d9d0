import os
import uuid
from unittest import mock

from django.test import TestCase
from rest_framework.test import RequestsClient
from platform_survey.client import SurveyApiClient, ApiError, Survey


class SurveyApiClientTests(TestCase):
    """Drives the client against the in-process app through DRF's RequestsClient."""

    def setUp(self):
        self.api = SurveyApiClient(base_url="http://testserver/api/", session=RequestsClient())

    def test_base_url_from_environment(self):
        with mock.patch.dict(os.environ, {"SURVEY_API_URL": "http://example.test/api/"}):
            self.assertEqual(SurveyApiClient().base_url, "http://example.test/api")

    def test_full_admin_flow(self):
        created = self.api.create_survey("Which platforms?", "pick all")
        self.assertIsInstance(created, Survey)
        self.assertTrue(created.is_active)
        self.assertEqual(created.created_at, created.updated_at)

        self.assertEqual([s.id for s in self.api.get_surveys()], [created.id])
        self.assertEqual(self.api.get_survey(created.id), created)

        self.api.submit_response(created.id, ["A", "B"])
        reply = self.api.submit_response(created.id, ["A"])
        self.assertEqual(reply["message"], "Response submitted successfully")

        results = self.api.get_survey_results(created.id)
        self.assertEqual(results["total_responses"], 2)
        self.assertEqual(results["platform_counts"][0], {"platform_name": "A", "count": 2})

        stats = self.api.get_survey_stats(created.id)
        self.assertEqual(len(stats["recent_responses"]), 2)

        csv_text = self.api.export_survey_csv(created.id)
        self.assertTrue(csv_text.startswith("response_id,"))

        updated = self.api.update_survey(created.id, "Renamed", None, is_active=False, is_visible=False)
        self.assertEqual(updated.title, "Renamed")
        self.assertEqual(self.api.get_surveys(), [])
        self.assertEqual(len(self.api.get_all_surveys()), 1)

        self.assertEqual(self.api.delete_all_responses(created.id)["deleted_count"], 2)
        self.api.delete_survey(created.id)
        self.assertEqual(self.api.get_all_surveys(), [])

    def test_overview_platforms_and_health(self):
        self.assertEqual(self.api.health_check()["status"], "ok")
        self.assertIn("LINE", self.api.get_platforms())
        self.assertEqual(self.api.get_overview()["total_responses"], 0)

    def test_non_2xx_raises(self):
        with self.assertRaises(ApiError) as ctx:
            self.api.get_survey(str(uuid.uuid4()))
        self.assertEqual(ctx.exception.status_code, 404)
        self.assertEqual(ctx.exception.message, "Survey not found")

        survey = self.api.create_survey("S")
        with self.assertRaises(ApiError) as ctx:
            self.api.submit_response(survey.id, [])
        self.assertEqual(ctx.exception.status_code, 400)
        self.assertIn("platforms", ctx.exception.payload["details"])
