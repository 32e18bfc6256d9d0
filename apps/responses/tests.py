import uuid

from django.test import TestCase, TransactionTestCase
from rest_framework.test import APIClient
from apps.surveys.models import Survey
from apps.responses.models import SurveyResponse, PlatformSelection


class SubmitResponseApiTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.survey = Survey.objects.create(title="Social media")

    def test_submit_success(self):
        payload = {"survey_id": str(self.survey.id), "platforms": ["Instagram", "LINE"]}
        resp = self.client.post("/api/responses", payload, format="json")
        self.assertEqual(resp.status_code, 201)
        body = resp.json()
        self.assertEqual(body["message"], "Response submitted successfully")

        response = SurveyResponse.objects.get(pk=body["id"])
        self.assertEqual(response.survey_id, self.survey.id)
        self.assertIsNotNone(response.session_id)
        self.assertNotEqual(response.session_id, response.id)
        names = list(response.selections.values_list("platform_name", "position"))
        self.assertEqual(names, [("Instagram", 0), ("LINE", 1)])
        for sel in response.selections.all():
            self.assertEqual(sel.created_at, response.created_at)

    def test_duplicates_are_kept(self):
        payload = {"survey_id": str(self.survey.id), "platforms": ["X", "Y", "X"]}
        resp = self.client.post("/api/responses", payload, format="json")
        self.assertEqual(resp.status_code, 201)
        self.assertEqual(PlatformSelection.objects.filter(response__survey=self.survey).count(), 3)

    def test_unknown_platform_and_inactive_survey_accepted(self):
        closed = Survey.objects.create(title="Closed", is_active=False)
        payload = {"survey_id": str(closed.id), "platforms": ["Not a real platform"]}
        resp = self.client.post("/api/responses", payload, format="json")
        self.assertEqual(resp.status_code, 201)
        self.assertEqual(closed.responses.count(), 1)

    def test_invalid_shapes_rejected(self):
        bad_payloads = [
            {"survey_id": str(self.survey.id), "platforms": []},
            {"platforms": ["A"]},
            {"survey_id": str(self.survey.id)},
            {"survey_id": str(self.survey.id), "platforms": "A"},
            {"survey_id": "not-a-uuid", "platforms": ["A"]},
        ]
        for payload in bad_payloads:
            resp = self.client.post("/api/responses", payload, format="json")
            self.assertEqual(resp.status_code, 400, payload)
            self.assertEqual(resp.json()["error"], "Invalid request data")
        self.assertEqual(SurveyResponse.objects.count(), 0)
        self.assertEqual(PlatformSelection.objects.count(), 0)


class ResetResponsesApiTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.survey = Survey.objects.create(title="S")
        self.other = Survey.objects.create(title="Other")
        for platforms in (["A", "B"], ["A"]):
            self.client.post("/api/responses", {"survey_id": str(self.survey.id), "platforms": platforms}, format="json")
        self.client.post("/api/responses", {"survey_id": str(self.other.id), "platforms": ["C"]}, format="json")

    def test_reset_deletes_responses_and_selections(self):
        resp = self.client.delete(f"/api/surveys/{self.survey.id}/responses")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"message": "All responses deleted successfully", "deleted_count": 2})
        self.assertTrue(Survey.objects.filter(pk=self.survey.pk).exists())
        self.assertEqual(self.survey.responses.count(), 0)
        self.assertFalse(PlatformSelection.objects.filter(response__survey=self.survey).exists())
        # other surveys untouched
        self.assertEqual(self.other.responses.count(), 1)
        self.assertEqual(PlatformSelection.objects.count(), 1)

    def test_reset_is_idempotent(self):
        first = self.client.delete(f"/api/surveys/{self.survey.id}/responses").json()
        second = self.client.delete(f"/api/surveys/{self.survey.id}/responses").json()
        self.assertEqual(first["deleted_count"], 2)
        self.assertEqual(second["deleted_count"], 0)

    def test_reset_unknown_survey_succeeds(self):
        resp = self.client.delete(f"/api/surveys/{uuid.uuid4()}/responses")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["deleted_count"], 0)


class SubmitUnknownSurveyTests(TransactionTestCase):
    """Foreign key violations only surface at commit, so this runs outside a test transaction."""

    def test_unknown_survey_is_store_failure_and_persists_nothing(self):
        client = APIClient()
        payload = {"survey_id": str(uuid.uuid4()), "platforms": ["A", "B"]}
        resp = client.post("/api/responses", payload, format="json")
        self.assertEqual(resp.status_code, 500)
        self.assertIn("error", resp.json())
        self.assertEqual(SurveyResponse.objects.count(), 0)
        self.assertEqual(PlatformSelection.objects.count(), 0)


class SubmitPermissiveContentTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.survey = Survey.objects.create(title="Anything goes")

    def test_blank_and_long_names_are_stored_as_given(self):
        long_name = "x" * 300
        payload = {"survey_id": str(self.survey.id), "platforms": ["", "LINE", long_name, " padded "]}
        resp = self.client.post("/api/responses", payload, format="json")
        self.assertEqual(resp.status_code, 201)
        stored = list(
            PlatformSelection.objects.filter(response_id=resp.json()["id"]).values_list("platform_name", flat=True)
        )
        self.assertEqual(stored, ["", "LINE", long_name, " padded "])

    def test_blank_only_submission_accepted(self):
        payload = {"survey_id": str(self.survey.id), "platforms": ["", "LINE"]}
        resp = self.client.post("/api/responses", payload, format="json")
        self.assertEqual(resp.status_code, 201)
        self.assertEqual(PlatformSelection.objects.filter(response__survey=self.survey).count(), 2)
