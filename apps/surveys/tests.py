from datetime import timedelta
import uuid

from django.test import TestCase
from django.utils import timezone
from rest_framework.test import APIClient
from apps.surveys.models import Survey
from apps.responses.models import SurveyResponse, PlatformSelection


class SurveysApiTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        base = timezone.now() - timedelta(hours=1)
        self.old = Survey.objects.create(title="Old", created_at=base)
        self.hidden = Survey.objects.create(title="Hidden", is_visible=False, created_at=base + timedelta(minutes=1))
        self.new = Survey.objects.create(title="New", is_active=False, created_at=base + timedelta(minutes=2))

    def test_create_defaults_and_roundtrip(self):
        resp = self.client.post("/api/surveys", {"title": "T"}, format="json")
        self.assertEqual(resp.status_code, 201)
        body = resp.json()
        self.assertEqual(body["title"], "T")
        self.assertIsNone(body["description"])
        self.assertTrue(body["is_active"])
        self.assertTrue(body["is_visible"])
        self.assertEqual(body["created_at"], body["updated_at"])

        fetched = self.client.get(f"/api/surveys/{body['id']}")
        self.assertEqual(fetched.status_code, 200)
        self.assertEqual(fetched.json(), body)

    def test_create_with_all_fields(self):
        payload = {"title": "Social", "description": "Which apps?", "is_active": False, "is_visible": False}
        resp = self.client.post("/api/surveys", payload, format="json")
        self.assertEqual(resp.status_code, 201)
        survey = Survey.objects.get(pk=resp.json()["id"])
        self.assertEqual(survey.description, "Which apps?")
        self.assertFalse(survey.is_active)
        self.assertFalse(survey.is_visible)

    def test_create_requires_title(self):
        resp = self.client.post("/api/surveys", {"description": "no title"}, format="json")
        self.assertEqual(resp.status_code, 400)
        body = resp.json()
        self.assertEqual(body["error"], "Invalid request data")
        self.assertIn("title", body["details"])

        blank = self.client.post("/api/surveys", {"title": "   "}, format="json")
        self.assertEqual(blank.status_code, 400)
        self.assertEqual(Survey.objects.count(), 3)

    def test_list_visible_newest_first(self):
        resp = self.client.get("/api/surveys")
        self.assertEqual(resp.status_code, 200)
        titles = [s["title"] for s in resp.json()]
        # inactive but visible surveys are still listed
        self.assertEqual(titles, ["New", "Old"])

    def test_list_all_includes_hidden(self):
        resp = self.client.get("/api/surveys/all")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual([s["title"] for s in resp.json()], ["New", "Hidden", "Old"])

    def test_get_missing_is_404(self):
        resp = self.client.get(f"/api/surveys/{uuid.uuid4()}")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {"error": "Survey not found"})

    def test_malformed_id_is_json_404(self):
        resp = self.client.get("/api/surveys/not-a-uuid")
        self.assertEqual(resp.status_code, 404)
        self.assertIn("error", resp.json())

    def test_update_replaces_fields_and_bumps_updated_at(self):
        before = Survey.objects.get(pk=self.old.pk)
        payload = {"title": "Renamed", "description": "d", "is_active": False, "is_visible": False}
        resp = self.client.put(f"/api/surveys/{self.old.id}", payload, format="json")
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertEqual(body["id"], str(self.old.id))
        self.assertEqual(body["title"], "Renamed")
        self.assertEqual(body["description"], "d")
        self.assertFalse(body["is_active"])
        self.assertFalse(body["is_visible"])

        after = Survey.objects.get(pk=self.old.pk)
        self.assertEqual(after.created_at, before.created_at)
        self.assertGreater(after.updated_at, before.updated_at)

    def test_update_requires_every_field(self):
        resp = self.client.put(f"/api/surveys/{self.old.id}", {"title": "Only title"}, format="json")
        self.assertEqual(resp.status_code, 400)
        self.assertIn("is_active", resp.json()["details"])
        self.assertEqual(Survey.objects.get(pk=self.old.pk).title, "Old")

    def test_update_missing_is_404(self):
        payload = {"title": "X", "description": None, "is_active": True, "is_visible": True}
        resp = self.client.put(f"/api/surveys/{uuid.uuid4()}", payload, format="json")
        self.assertEqual(resp.status_code, 404)

    def test_delete_cascades(self):
        for platforms in (["A", "B"], ["A"]):
            r = SurveyResponse.objects.create(survey=self.old)
            for pos, name in enumerate(platforms):
                PlatformSelection.objects.create(response=r, platform_name=name, position=pos)
        other = SurveyResponse.objects.create(survey=self.new)
        PlatformSelection.objects.create(response=other, platform_name="C")

        resp = self.client.delete(f"/api/surveys/{self.old.id}")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"message": "Survey deleted successfully"})
        self.assertFalse(Survey.objects.filter(pk=self.old.pk).exists())
        self.assertEqual(SurveyResponse.objects.count(), 1)
        self.assertEqual(PlatformSelection.objects.count(), 1)

        results = self.client.get(f"/api/surveys/{self.old.id}/results")
        self.assertEqual(results.json(), {"total_responses": 0, "platform_counts": []})

    def test_delete_missing_is_404(self):
        resp = self.client.delete(f"/api/surveys/{uuid.uuid4()}")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(Survey.objects.count(), 3)
