from datetime import timedelta

from django.db import DatabaseError
from django.test import Client, SimpleTestCase, TestCase
from django.utils import timezone
from rest_framework.exceptions import NotFound, ValidationError
from rest_framework.test import APIClient
from apps.core.enums import Platform
from apps.core.exceptions import api_exception_handler
from apps.surveys.models import Survey


class CoreApiTests(TestCase):
    def setUp(self):
        self.client = APIClient()

    def test_health(self):
        resp = self.client.get("/api/health")
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertEqual(body["status"], "ok")
        self.assertTrue(body["timestamp"].endswith("Z"))

    def test_platform_vocabulary(self):
        resp = self.client.get("/api/platforms")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), Platform.names())

    def test_unknown_api_path_is_json_404(self):
        resp = self.client.get("/api/nope")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {"error": "Not found", "path": "/api/nope"})

    def test_method_not_allowed_uses_error_envelope(self):
        resp = self.client.patch("/api/surveys", {}, format="json")
        self.assertEqual(resp.status_code, 405)
        self.assertIn("error", resp.json())




class CsrfEnforcedNotFoundTests(TestCase):
    """Browsers send no CSRF token; unmatched API paths must still answer with JSON."""

    def setUp(self):
        self.client = Client(enforce_csrf_checks=True)

    def test_unsafe_methods_on_malformed_id_are_json_404(self):
        for method in ("delete", "put", "post"):
            resp = getattr(self.client, method)("/api/surveys/not-a-uuid", data="{}", content_type="application/json")
            self.assertEqual(resp.status_code, 404, method)
            self.assertEqual(resp["Content-Type"], "application/json")
            self.assertEqual(resp.json()["error"], "Not found")

    def test_unknown_api_path_post_is_json_404(self):
        resp = self.client.post("/api/nope", data="{}", content_type="application/json")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {"error": "Not found", "path": "/api/nope"})

    def test_api_views_accept_posts_without_token(self):
        resp = self.client.post("/api/surveys", data='{"title": "T"}', content_type="application/json")
        self.assertEqual(resp.status_code, 201)


class TimeStampedModelTests(TestCase):
    def test_updated_at_matches_created_at_on_insert(self):
        survey = Survey.objects.create(title="T")
        self.assertEqual(survey.updated_at, survey.created_at)

    def test_save_moves_updated_at_forward(self):
        survey = Survey.objects.create(title="T")
        first = survey.updated_at
        survey.title = "T2"
        survey.save(update_fields=["title"])
        survey.refresh_from_db()
        self.assertGreater(survey.updated_at, first)
        self.assertEqual(survey.title, "T2")

    def test_updated_at_never_goes_backwards(self):
        future = timezone.now() + timedelta(days=1)
        survey = Survey.objects.create(title="T", created_at=future)
        survey.save()
        self.assertGreater(survey.updated_at, future)


class ExceptionHandlerTests(SimpleTestCase):
    def test_database_error_is_500_with_raw_message(self):
        resp = api_exception_handler(DatabaseError("disk I/O error"), {"view": None})
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.data, {"error": "disk I/O error"})

    def test_not_found_detail_flattened(self):
        resp = api_exception_handler(NotFound("Survey not found"), {"view": None})
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.data, {"error": "Survey not found"})

    def test_validation_error_wrapped(self):
        resp = api_exception_handler(ValidationError({"title": ["This field is required."]}), {"view": None})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.data["error"], "Invalid request data")
        self.assertEqual(resp.data["details"], {"title": ["This field is required."]})

    def test_unknown_exceptions_left_to_django(self):
        self.assertIsNone(api_exception_handler(RuntimeError("boom"), {"view": None}))
