import sqlite3
import sys
import tempfile
import unittest
from dataclasses import replace
from pathlib import Path
from unittest.mock import patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from fastapi.testclient import TestClient  # noqa: E402

from app.core import security  # noqa: E402
from app.core.config import settings  # noqa: E402
from app.core.rate_limit import limiter  # noqa: E402
from app.history import db as history_db  # noqa: E402
from app.main import app  # noqa: E402


class ExplainApiTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def setUp(self):
        limiter.reset()
        self._tmp = tempfile.TemporaryDirectory()
        db_path = Path(self._tmp.name) / "explain_runs.db"
        self._path_patch = patch.object(history_db, "_get_db_path", return_value=db_path)
        self._path_patch.start()
        self.headers = {"X-Org-Key": "org-acme", "X-User-Id": "recruiter-7"}
        self.payload = {
            "resumeText": "Built backend services in Python and wrote complex SQL queries.",
            "jobDescriptionText": "Looking for a Python backend engineer with strong SQL skills.",
            "jobId": "job-42",
            "candidateId": "cand-7",
        }

    def tearDown(self):
        self._path_patch.stop()
        self._tmp.cleanup()

    def test_explain_contract(self):
        response = self.client.post("/v1/explain", json=self.payload, headers=self.headers)
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["score"], 75)
        self.assertTrue(body["summary"])
        self.assertTrue(body["runId"])
        self.assertEqual(body["skills"]["matched"], ["python", "backend", "sql"])
        self.assertEqual(body["skills"]["gaps"], ["engineer"])
        self.assertEqual(body["skills"]["transferable"], [])
        self.assertEqual(body["strengths"], body["skills"]["matched"])
        self.assertEqual(len(body["interviewQuestions"]["behavioral"]), 3)
        first = body["reasons"][0]
        self.assertEqual(first["requirement"], "Keyword match: python")
        self.assertEqual(first["evidence"][0]["source"], "Resume")

    def test_snake_case_payload_is_accepted(self):
        response = self.client.post(
            "/v1/explain",
            json={"resume_text": "Python developer.", "job_description_text": "Python developer wanted."},
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["score"], 67)

    def test_blank_or_missing_text_is_rejected(self):
        blank = self.client.post("/v1/explain", json={**self.payload, "jobDescriptionText": "   "})
        self.assertEqual(blank.status_code, 422)
        missing = self.client.post("/v1/explain", json={"resumeText": "Python developer."})
        self.assertEqual(missing.status_code, 422)

    def test_oversized_text_is_rejected(self):
        oversized = "python " * (settings.explain_max_input_chars // 7 + 1)
        response = self.client.post("/v1/explain", json={**self.payload, "resumeText": oversized})
        self.assertEqual(response.status_code, 422)

    def test_run_is_persisted_and_tenant_scoped(self):
        response = self.client.post("/v1/explain", json=self.payload, headers=self.headers)
        run_id = response.json()["runId"]

        listing = self.client.get("/v1/explain/runs", headers=self.headers)
        self.assertEqual(listing.status_code, 200)
        self.assertEqual([row["runId"] for row in listing.json()], [run_id])

        detail = self.client.get(f"/v1/explain/runs/{run_id}", headers=self.headers)
        self.assertEqual(detail.status_code, 200)
        body = detail.json()
        self.assertEqual(body["score"], 75)
        self.assertEqual(body["jobId"], "job-42")
        self.assertEqual(body["candidateId"], "cand-7")
        self.assertEqual(body["userId"], "recruiter-7")
        self.assertEqual(body["result"]["skills"]["gaps"], ["engineer"])

        other_tenant = self.client.get(f"/v1/explain/runs/{run_id}", headers={"X-Org-Key": "org-other"})
        self.assertEqual(other_tenant.status_code, 404)

    def test_persistence_failure_does_not_change_response(self):
        expected = self.client.post("/v1/explain", json=self.payload, headers=self.headers).json()
        with patch(
            "app.services.explain_service.record_explain_run",
            side_effect=sqlite3.OperationalError("database is locked"),
        ):
            with self.assertLogs("app.services.explain_service", level="WARNING"):
                response = self.client.post("/v1/explain", json=self.payload, headers=self.headers)
        self.assertEqual(response.status_code, 200)
        body = response.json()
        body.pop("runId")
        expected.pop("runId")
        self.assertEqual(body, expected)

    def test_unknown_run_returns_404(self):
        response = self.client.get("/v1/explain/runs/does-not-exist", headers=self.headers)
        self.assertEqual(response.status_code, 404)

    def test_protected_mode_requires_api_key(self):
        protected = replace(settings, explain_auth_mode="protected", api_key="secret-key")
        with patch.object(security, "settings", protected):
            denied = self.client.post("/v1/explain", json=self.payload)
            self.assertEqual(denied.status_code, 401)
            allowed = self.client.post("/v1/explain", json=self.payload, headers={"X-API-Key": "secret-key"})
            self.assertEqual(allowed.status_code, 200)

    def test_run_history_requires_configured_key_in_public_mode(self):
        keyed = replace(settings, explain_auth_mode="public", api_key="secret-key")
        with patch.object(security, "settings", keyed):
            created = self.client.post("/v1/explain", json=self.payload, headers=self.headers)
            self.assertEqual(created.status_code, 200)
            run_id = created.json()["runId"]

            self.assertEqual(self.client.get("/v1/explain/runs", headers=self.headers).status_code, 401)
            self.assertEqual(
                self.client.get(f"/v1/explain/runs/{run_id}", headers=self.headers).status_code,
                401,
            )

            authed = {**self.headers, "X-API-Key": "secret-key"}
            listing = self.client.get("/v1/explain/runs", headers=authed)
            self.assertEqual(listing.status_code, 200)
            self.assertEqual([row["runId"] for row in listing.json()], [run_id])
            detail = self.client.get(f"/v1/explain/runs/{run_id}", headers=authed)
            self.assertEqual(detail.status_code, 200)

    def test_health(self):
        response = self.client.get("/v1/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "healthy")


if __name__ == "__main__":
    unittest.main()
