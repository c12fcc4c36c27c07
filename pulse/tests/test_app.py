import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from app import create_app

SAMPLE_REPORT = {
    "insights": [],
    "themes": [{"theme": "newsletter", "count": 2}],
    "competitors": [],
    "totalPosts": 0,
    "timestamp": "2024-05-01T12:00:00+00:00",
}


class ApiRoutesTests(unittest.TestCase):
    def setUp(self):
        self.client = create_app().test_client()

    @patch("api_routes.pulse.analyze", return_value=SAMPLE_REPORT)
    def test_analyze_returns_success_envelope(self, mock_analyze):
        response = self.client.get("/api/analyze")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json(), {"success": True, "data": SAMPLE_REPORT})
        mock_analyze.assert_called_once_with()

    @patch("api_routes.pulse.analyze", side_effect=RuntimeError("pipeline exploded"))
    def test_analyze_failure_returns_500(self, _mock_analyze):
        with self.assertLogs("competitorpulse", level="ERROR"):
            response = self.client.get("/api/analyze")

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.get_json(), {"success": False, "error": "Failed to analyze Reddit data"})

    def test_analyze_succeeds_when_one_platform_fails(self):
        def fake_get(url, params=None):
            if params["q"].startswith("ghost"):
                return None
            children = [
                {"data": {"id": f"{params['q']}-{i}", "title": "Love the editor", "ups": 3}}
                for i in range(2)
            ]
            return {"data": {"children": children}}

        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "queries.yaml"
            path.write_text(
                "platforms:\n  Medium:\n    - medium.com\n  Ghost:\n    - ghost.org\n  Hashnode:\n    - hashnode\n",
                encoding="utf-8",
            )
            env = {"PULSE_QUERIES_PATH": str(path), "PULSE_QUERY_DELAY": "0"}
            with patch.dict(os.environ, env, clear=True), patch(
                "pulse.http_client.HttpClient.get", side_effect=fake_get
            ):
                response = self.client.get("/api/analyze")

        payload = response.get_json()
        self.assertEqual(response.status_code, 200)
        self.assertTrue(payload["success"])
        competitors = {c["platform"]: c for c in payload["data"]["competitors"]}
        self.assertEqual(competitors["Ghost"]["mentions"], 0)
        self.assertEqual(competitors["Ghost"]["sentiment"], 0.5)
        self.assertEqual(competitors["Hashnode"]["mentions"], 2)
        self.assertEqual(competitors["Hashnode"]["sentiment"], 1.0)
        self.assertEqual(payload["data"]["totalPosts"], 4)

    def test_health(self):
        response = self.client.get("/health")
        payload = response.get_json()
        self.assertEqual(response.status_code, 200)
        self.assertEqual(payload["status"], "OK")
        self.assertIn("timestamp", payload)

    def test_cors_allows_any_origin(self):
        response = self.client.get("/health", headers={"Origin": "https://example.com"})
        self.assertEqual(response.headers.get("Access-Control-Allow-Origin"), "*")

    def test_post_not_allowed(self):
        self.assertEqual(self.client.post("/api/analyze").status_code, 405)


if __name__ == "__main__":
    unittest.main()
