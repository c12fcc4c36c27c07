import json
import unittest
from datetime import datetime, timezone
from unittest.mock import MagicMock, patch

import requests

from pulse.adapters.reddit import RedditSearchAdapter
from pulse.http_client import HttpClient

SAMPLE_PAYLOAD = {
    "data": {
        "children": [
            {
                "data": {
                    "id": "abc123",
                    "title": "Moving my newsletter to Substack",
                    "selftext": "Anyone else?",
                    "subreddit": "Blogging",
                    "ups": 42,
                    "num_comments": 7,
                    "created_utc": 1700000000,
                    "url": "https://www.reddit.com/r/Blogging/abc123",
                    "author": "writer1",
                }
            },
            {"data": {"title": "No id, skipped"}},
            {"data": {"id": "def456", "title": "Sparse post", "ups": -3}},
        ]
    }
}


class RedditSearchAdapterTests(unittest.TestCase):
    def setUp(self):
        self.http = MagicMock()
        self.adapter = RedditSearchAdapter(http=self.http)

    def test_fetch_maps_posts(self):
        self.http.get.return_value = SAMPLE_PAYLOAD

        posts = self.adapter.fetch("substack", 25, context="Substack")

        self.http.get.assert_called_once_with(
            "https://www.reddit.com/search.json",
            params={"q": "substack", "limit": 25, "sort": "new", "t": "week"},
        )
        self.assertEqual([p.id for p in posts], ["abc123", "def456"])
        first = posts[0]
        self.assertEqual(first.body, "Anyone else?")
        self.assertEqual(first.community, "Blogging")
        self.assertEqual(first.upvotes, 42)
        self.assertEqual(first.comment_count, 7)
        self.assertEqual(first.created_at, datetime.fromtimestamp(1700000000, tz=timezone.utc))
        self.assertEqual(first.author, "writer1")

        sparse = posts[1]
        self.assertEqual(sparse.body, "")
        self.assertEqual(sparse.upvotes, 0)
        self.assertEqual(sparse.comment_count, 0)
        self.assertIsNone(sparse.created_at)

    def test_transport_failure_returns_empty(self):
        self.http.get.return_value = None
        with self.assertLogs("pulse.adapters.reddit", level="WARNING") as logs:
            self.assertEqual(self.adapter.fetch("ghost.org", 10, context="Ghost"), [])
        self.assertIn("Ghost", logs.output[0])
        self.assertIn("ghost.org", logs.output[0])

    def test_malformed_payload_returns_empty(self):
        for payload in ({"data": {}}, {"data": {"children": [{"nodata": 1}]}}, {"data": {"children": ["x"]}}, []):
            self.http.get.return_value = payload
            self.assertEqual(self.adapter.fetch("hashnode", 10), [])

    def test_non_finite_counts_do_not_raise(self):
        self.http.get.return_value = json.loads(
            '{"data": {"children": [{"data": {"id": "x", "ups": 1e400, "num_comments": Infinity}}]}}'
        )

        posts = self.adapter.fetch("substack", 5)

        self.assertEqual([p.id for p in posts], ["x"])
        self.assertEqual(posts[0].upvotes, 0)
        self.assertEqual(posts[0].comment_count, 0)

    def test_close_releases_http_client(self):
        self.adapter.close()
        self.http.close.assert_called_once_with()

    def test_blank_query_skips_request(self):
        self.assertEqual(self.adapter.fetch("  ", 10), [])
        self.http.get.assert_not_called()

    def test_limit_must_be_positive(self):
        with self.assertRaises(ValueError):
            self.adapter.fetch("devto", 0)

    def test_custom_base_url(self):
        adapter = RedditSearchAdapter(base_url="http://localhost:8080/", http=self.http)
        self.http.get.return_value = {"data": {"children": []}}
        adapter.fetch("medium", 5)
        self.assertEqual(self.http.get.call_args[0][0], "http://localhost:8080/search.json")


class HttpClientTests(unittest.TestCase):
    def test_user_agent_header(self):
        client = HttpClient(user_agent="CompetitorAnalysis/2.0")
        self.assertEqual(client.session.headers["User-Agent"], "CompetitorAnalysis/2.0")
        client.close()

    def test_get_returns_json_on_success(self):
        client = HttpClient()
        response = MagicMock(status_code=200)
        response.json.return_value = {"ok": True}
        with patch.object(client.session, "get", return_value=response) as mock_get:
            self.assertEqual(client.get("https://example.com", params={"q": "x"}), {"ok": True})
        mock_get.assert_called_once_with("https://example.com", params={"q": "x"}, timeout=15)

    def test_get_returns_none_on_error_status(self):
        client = HttpClient()
        response = MagicMock(status_code=429, text="Too Many Requests")
        with patch.object(client.session, "get", return_value=response):
            self.assertIsNone(client.get("https://example.com"))

    def test_get_returns_none_on_exception(self):
        client = HttpClient()
        with patch.object(client.session, "get", side_effect=requests.ConnectionError("boom")):
            self.assertIsNone(client.get("https://example.com"))

    def test_get_returns_none_on_invalid_json(self):
        client = HttpClient()
        response = MagicMock(status_code=200)
        response.json.side_effect = ValueError("not json")
        with patch.object(client.session, "get", return_value=response):
            self.assertIsNone(client.get("https://example.com"))


if __name__ == "__main__":
    unittest.main()
