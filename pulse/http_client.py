"""
HTTP helper with polite headers reused by the search adapters.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

logger = logging.getLogger(__name__)


class HttpClient:
    def __init__(self, timeout: float = 15, user_agent: str | None = None):
        self.timeout = timeout
        self.session = requests.Session()
        # Single attempt per request; callers treat a failure as an empty result.
        adapter = requests.adapters.HTTPAdapter(max_retries=0)
        self.session.mount("http://", adapter)
        self.session.mount("https://", adapter)
        headers = {
            "User-Agent": user_agent or "CompetitorAnalysis/1.0",
            "Accept": "application/json",
        }
        self.session.headers.update(headers)

    def get(self, url: str, params: Optional[Dict[str, Any]] = None) -> Optional[Dict[str, Any]]:
        try:
            resp = self.session.get(url, params=params, timeout=self.timeout)
            if resp.status_code == 200:
                return resp.json()
            logger.warning("HTTP GET %s failed with %s: %s", url, resp.status_code, resp.text[:200])
        except (requests.RequestException, ValueError) as exc:
            logger.error("HTTP GET %s raised %s", url, exc)
        return None

    def close(self) -> None:
        self.session.close()
