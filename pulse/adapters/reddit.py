"""
Adapter dedicated to the Reddit public search endpoint.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pulse.http_client import HttpClient
from pulse.models import Post

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://www.reddit.com"
DEFAULT_USER_AGENT = "CompetitorAnalysis/1.0"


def _parse_created(value: Any) -> Optional[datetime]:
    if value is None:
        return None
    try:
        return datetime.fromtimestamp(float(value), tz=timezone.utc)
    except (TypeError, ValueError, OverflowError, OSError):
        return None


def _non_negative_int(value: Any) -> int:
    try:
        return max(0, int(value or 0))
    except (TypeError, ValueError, OverflowError):
        return 0


def _to_post(data: Dict[str, Any]) -> Optional[Post]:
    post_id = data.get("id")
    if not post_id:
        return None
    return Post(
        id=str(post_id),
        title=data.get("title") or "",
        body=data.get("selftext") or "",
        community=data.get("subreddit") or "",
        upvotes=_non_negative_int(data.get("ups")),
        comment_count=_non_negative_int(data.get("num_comments")),
        created_at=_parse_created(data.get("created_utc")),
        url=data.get("url"),
        author=data.get("author"),
    )


class RedditSearchAdapter:
    """
    Runs ``/search.json`` queries (newest first, past week) and normalizes the results.
    """

    name = "reddit"

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 15,
        sort: str = "new",
        time_window: str = "week",
        http: Optional[HttpClient] = None,
    ) -> None:
        self.search_url = f"{base_url.rstrip('/')}/search.json"
        self.sort = sort
        self.time_window = time_window
        self.http = http or HttpClient(timeout=timeout, user_agent=user_agent)

    def fetch(self, query: str, limit: int, *, context: Optional[str] = None) -> List[Post]:
        if limit < 1:
            raise ValueError("limit must be >= 1")
        query = (query or "").strip()
        if not query:
            return []

        label = context or self.name
        params = {
            "q": query,
            "limit": limit,
            "sort": self.sort,
            "t": self.time_window,
        }
        payload = self.http.get(self.search_url, params=params)
        if payload is None:
            logger.warning("Error fetching Reddit data for %s query %r; treating as no results", label, query)
            return []

        try:
            children = payload["data"]["children"]
            posts = [_to_post(child["data"]) for child in children]
        except (KeyError, TypeError, AttributeError, ValueError, OverflowError) as exc:
            logger.warning("Malformed Reddit response for %s query %r: %s", label, query, exc)
            return []

        collected = [post for post in posts if post is not None]
        logger.debug("Reddit query %r (%s) returned %d posts", query, label, len(collected))
        return collected

    def close(self) -> None:
        self.http.close()
