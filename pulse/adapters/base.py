"""
Adapter protocol for pluggable post sources.
"""
from __future__ import annotations

from typing import List, Optional, Protocol

from pulse.models import Post


class PostSource(Protocol):
    """
    Given a query string and a result limit, return matching posts.

    Implementations absorb transport and parse failures and return an empty
    list instead of raising, so one bad query cannot abort a platform's analysis.
    """

    name: str

    def fetch(self, query: str, limit: int, *, context: Optional[str] = None) -> List[Post]:
        ...
