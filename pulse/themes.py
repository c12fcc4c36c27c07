"""
Keyword-frequency theme extraction over a post collection.
"""
from __future__ import annotations

from typing import Dict, List, Sequence

from pulse.lexicon import DEFAULT_LEXICON, Lexicon
from pulse.models import Post, ThemeCount

DEFAULT_TOP_N = 10


class ThemeExtractor:
    def __init__(self, lexicon: Lexicon = DEFAULT_LEXICON, top_n: int = DEFAULT_TOP_N) -> None:
        self.keywords = lexicon.themes
        self.top_n = top_n

    def extract(self, posts: Sequence[Post]) -> List[ThemeCount]:
        """
        Count how many posts mention each keyword (once per post) and return the
        most frequent ones. Ties keep the keyword declaration order.
        """
        counts: Dict[str, int] = {}
        for post in posts:
            text = post.text.lower()
            for keyword in self.keywords:
                if keyword in text:
                    counts[keyword] = counts.get(keyword, 0) + 1

        ranked = sorted(
            (kw for kw in self.keywords if counts.get(kw)),
            key=lambda kw: counts[kw],
            reverse=True,
        )
        return [ThemeCount(theme=kw, count=counts[kw]) for kw in ranked[: self.top_n]]
