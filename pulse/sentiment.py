"""
Lexicon-based sentiment scoring for forum posts.

This is a keyword heuristic, not a classifier: there is no stemming, no
negation handling and no per-keyword weighting. A keyword counts once per text
no matter how often it appears, and matching is plain substring containment
("issues" also matches "reissues").
"""
from __future__ import annotations

import logging
from typing import List, Sequence

from pulse.lexicon import DEFAULT_LEXICON, Lexicon
from pulse.models import Post, SentimentLabel, SentimentResult

logger = logging.getLogger(__name__)

NEUTRAL_SCORE = 0.5
POSITIVE_CUTOFF = 0.6
NEGATIVE_CUTOFF = 0.4


def _get_sentiment_label(score: float) -> SentimentLabel:
    """Map a [0, 1] score to a discrete label.

    Args:
        score: Share of positive keyword hits among all keyword hits.

    Returns:
        ``positive`` above 0.6, ``negative`` below 0.4, ``neutral`` otherwise.
    """
    if score > POSITIVE_CUTOFF:
        return SentimentLabel.POSITIVE
    if score < NEGATIVE_CUTOFF:
        return SentimentLabel.NEGATIVE
    return SentimentLabel.NEUTRAL


class SentimentScorer:
    """
    Scores text by counting which positive and negative keywords it contains.
    """

    def __init__(self, lexicon: Lexicon = DEFAULT_LEXICON) -> None:
        self.lexicon = lexicon

    def score(self, text: str) -> SentimentResult:
        lowered = (text or "").lower()
        positive_hits = sum(1 for word in self.lexicon.positive if word in lowered)
        negative_hits = sum(1 for word in self.lexicon.negative if word in lowered)

        total = positive_hits + negative_hits
        if total == 0:
            return SentimentResult(label=SentimentLabel.NEUTRAL, score=NEUTRAL_SCORE)

        raw_score = positive_hits / total
        return SentimentResult(label=_get_sentiment_label(raw_score), score=raw_score)

    def score_post(self, post: Post) -> SentimentResult:
        return self.score(post.text)

    def score_batch(self, posts: Sequence[Post]) -> List[SentimentResult]:
        return [self.score_post(post) for post in posts]
