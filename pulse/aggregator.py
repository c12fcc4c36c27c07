"""
Per-platform fan-out of search queries, deduplication and metrics.
"""
from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Sequence

from pulse.adapters.base import PostSource
from pulse.dedupe import dedupe_by_key
from pulse.models import Platform, PlatformMetrics, Post
from pulse.rate_limiter import FixedDelayPacing, PacingPolicy
from pulse.sentiment import NEUTRAL_SCORE, SentimentScorer

logger = logging.getLogger(__name__)


class PlatformAggregator:
    """
    Collects a capped, deduplicated post list for every tracked platform.

    Queries run one after another and the pacing policy is consulted after each
    call, so the external source sees a steady, throttled request rate.
    """

    def __init__(
        self,
        source: PostSource,
        platform_queries: Mapping[Platform, Sequence[str]],
        fetch_limit: int = 25,
        post_cap: int = 30,
        pacing: PacingPolicy | None = None,
    ) -> None:
        if fetch_limit < 1:
            raise ValueError("fetch_limit must be >= 1")
        if post_cap < 0:
            raise ValueError("post_cap must be >= 0")
        self.source = source
        self.platform_queries = dict(platform_queries)
        self.fetch_limit = fetch_limit
        self.post_cap = post_cap
        self.pacing = pacing or FixedDelayPacing()

    def collect(self) -> Dict[Platform, List[Post]]:
        platform_posts: Dict[Platform, List[Post]] = {}
        for platform, queries in self.platform_queries.items():
            platform_posts[platform] = self.collect_platform(platform, queries)
        return platform_posts

    def collect_platform(self, platform: Platform, queries: Sequence[str]) -> List[Post]:
        logger.info("Fetching data for %s...", platform.value)
        fetched: List[Post] = []
        for query in self.pacing.queries_for(queries):
            posts = self.source.fetch(query, self.fetch_limit, context=platform.value)
            fetched.extend(posts)
            self.pacing.after_call()

        unique = dedupe_by_key(fetched, key_fn=lambda post: post.id)
        capped = unique[: self.post_cap]
        logger.info(
            "%s: %d fetched, %d unique, %d kept",
            platform.value,
            len(fetched),
            len(unique),
            len(capped),
        )
        return capped


def compute_metrics(platform: Platform, posts: Sequence[Post], scorer: SentimentScorer) -> PlatformMetrics:
    post_count = len(posts)
    total_engagement = sum(post.engagement for post in posts)
    if post_count == 0:
        return PlatformMetrics(
            platform=platform,
            post_count=0,
            avg_sentiment=NEUTRAL_SCORE,
            total_engagement=0,
            avg_engagement=0.0,
        )
    avg_sentiment = sum(result.score for result in scorer.score_batch(posts)) / post_count
    return PlatformMetrics(
        platform=platform,
        post_count=post_count,
        avg_sentiment=avg_sentiment,
        total_engagement=total_engagement,
        avg_engagement=total_engagement / post_count,
    )


def compute_all_metrics(
    platform_posts: Mapping[Platform, Sequence[Post]], scorer: SentimentScorer
) -> Dict[Platform, PlatformMetrics]:
    return {platform: compute_metrics(platform, posts, scorer) for platform, posts in platform_posts.items()}
