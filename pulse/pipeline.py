"""
High-level orchestration for a single competitor analysis run.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Mapping, Optional, Sequence

from pulse.adapters.base import PostSource
from pulse.adapters.reddit import RedditSearchAdapter
from pulse.aggregator import PlatformAggregator, compute_all_metrics
from pulse.insights import InsightGenerator, InsightRules
from pulse.models import AnalysisResult, Platform
from pulse.rate_limiter import FixedDelayPacing, PacingPolicy
from pulse.sentiment import SentimentScorer
from pulse.settings import PulseSettings
from pulse.themes import ThemeExtractor

logger = logging.getLogger(__name__)


class AnalysisPipeline:
    """
    Wires source, aggregation, scoring and insight rules together.

    Each ``run`` builds its own post sets and metrics; nothing is cached
    between runs.
    """

    def __init__(
        self,
        source: PostSource,
        platform_queries: Mapping[Platform, Sequence[str]],
        *,
        fetch_limit: int = 25,
        post_cap: int = 30,
        pacing: Optional[PacingPolicy] = None,
        scorer: Optional[SentimentScorer] = None,
        theme_extractor: Optional[ThemeExtractor] = None,
        insight_generator: Optional[InsightGenerator] = None,
        owns_source: bool = False,
    ) -> None:
        self.owns_source = owns_source
        self.aggregator = PlatformAggregator(
            source,
            platform_queries,
            fetch_limit=fetch_limit,
            post_cap=post_cap,
            pacing=pacing,
        )
        self.scorer = scorer or SentimentScorer()
        self.theme_extractor = theme_extractor or ThemeExtractor()
        self.insight_generator = insight_generator or InsightGenerator()

    @classmethod
    def from_settings(cls, settings: PulseSettings, source: Optional[PostSource] = None) -> "AnalysisPipeline":
        owns_source = source is None
        if source is None:
            source = RedditSearchAdapter(
                base_url=settings.reddit_base_url,
                user_agent=settings.user_agent,
                timeout=settings.http_timeout,
            )
        rules = InsightRules(
            threat_threshold=settings.threat_threshold,
            frustration_threshold=settings.frustration_threshold,
            engagement_threshold=settings.engagement_threshold,
            threat_formula=settings.threat_formula,
        )
        return cls(
            source,
            settings.platform_queries,
            fetch_limit=settings.fetch_limit,
            post_cap=settings.post_cap,
            pacing=FixedDelayPacing(settings.query_delay, settings.queries_per_platform),
            insight_generator=InsightGenerator(rules),
            owns_source=owns_source,
        )

    def close(self) -> None:
        """Release the source's connections if this pipeline created it."""
        if not self.owns_source:
            return
        close = getattr(self.aggregator.source, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> "AnalysisPipeline":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def run(self) -> AnalysisResult:
        logger.info("Starting Reddit competitive analysis...")
        platform_posts = self.aggregator.collect()
        metrics = compute_all_metrics(platform_posts, self.scorer)
        insights = self.insight_generator.generate(metrics)

        all_posts = [post for posts in platform_posts.values() for post in posts]
        themes = self.theme_extractor.extract(all_posts)

        result = AnalysisResult(
            platform_posts=platform_posts,
            metrics=metrics,
            insights=insights,
            themes=themes,
            generated_at=datetime.now(timezone.utc),
            total_posts=len(all_posts),
        )
        logger.info(
            "Analysis finished: %d posts, %d insights, %d themes",
            result.total_posts,
            len(insights),
            len(themes),
        )
        return result
