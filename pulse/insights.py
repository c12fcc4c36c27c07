"""
Rule engine turning per-platform metrics into threat/opportunity/trend insights.

Rules are evaluated in a fixed order and every rule that fires contributes;
the output keeps that order rather than sorting by confidence or impact.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Dict, List, Mapping, Optional

from pulse.models import HOME_PLATFORM, Impact, Insight, InsightType, Platform, PlatformMetrics

FRUSTRATION_SENTIMENT = 0.4
TREND_CONFIDENCE = 75


def standard_threat_confidence(post_count: int) -> int:
    return min(95, 70 + post_count)


def quick_threat_confidence(post_count: int) -> int:
    return min(90, 60 + post_count * 2)


THREAT_FORMULAS: Dict[str, Callable[[int], int]] = {
    "standard": standard_threat_confidence,
    "quick": quick_threat_confidence,
}


@dataclass(frozen=True)
class InsightRules:
    threat_threshold: int = 10
    frustration_threshold: int = 5
    engagement_threshold: float = 50
    threat_formula: str = "standard"
    home_platform: Platform = HOME_PLATFORM

    def threat_confidence(self, post_count: int) -> int:
        return THREAT_FORMULAS[self.threat_formula](post_count)


def _clamp_confidence(value: float) -> int:
    return int(max(0, min(100, value)))


class InsightGenerator:
    def __init__(self, rules: Optional[InsightRules] = None) -> None:
        self.rules = rules or InsightRules()
        if self.rules.threat_formula not in THREAT_FORMULAS:
            raise ValueError(f"Unknown threat formula '{self.rules.threat_formula}'")

    def generate(self, metrics: Mapping[Platform, PlatformMetrics]) -> List[Insight]:
        competitors = [m for platform, m in metrics.items() if platform != self.rules.home_platform]
        insights: List[Insight] = []

        threat = self._dominant_mentions(competitors, metrics)
        if threat:
            insights.append(threat)
        insights.extend(self._low_sentiment(competitors))
        trend = self._high_engagement(competitors)
        if trend:
            insights.append(trend)
        return insights

    def _dominant_mentions(
        self, competitors: List[PlatformMetrics], metrics: Mapping[Platform, PlatformMetrics]
    ) -> Optional[Insight]:
        if not competitors:
            return None
        # max() keeps the earliest platform on ties.
        top = max(competitors, key=lambda m: m.post_count)
        if top.post_count <= self.rules.threat_threshold:
            return None

        home = self.rules.home_platform
        home_metrics = metrics.get(home)
        home_count = home_metrics.post_count if home_metrics else 0
        name = top.platform.value
        return Insight(
            type=InsightType.THREAT,
            title=f"{name} dominating Reddit discussions",
            confidence=self.rules.threat_confidence(top.post_count),
            impact=Impact.HIGH,
            description=f"{name} has {top.post_count} Reddit mentions vs {home_count} for {home.value}",
            recommendation=f"Investigate what's driving {name} buzz and consider counter-messaging",
        )

    def _low_sentiment(self, competitors: List[PlatformMetrics]) -> List[Insight]:
        found: List[Insight] = []
        home = self.rules.home_platform.value
        for metric in competitors:
            if metric.post_count <= self.rules.frustration_threshold:
                continue
            if metric.avg_sentiment >= FRUSTRATION_SENTIMENT:
                continue
            name = metric.platform.value
            found.append(
                Insight(
                    type=InsightType.OPPORTUNITY,
                    title=f"{name} users expressing frustration",
                    confidence=_clamp_confidence(math.floor(60 + (0.5 - metric.avg_sentiment) * 80)),
                    impact=Impact.MEDIUM,
                    description=(
                        f"Low sentiment ({metric.avg_sentiment * 100:.1f}%) in {metric.post_count} "
                        f"Reddit discussions about {name}"
                    ),
                    recommendation=f"Target dissatisfied {name} users with {home}'s advantages",
                )
            )
        return found

    def _high_engagement(self, competitors: List[PlatformMetrics]) -> Optional[Insight]:
        # First match in platform order, not the maximum.
        for metric in competitors:
            if metric.avg_engagement > self.rules.engagement_threshold:
                name = metric.platform.value
                return Insight(
                    type=InsightType.TREND,
                    title=f"{name} generating high engagement",
                    confidence=TREND_CONFIDENCE,
                    impact=Impact.MEDIUM,
                    description=f"{name} posts averaging {metric.avg_engagement:.1f} upvotes/comments",
                    recommendation=f"Study {name}'s content strategy and community engagement tactics",
                )
        return None


def generate_insights(
    metrics: Mapping[Platform, PlatformMetrics], rules: Optional[InsightRules] = None
) -> List[Insight]:
    return InsightGenerator(rules).generate(metrics)
