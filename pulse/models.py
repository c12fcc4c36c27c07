"""
Core data structures shared by the competitor pulse pipeline.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional


class Platform(str, Enum):
    MEDIUM = "Medium"
    SUBSTACK = "Substack"
    GHOST = "Ghost"
    LINKEDIN = "LinkedIn"
    DEVTO = "dev.to"
    HASHNODE = "Hashnode"


# Brand every other platform is benchmarked against.
HOME_PLATFORM = Platform.MEDIUM


class SentimentLabel(str, Enum):
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


class InsightType(str, Enum):
    THREAT = "threat"
    OPPORTUNITY = "opportunity"
    TREND = "trend"


class Impact(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class Post:
    """
    Normalized representation of a forum post returned by a search query.

    Two posts with the same ``id`` are the same post regardless of the other fields.
    """

    id: str
    title: str
    body: str
    community: str
    upvotes: int = 0
    comment_count: int = 0
    created_at: Optional[datetime] = None
    url: Optional[str] = None
    author: Optional[str] = None

    @property
    def text(self) -> str:
        return f"{self.title} {self.body}"

    @property
    def engagement(self) -> int:
        return self.upvotes + self.comment_count


@dataclass(frozen=True)
class SentimentResult:
    label: SentimentLabel
    score: float


@dataclass
class PlatformMetrics:
    platform: Platform
    post_count: int
    avg_sentiment: float
    total_engagement: int
    avg_engagement: float


@dataclass
class Insight:
    type: InsightType
    title: str
    confidence: int
    impact: Impact
    description: str
    recommendation: str


@dataclass(frozen=True)
class ThemeCount:
    theme: str
    count: int


@dataclass
class AnalysisResult:
    platform_posts: Dict[Platform, List[Post]]
    metrics: Dict[Platform, PlatformMetrics]
    insights: List[Insight]
    themes: List[ThemeCount]
    generated_at: datetime
    total_posts: int = field(default=0)
