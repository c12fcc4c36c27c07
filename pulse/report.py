"""
Response assembly helpers for the analysis endpoint.

The output is designed for API/UI consumption: camelCase keys, enum values as
plain strings and ISO-8601 timestamps.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Sequence

from pulse.models import AnalysisResult, Insight, PlatformMetrics, Post, ThemeCount

DEFAULT_PREVIEW_POSTS = 3
FAILURE_MESSAGE = "Failed to analyze Reddit data"


def _insight_to_dict(insight: Insight) -> Dict[str, Any]:
    return {
        "type": insight.type.value,
        "title": insight.title,
        "confidence": insight.confidence,
        "impact": insight.impact.value,
        "description": insight.description,
        "recommendation": insight.recommendation,
    }


def _theme_to_dict(theme: ThemeCount) -> Dict[str, Any]:
    return {"theme": theme.theme, "count": theme.count}


def _post_preview(post: Post) -> Dict[str, Any]:
    return {
        "title": post.title,
        "subreddit": post.community,
        "ups": post.upvotes,
        "comments": post.comment_count,
    }


def _competitor_to_dict(metrics: PlatformMetrics, posts: Sequence[Post], preview_count: int) -> Dict[str, Any]:
    return {
        "platform": metrics.platform.value,
        "mentions": metrics.post_count,
        "sentiment": metrics.avg_sentiment,
        "engagement": metrics.total_engagement,
        "avgEngagement": metrics.avg_engagement,
        "recentPosts": [_post_preview(post) for post in posts[:preview_count]],
    }


def build_report(result: AnalysisResult, preview_count: int = DEFAULT_PREVIEW_POSTS) -> Dict[str, Any]:
    competitors: List[Dict[str, Any]] = [
        _competitor_to_dict(metrics, result.platform_posts.get(platform, []), preview_count)
        for platform, metrics in result.metrics.items()
    ]
    return {
        "insights": [_insight_to_dict(insight) for insight in result.insights],
        "themes": [_theme_to_dict(theme) for theme in result.themes],
        "competitors": competitors,
        "totalPosts": result.total_posts,
        "timestamp": result.generated_at.isoformat(),
    }


def success_envelope(data: Dict[str, Any]) -> Dict[str, Any]:
    return {"success": True, "data": data}


def failure_envelope(message: str = FAILURE_MESSAGE) -> Dict[str, Any]:
    return {"success": False, "error": message}


def health_payload() -> Dict[str, Any]:
    return {"status": "OK", "timestamp": datetime.now(timezone.utc).isoformat()}
