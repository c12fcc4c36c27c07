"""
Centralised settings for the competitor pulse pipeline (env-first, code-light).

``PULSE_PROFILE`` picks a preset; individual env vars override single values.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from pulse.config_loader import load_platform_queries
from pulse.models import Platform

logger = logging.getLogger(__name__)

PROFILES: Dict[str, Dict[str, object]] = {
    "standard": {
        "fetch_limit": 25,
        "post_cap": 30,
        "query_delay": 1.0,
        "queries_per_platform": None,
        "preview_posts": 3,
        "threat_threshold": 10,
        "threat_formula": "standard",
    },
    # Faster, lighter snapshot: fewer queries and a lower threat threshold.
    "quick": {
        "fetch_limit": 15,
        "post_cap": 20,
        "query_delay": 0.5,
        "queries_per_platform": 2,
        "preview_posts": 2,
        "threat_threshold": 5,
        "threat_formula": "quick",
    },
}

DEFAULT_QUERIES_PATH = Path(__file__).resolve().parent.parent / "config" / "platform_queries.yaml"


@dataclass
class PulseSettings:
    profile: str
    fetch_limit: int
    post_cap: int
    query_delay: float
    queries_per_platform: Optional[int]
    preview_posts: int
    threat_threshold: int
    threat_formula: str
    frustration_threshold: int
    engagement_threshold: float
    reddit_base_url: str
    user_agent: str
    http_timeout: float
    queries_path: Path
    platform_queries: Dict[Platform, List[str]] = field(default_factory=dict)


def _int_from_env(key: str, default: Optional[int], minimum: int = 1) -> Optional[int]:
    raw = os.getenv(key)
    if raw is None or str(raw).strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int value for %s=%s; using default %s", key, raw, default)
        return default
    if value < minimum:
        logger.warning("%s=%s is below the minimum %s; using default %s", key, raw, minimum, default)
        return default
    return value


def _float_from_env(key: str, default: float) -> float:
    raw = os.getenv(key)
    if raw is None or str(raw).strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Invalid float value for %s=%s; using default %s", key, raw, default)
        return default
    if value < 0:
        logger.warning("%s=%s must not be negative; using default %s", key, raw, default)
        return default
    return value


def _resolve_profile(raw: Optional[str]) -> str:
    name = (raw or "standard").strip().lower()
    if name not in PROFILES:
        logger.warning("Unknown PULSE_PROFILE '%s'; using 'standard'.", name)
        return "standard"
    return name


def load_settings() -> PulseSettings:
    profile = _resolve_profile(os.getenv("PULSE_PROFILE"))
    preset = PROFILES[profile]
    queries_path_env = os.getenv("PULSE_QUERIES_PATH")
    queries_path = Path(queries_path_env) if queries_path_env else DEFAULT_QUERIES_PATH
    return PulseSettings(
        profile=profile,
        fetch_limit=_int_from_env("PULSE_FETCH_LIMIT", preset["fetch_limit"]),
        post_cap=_int_from_env("PULSE_POST_CAP", preset["post_cap"]),
        query_delay=_float_from_env("PULSE_QUERY_DELAY", preset["query_delay"]),
        queries_per_platform=_int_from_env("PULSE_QUERIES_PER_PLATFORM", preset["queries_per_platform"]),
        preview_posts=_int_from_env("PULSE_PREVIEW_POSTS", preset["preview_posts"], minimum=0),
        threat_threshold=_int_from_env("PULSE_THREAT_THRESHOLD", preset["threat_threshold"], minimum=0),
        threat_formula=str(preset["threat_formula"]),
        frustration_threshold=_int_from_env("PULSE_FRUSTRATION_THRESHOLD", 5, minimum=0),
        engagement_threshold=_float_from_env("PULSE_ENGAGEMENT_THRESHOLD", 50.0),
        reddit_base_url=os.getenv("PULSE_REDDIT_BASE_URL") or "https://www.reddit.com",
        user_agent=os.getenv("PULSE_USER_AGENT") or "CompetitorAnalysis/1.0",
        http_timeout=_float_from_env("PULSE_HTTP_TIMEOUT", 15.0),
        queries_path=queries_path,
        platform_queries=load_platform_queries(queries_path),
    )
