"""
Load per-platform search queries from YAML with optional env overrides.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, List

import yaml

from pulse.models import Platform

logger = logging.getLogger(__name__)

DEFAULT_PLATFORM_QUERIES: Dict[Platform, List[str]] = {
    Platform.MEDIUM: ["medium.com", "medium writing", "medium platform", "medium vs"],
    Platform.SUBSTACK: ["substack", "substack newsletter", "substack vs"],
    Platform.GHOST: ["ghost.org", "ghost platform", "ghost publishing"],
    Platform.LINKEDIN: ["linkedin articles", "linkedin publishing"],
    Platform.DEVTO: ["dev.to", "devto", "dev community"],
    Platform.HASHNODE: ["hashnode", "hashnode blog"],
}


def default_platform_queries() -> Dict[Platform, List[str]]:
    return {platform: list(queries) for platform, queries in DEFAULT_PLATFORM_QUERIES.items()}


def load_platform_queries(path: Path) -> Dict[Platform, List[str]]:
    if not path.exists():
        logger.warning("Platform query file not found at %s; using built-in queries", path)
        return default_platform_queries()
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    parsed = parse_platform_queries(_expand_env(data))
    if not parsed:
        logger.warning("No usable platforms in %s; using built-in queries", path)
        return default_platform_queries()
    return parsed


def parse_platform_queries(data: Dict[str, Any]) -> Dict[Platform, List[str]]:
    """
    Accepts ``{"platforms": {"Substack": ["substack", ...], ...}}`` or the bare
    mapping. Unknown platform names and blank queries are skipped.
    """
    section = data.get("platforms", data) if isinstance(data, dict) else {}
    if not isinstance(section, dict):
        return {}
    result: Dict[Platform, List[str]] = {}
    for name, queries in section.items():
        try:
            platform = Platform(str(name))
        except ValueError:
            logger.warning("Unknown platform '%s' in query config; skipping.", name)
            continue
        if isinstance(queries, str):
            queries = [queries]
        cleaned = [q.strip() for q in queries or [] if isinstance(q, str) and q.strip()]
        if not cleaned:
            logger.warning("Platform '%s' has no queries; skipping.", name)
            continue
        result[platform] = cleaned
    return result


def _expand_env(data: Any) -> Any:
    def replace(value: Any) -> Any:
        if isinstance(value, str) and value.startswith("${") and value.endswith("}"):
            env_key = value[2:-1]
            return os.getenv(env_key, "")
        if isinstance(value, dict):
            return {k: replace(v) for k, v in value.items()}
        if isinstance(value, list):
            return [replace(item) for item in value]
        return value

    return replace(data)
