"""
Public API for the competitor pulse pipeline.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from pulse.adapters.base import PostSource
from pulse.models import AnalysisResult
from pulse.pipeline import AnalysisPipeline
from pulse.report import build_report
from pulse.settings import PulseSettings, load_settings


def run_analysis(settings: Optional[PulseSettings] = None, source: Optional[PostSource] = None) -> AnalysisResult:
    """
    Run one full fetch-aggregate-score snapshot. A fresh pipeline is built per
    call so concurrent requests share no state.
    """
    resolved = settings or load_settings()
    with AnalysisPipeline.from_settings(resolved, source=source) as pipeline:
        return pipeline.run()


def analyze(settings: Optional[PulseSettings] = None, source: Optional[PostSource] = None) -> Dict[str, Any]:
    resolved = settings or load_settings()
    result = run_analysis(resolved, source=source)
    return build_report(result, preview_count=resolved.preview_posts)
