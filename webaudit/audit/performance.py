# webaudit/audit/performance.py
"""
Performance proxies from a single fetch.

There is no browser here: load time is the fetch's elapsed time, and the
render-blocking counts are raw tag counts in the markup (async/defer and
media types are not looked at).
"""

import re

from webaudit.audit.models import PerformanceMetrics, RenderBlocking
from webaudit.audit.rules import DEFAULT_SCORING, ScoringConfig
from webaudit.audit.utils import round_half_up

_SCRIPT_RE = re.compile(r"<script\b[^>]*>", re.IGNORECASE)
_STYLE_RE = re.compile(r"<style\b[^>]*>", re.IGNORECASE)
_LINK_RE = re.compile(r"<link\b[^>]*>", re.IGNORECASE)


def load_time_score(load_time_ms: float, config: ScoringConfig = DEFAULT_SCORING) -> float:
    """100 inside the budget, then minus one point per ``ms_per_point`` over it, floored at 0."""
    if load_time_ms < config.load_budget_ms:
        return 100.0
    return max(0.0, 100.0 - (load_time_ms - config.load_budget_ms) / config.ms_per_point)


def extract_performance(html: str, elapsed_ms: float, config: ScoringConfig = DEFAULT_SCORING) -> PerformanceMetrics:
    html = html or ""
    load_time_ms = round_half_up(elapsed_ms)
    return PerformanceMetrics(
        load_time_ms=load_time_ms,
        html_size_kb=round(len(html.encode("utf-8")) / 1024, 2),
        render_blocking=RenderBlocking(
            scripts=len(_SCRIPT_RE.findall(html)),
            styles=len(_STYLE_RE.findall(html)),
            links=len(_LINK_RE.findall(html)),
        ),
        score=load_time_score(load_time_ms, config),
    )
