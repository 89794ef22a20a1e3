# webaudit/audit/recommendations.py
"""
Rule-based recommendations.

Rules are checked in declaration order against the metric records and each
one that fires appends exactly one Recommendation. The output is not sorted
by priority; callers get it grouped by category in rule order.
"""

from __future__ import annotations

from typing import Callable, List, Optional

from webaudit.audit.models import AuditMetrics, Recommendation
from webaudit.audit.rules import DEFAULT_SCORING, ScoringConfig
from webaudit.audit.utils import round_half_up

Rule = Callable[[AuditMetrics, ScoringConfig], Optional[Recommendation]]


def _title_rule(m: AuditMetrics, config: ScoringConfig) -> Optional[Recommendation]:
    if m.basic.title.is_optimal:
        return None
    lo, hi = config.basic.title_range
    return Recommendation(
        priority="high",
        category="basic",
        title="Optimize Page Title",
        description=f"Title should be {lo}-{hi} characters. Current: {m.basic.title.length}",
        remediation="Update the <title> tag in your HTML",
    )


def _description_rule(m: AuditMetrics, config: ScoringConfig) -> Optional[Recommendation]:
    if m.basic.description.is_optimal:
        return None
    lo, hi = config.basic.description_range
    return Recommendation(
        priority="high",
        category="basic",
        title="Optimize Meta Description",
        description=f"Description should be {lo}-{hi} characters. Current: {m.basic.description.length}",
        remediation="Update the meta description tag",
    )


def _image_alt_rule(m: AuditMetrics, config: ScoringConfig) -> Optional[Recommendation]:
    images = m.basic.images
    # a page without images has nothing to fix
    if images.total == 0 or images.alt_percentage >= 100:
        return None
    return Recommendation(
        priority="medium",
        category="basic",
        title="Add Alt Text to Images",
        description=f"{round_half_up(100 - images.alt_percentage)}% of images missing alt text",
        remediation="Add descriptive alt attributes to all <img> tags",
    )


def _load_time_rule(m: AuditMetrics, config: ScoringConfig) -> Optional[Recommendation]:
    load_time = m.performance.load_time_ms
    if load_time <= config.load_budget_ms:
        return None
    return Recommendation(
        priority="high",
        category="performance",
        title="Improve Page Load Time",
        description=f"Page loads in {load_time}ms (should be under {config.load_budget_ms:g}ms)",
        remediation="Optimize images, enable compression, reduce render-blocking resources",
    )


def _viewport_rule(m: AuditMetrics, config: ScoringConfig) -> Optional[Recommendation]:
    if m.mobile.has_viewport:
        return None
    return Recommendation(
        priority="high",
        category="mobile",
        title="Add Viewport Meta Tag",
        description="Missing viewport tag for mobile responsiveness",
        remediation='Add <meta name="viewport" content="width=device-width, initial-scale=1">',
    )


def _https_rule(m: AuditMetrics, config: ScoringConfig) -> Optional[Recommendation]:
    if m.security.is_https:
        return None
    return Recommendation(
        priority="critical",
        category="security",
        title="Enable HTTPS",
        description="Website is not using HTTPS",
        remediation="Install an SSL certificate and redirect HTTP to HTTPS",
    )


def _word_count_rule(m: AuditMetrics, config: ScoringConfig) -> Optional[Recommendation]:
    words = m.content.word_count
    if words >= config.min_word_count:
        return None
    return Recommendation(
        priority="medium",
        category="content",
        title="Add More Content",
        description=f"Only {words} words (aim for {config.min_word_count}+)",
        remediation="Add more valuable content to the page",
    )


RULES: List[Rule] = [
    _title_rule,
    _description_rule,
    _image_alt_rule,
    _load_time_rule,
    _viewport_rule,
    _https_rule,
    _word_count_rule,
]


def generate_recommendations(metrics: AuditMetrics, config: ScoringConfig = DEFAULT_SCORING) -> List[Recommendation]:
    recommendations: List[Recommendation] = []
    for rule in RULES:
        rec = rule(metrics, config)
        if rec is not None:
            recommendations.append(rec)
    return recommendations
