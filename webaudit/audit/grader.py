# webaudit/audit/grader.py
"""
Composite scoring.

Each metric group is reduced to a 0–100 sub-score, then blended with the
configured weights (basic 25, performance 25, mobile 20, security 15,
content 15 by default) into a rounded total and a letter grade.
Links carry no sub-score.
"""

from __future__ import annotations

from typing import Dict

from webaudit.audit.content import calculate_content_score
from webaudit.audit.mobile import calculate_mobile_score
from webaudit.audit.models import AuditMetrics, ScoreReport
from webaudit.audit.rules import DEFAULT_SCORING, ScoringConfig
from webaudit.audit.security import calculate_security_score
from webaudit.audit.seo import calculate_basic_score
from webaudit.audit.utils import clamp, round_half_up


def sub_scores(metrics: AuditMetrics, config: ScoringConfig = DEFAULT_SCORING) -> Dict[str, float]:
    return {
        "basic": calculate_basic_score(metrics.basic, config),
        "performance": clamp(metrics.performance.score),
        "mobile": calculate_mobile_score(metrics.mobile, config),
        "security": calculate_security_score(metrics.security, config),
        "content": calculate_content_score(metrics.content, config),
    }


def weighted_total(scores: Dict[str, float], config: ScoringConfig = DEFAULT_SCORING) -> int:
    total = sum(scores[key] * weight / 100 for key, weight in config.weights.items())
    return int(clamp(round_half_up(total)))


def compute_grade(score: float, config: ScoringConfig = DEFAULT_SCORING) -> str:
    return config.grade_for(score)


def compute_scores(metrics: AuditMetrics, config: ScoringConfig = DEFAULT_SCORING) -> ScoreReport:
    scores = sub_scores(metrics, config)
    total = weighted_total(scores, config)
    return ScoreReport(**scores, total=total, grade=compute_grade(total, config))
