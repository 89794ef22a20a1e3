# webaudit/audit/rules.py
"""
Scoring configuration: keyword list, weights, grade thresholds and the
banding tables each sub-score is computed from.

A band table is an ordered tuple of (threshold, points) pairs evaluated
top-down; the first matching band wins and no match awards 0.
``DEFAULT_SCORING`` is what the pipeline uses unless a caller passes its own
``ScoringConfig``.
"""

from __future__ import annotations

from typing import Dict, NamedTuple, Tuple

from pydantic import BaseModel, ConfigDict, model_validator


class Band(NamedTuple):
    threshold: float
    points: float


BandTable = Tuple[Band, ...]


def award_at_least(value: float, bands: BandTable) -> float:
    """Points of the first band whose threshold ``value`` reaches."""
    for band in bands:
        if value >= band.threshold:
            return band.points
    return 0.0


def award_at_most(value: float, bands: BandTable) -> float:
    """Points of the first band whose threshold ``value`` does not exceed."""
    for band in bands:
        if value <= band.threshold:
            return band.points
    return 0.0


class BasicPoints(BaseModel):
    model_config = ConfigDict(frozen=True)

    title_range: Tuple[int, int] = (50, 60)
    description_range: Tuple[int, int] = (150, 160)
    optimal_text: float = 15
    present_text: float = 10
    single_h1: float = 10
    h2_min: int = 2
    h2: float = 5
    h3_min: int = 3
    h3: float = 5
    image_cap: float = 20
    image_divisor: float = 5
    canonical: float = 10
    robots: float = 10
    viewport: float = 10


class ScoringConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    keywords: Tuple[str, ...] = (
        "design", "website", "mobile", "app", "development", "branding", "logo",
    )

    # Percentages; must add up to 100
    weights: Dict[str, float] = {
        "basic": 25,
        "performance": 25,
        "mobile": 20,
        "security": 15,
        "content": 15,
    }

    # (lower bound, grade), inclusive, highest first
    grade_bands: Tuple[Tuple[float, str], ...] = (
        (90, "A+"),
        (80, "A"),
        (70, "B"),
        (60, "C"),
        (50, "D"),
    )
    fallback_grade: str = "F"

    basic: BasicPoints = BasicPoints()

    load_budget_ms: float = 3000
    ms_per_point: float = 50

    viewport_points: float = 40
    min_tap_target_px: float = 48
    min_font_px: float = 16
    tap_target_bands: BandTable = (Band(10, 30), Band(20, 20), Band(30, 10))
    text_size_bands: BandTable = (Band(10, 30), Band(20, 20), Band(30, 10))

    security_points: Dict[str, float] = {
        "is_https": 30,
        "has_hsts": 20,
        "has_xss_protection": 15,
        "has_frame_options": 15,
        "has_nosniff": 10,
        "has_cors": 10,
    }

    word_count_bands: BandTable = (
        Band(1000, 40), Band(500, 30), Band(300, 20), Band(100, 10),
    )
    keyword_density_bands: BandTable = (
        Band(20, 30), Band(15, 25), Band(10, 20), Band(5, 15), Band(2, 10),
    )
    min_word_count: int = 300
    min_paragraphs: int = 5
    paragraph_points: float = 15
    min_lists: int = 2
    list_points: float = 15

    @model_validator(mode="after")
    def check_weights(self) -> "ScoringConfig":
        total = sum(self.weights.values())
        if abs(total - 100) > 1e-9:
            raise ValueError(f"scoring weights must sum to 100, got {total}")
        return self

    def grade_for(self, score: float) -> str:
        for lower, grade in self.grade_bands:
            if score >= lower:
                return grade
        return self.fallback_grade


DEFAULT_SCORING = ScoringConfig()
