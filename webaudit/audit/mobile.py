# webaudit/audit/mobile.py
"""
Mobile-friendliness: viewport meta, tap-target and text sizing.

Sizes come from ``MarkupDocument.box_metric``, which only knows what is
written on the element (inline style, width/height attributes). Elements
sized by stylesheets have no known size and are counted as adequately sized,
so pages styled entirely from CSS files score as if every target passed.
"""

from typing import Iterable, Optional

from bs4.element import Tag

from webaudit.audit.markup import MarkupDocument
from webaudit.audit.models import MobileMetrics, SizeStats
from webaudit.audit.rules import DEFAULT_SCORING, ScoringConfig, award_at_most
from webaudit.audit.utils import safe_ratio, safe_str

TEXT_TAGS = ("p", "span", "div", "li", "td", "th")
TAP_INPUT_TYPES = ("submit", "button")


def _below(value: Optional[float], minimum: float) -> bool:
    return value is not None and value < minimum


def _tap_targets(doc: MarkupDocument) -> Iterable[Tag]:
    for el in doc.find_all("button", "a", "input"):
        if el.name == "input" and safe_str(el.get("type")).lower() not in TAP_INPUT_TYPES:
            continue
        yield el


def _stats(total: int, undersized: int) -> SizeStats:
    return SizeStats(total=total, undersized=undersized, percentage=safe_ratio(undersized, total))


def extract_mobile(doc: MarkupDocument, config: ScoringConfig = DEFAULT_SCORING) -> MobileMetrics:
    viewport = doc.meta_content("viewport")

    targets = list(_tap_targets(doc))
    small_targets = sum(
        1
        for el in targets
        if _below(doc.box_metric(el, "width"), config.min_tap_target_px)
        or _below(doc.box_metric(el, "height"), config.min_tap_target_px)
    )

    texts = doc.find_all(*TEXT_TAGS)
    small_texts = sum(1 for el in texts if _below(doc.box_metric(el, "font-size"), config.min_font_px))

    return MobileMetrics(
        has_viewport=viewport is not None,
        viewport_content=viewport,
        tap_targets=_stats(len(targets), small_targets),
        text_elements=_stats(len(texts), small_texts),
    )


def calculate_mobile_score(mobile: MobileMetrics, config: ScoringConfig = DEFAULT_SCORING) -> float:
    score = config.viewport_points if mobile.has_viewport else 0.0
    score += award_at_most(mobile.tap_targets.percentage, config.tap_target_bands)
    score += award_at_most(mobile.text_elements.percentage, config.text_size_bands)
    return score
