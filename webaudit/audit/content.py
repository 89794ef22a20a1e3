# webaudit/audit/content.py
import re

from webaudit.audit.markup import MarkupDocument
from webaudit.audit.models import ContentMetrics
from webaudit.audit.rules import DEFAULT_SCORING, ScoringConfig, award_at_least
from webaudit.audit.utils import clamp, round_half_up, safe_ratio

_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")


def extract_content(doc: MarkupDocument, config: ScoringConfig = DEFAULT_SCORING) -> ContentMetrics:
    text = doc.body_text()
    lowered = text.lower()

    found = sum(1 for kw in config.keywords if kw.lower() in lowered)
    sentences = [s for s in _SENTENCE_SPLIT_RE.split(text) if s.strip()]
    avg_sentence = len(text) / len(sentences) if sentences else 0.0

    return ContentMetrics(
        word_count=len(text.split()),
        keyword_density=safe_ratio(found, len(config.keywords)),
        avg_sentence_length=round_half_up(avg_sentence),
        paragraph_count=doc.count("p"),
        list_count=doc.count("ul", "ol"),
    )


def calculate_content_score(content: ContentMetrics, config: ScoringConfig = DEFAULT_SCORING) -> float:
    score = award_at_least(content.word_count, config.word_count_bands)
    score += award_at_least(content.keyword_density, config.keyword_density_bands)
    if content.paragraph_count >= config.min_paragraphs:
        score += config.paragraph_points
    if content.list_count >= config.min_lists:
        score += config.list_points
    return clamp(score)
