# webaudit/audit/seo.py
from webaudit.audit.markup import MarkupDocument
from webaudit.audit.models import BasicSEOMetrics, HeadingCounts, ImageStats, TextTag
from webaudit.audit.rules import DEFAULT_SCORING, ScoringConfig
from webaudit.audit.utils import clamp, safe_ratio, safe_str


def _text_tag(text: str, optimal_range) -> TextTag:
    lo, hi = optimal_range
    return TextTag(text=text, length=len(text), is_optimal=lo <= len(text) <= hi)


def extract_basic_seo(doc: MarkupDocument, config: ScoringConfig = DEFAULT_SCORING) -> BasicSEOMetrics:
    """Title, description, heading counts, image alt coverage and head meta tags."""
    images = doc.find_all("img")
    with_alt = sum(1 for img in images if safe_str(img.get("alt")))

    return BasicSEOMetrics(
        title=_text_tag(doc.title_text(), config.basic.title_range),
        description=_text_tag(doc.meta_content("description") or "", config.basic.description_range),
        headings=HeadingCounts(
            h1=doc.count("h1"),
            h2=doc.count("h2"),
            h3=doc.count("h3"),
            h4=doc.count("h4"),
        ),
        images=ImageStats(
            total=len(images),
            with_alt=with_alt,
            alt_percentage=safe_ratio(with_alt, len(images)),
        ),
        canonical=doc.link_href("canonical"),
        robots=doc.meta_content("robots"),
        viewport=doc.meta_content("viewport"),
    )


def calculate_basic_score(basic: BasicSEOMetrics, config: ScoringConfig = DEFAULT_SCORING) -> float:
    """
    On-page SEO score (0–100).

    Title (15) + description (15) + headings (20) + image alt coverage (20)
    + canonical / robots / viewport meta (30).
    """
    pts = config.basic
    score = 0.0

    # ────────────────────────────────────────────────
    # 1. Title & description
    # ────────────────────────────────────────────────
    for tag in (basic.title, basic.description):
        if tag.is_optimal:
            score += pts.optimal_text
        elif tag.length > 0:
            score += pts.present_text

    # ────────────────────────────────────────────────
    # 2. Heading hierarchy
    # ────────────────────────────────────────────────
    if basic.headings.h1 == 1:
        score += pts.single_h1
    if basic.headings.h2 >= pts.h2_min:
        score += pts.h2
    if basic.headings.h3 >= pts.h3_min:
        score += pts.h3

    # ────────────────────────────────────────────────
    # 3. Image alt attributes (0% when there are no images)
    # ────────────────────────────────────────────────
    score += min(pts.image_cap, basic.images.alt_percentage / pts.image_divisor)

    # ────────────────────────────────────────────────
    # 4. Meta completeness
    # ────────────────────────────────────────────────
    if basic.canonical:
        score += pts.canonical
    if basic.robots:
        score += pts.robots
    if basic.viewport:
        score += pts.viewport

    return clamp(score)
