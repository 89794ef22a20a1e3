# webaudit/audit/models.py
from __future__ import annotations

from typing import Dict, List, Literal, Optional
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, field_validator

Priority = Literal["critical", "high", "medium", "low"]
Category = Literal["basic", "performance", "mobile", "security", "content", "links", "competitor"]
Grade = Literal["A+", "A", "B", "C", "D", "F"]


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True)


# ------------------------------
# Input / fetch
# ------------------------------
class AuditRequest(_Record):
    url: str
    timeout_ms: int = Field(default=10_000, gt=0)

    @field_validator("url")
    @classmethod
    def check_absolute_url(cls, v: str) -> str:
        v = (v or "").strip()
        parsed = urlparse(v)
        if parsed.scheme.lower() not in ("http", "https") or not parsed.netloc:
            raise ValueError("url must be absolute with an http or https scheme")
        return v


class FetchResult(_Record):
    url: str
    final_url: str = ""
    status_ok: bool
    status_code: int = 0
    body: str = ""
    headers: Dict[str, str] = {}
    elapsed_ms: float = 0.0
    error: Optional[str] = None


# ------------------------------
# Metric records (defaults are the neutral values)
# ------------------------------
class TextTag(_Record):
    text: str = ""
    length: int = 0
    is_optimal: bool = False


class HeadingCounts(_Record):
    h1: int = 0
    h2: int = 0
    h3: int = 0
    h4: int = 0


class ImageStats(_Record):
    total: int = 0
    with_alt: int = 0
    alt_percentage: float = 0.0


class BasicSEOMetrics(_Record):
    title: TextTag = TextTag()
    description: TextTag = TextTag()
    headings: HeadingCounts = HeadingCounts()
    images: ImageStats = ImageStats()
    canonical: Optional[str] = None
    robots: Optional[str] = None
    viewport: Optional[str] = None


class RenderBlocking(_Record):
    scripts: int = 0
    styles: int = 0
    links: int = 0


class PerformanceMetrics(_Record):
    load_time_ms: int = 0
    html_size_kb: float = 0.0
    render_blocking: RenderBlocking = RenderBlocking()
    score: float = 0.0


class SizeStats(_Record):
    total: int = 0
    undersized: int = 0
    percentage: float = 0.0


class MobileMetrics(_Record):
    has_viewport: bool = False
    viewport_content: Optional[str] = None
    tap_targets: SizeStats = SizeStats()
    text_elements: SizeStats = SizeStats()


class SecurityMetrics(_Record):
    is_https: bool = False
    has_hsts: bool = False
    has_xss_protection: bool = False
    has_frame_options: bool = False
    has_nosniff: bool = False
    has_cors: bool = False


class ContentMetrics(_Record):
    word_count: int = 0
    keyword_density: float = 0.0
    avg_sentence_length: int = 0
    paragraph_count: int = 0
    list_count: int = 0


class LinkDetail(_Record):
    href: str
    text: str = ""
    title: Optional[str] = None
    rel: Optional[str] = None
    is_nofollow: bool = False


class LinkMetrics(_Record):
    total: int = 0
    internal_count: int = 0
    external_count: int = 0
    # Reserved: link targets are never requested, so nothing is ever counted here.
    broken_count: int = 0
    internal_links: List[LinkDetail] = []
    external_links: List[LinkDetail] = []


class AuditMetrics(_Record):
    basic: BasicSEOMetrics = BasicSEOMetrics()
    performance: PerformanceMetrics = PerformanceMetrics()
    mobile: MobileMetrics = MobileMetrics()
    security: SecurityMetrics = SecurityMetrics()
    content: ContentMetrics = ContentMetrics()
    links: LinkMetrics = LinkMetrics()


# ------------------------------
# Outputs
# ------------------------------
class ScoreReport(_Record):
    basic: float = Field(..., ge=0, le=100)
    performance: float = Field(..., ge=0, le=100)
    mobile: float = Field(..., ge=0, le=100)
    security: float = Field(..., ge=0, le=100)
    content: float = Field(..., ge=0, le=100)
    total: int = Field(..., ge=0, le=100)
    grade: Grade


class Recommendation(_Record):
    priority: Priority
    category: Category
    title: str
    description: str
    remediation: str


class AuditResult(_Record):
    success: bool
    url: str
    error: Optional[str] = None
    metrics: Optional[AuditMetrics] = None
    scores: Optional[ScoreReport] = None
    recommendations: List[Recommendation] = []


class RankedScore(_Record):
    url: str
    score: int
    grade: Grade


class ComparisonResult(_Record):
    success: bool
    error: Optional[str] = None
    primary: AuditResult
    ranked_scores: List[RankedScore] = []
    recommendations: List[Recommendation] = []
    skipped: List[str] = []
