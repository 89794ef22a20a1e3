# webaudit/audit/security.py
from typing import Mapping
from urllib.parse import urlparse

from webaudit.audit.models import SecurityMetrics
from webaudit.audit.rules import DEFAULT_SCORING, ScoringConfig


def extract_security(url: str, headers: Mapping[str, str]) -> SecurityMetrics:
    """Scheme and response-header checks. ``headers`` keys must be lowercase."""
    return SecurityMetrics(
        is_https=urlparse(url).scheme.lower() == "https",
        has_hsts=bool(headers.get("strict-transport-security")),
        has_xss_protection=bool(headers.get("x-xss-protection")),
        has_frame_options=bool(headers.get("x-frame-options")),
        has_nosniff=(headers.get("x-content-type-options") or "").strip().lower() == "nosniff",
        has_cors=bool(headers.get("access-control-allow-origin")),
    )


def calculate_security_score(security: SecurityMetrics, config: ScoringConfig = DEFAULT_SCORING) -> float:
    return float(sum(pts for flag, pts in config.security_points.items() if getattr(security, flag)))
