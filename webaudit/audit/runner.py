# webaudit/audit/runner.py
"""
Single-URL audit pipeline.

    fetch -> parse -> six extractors (concurrent, joined) -> scores -> recommendations

``run_audit`` does the fetch; ``audit_fetched`` runs everything after it and
is a pure function of the FetchResult, so the same fetched content always
yields the same AuditResult.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Optional

import httpx

from webaudit.audit.content import extract_content
from webaudit.audit.fetch import build_client, fetch_page
from webaudit.audit.grader import compute_scores
from webaudit.audit.links import extract_links
from webaudit.audit.markup import MarkupDocument
from webaudit.audit.mobile import extract_mobile
from webaudit.audit.models import (
    AuditMetrics,
    AuditRequest,
    AuditResult,
    BasicSEOMetrics,
    ContentMetrics,
    FetchResult,
    LinkMetrics,
    MobileMetrics,
    PerformanceMetrics,
    SecurityMetrics,
)
from webaudit.audit.performance import extract_performance
from webaudit.audit.recommendations import generate_recommendations
from webaudit.audit.rules import DEFAULT_SCORING, ScoringConfig
from webaudit.audit.security import extract_security
from webaudit.audit.seo import extract_basic_seo
from webaudit.config import get_settings

logger = logging.getLogger("AuditEngine")


def _guarded(group: str, fallback: Any, fn: Callable[..., Any], *args: Any) -> Any:
    """Run one extractor; a failure costs that group its data, not the audit."""
    try:
        return fn(*args)
    except Exception:
        logger.exception("%s extractor failed; using neutral values", group)
        return fallback


async def collect_metrics(
    url: str,
    fetched: FetchResult,
    config: ScoringConfig = DEFAULT_SCORING,
) -> AuditMetrics:
    doc = MarkupDocument(fetched.body)
    if doc.degraded:
        logger.warning("Markup for %s could not be parsed; metrics are best effort", url)

    # gather() returns in argument order, whatever order the threads finish in
    basic, performance, mobile, security, content, links = await asyncio.gather(
        asyncio.to_thread(_guarded, "basic", BasicSEOMetrics(), extract_basic_seo, doc, config),
        asyncio.to_thread(
            _guarded, "performance", PerformanceMetrics(), extract_performance, fetched.body, fetched.elapsed_ms, config
        ),
        asyncio.to_thread(_guarded, "mobile", MobileMetrics(), extract_mobile, doc, config),
        asyncio.to_thread(_guarded, "security", SecurityMetrics(), extract_security, url, fetched.headers),
        asyncio.to_thread(_guarded, "content", ContentMetrics(), extract_content, doc, config),
        asyncio.to_thread(_guarded, "links", LinkMetrics(), extract_links, doc, url),
    )
    return AuditMetrics(
        basic=basic,
        performance=performance,
        mobile=mobile,
        security=security,
        content=content,
        links=links,
    )


async def audit_fetched(
    request: AuditRequest,
    fetched: FetchResult,
    config: ScoringConfig = DEFAULT_SCORING,
) -> AuditResult:
    if not fetched.status_ok:
        return AuditResult(success=False, url=request.url, error=fetched.error or "Fetch failed")

    metrics = await collect_metrics(request.url, fetched, config)
    scores = compute_scores(metrics, config)
    result = AuditResult(
        success=True,
        url=request.url,
        metrics=metrics,
        scores=scores,
        recommendations=generate_recommendations(metrics, config),
    )
    logger.info("Audit of %s finished: %d (%s)", request.url, scores.total, scores.grade)
    return result


async def run_audit(
    request: AuditRequest,
    client: Optional[httpx.AsyncClient] = None,
    config: ScoringConfig = DEFAULT_SCORING,
) -> AuditResult:
    """
    Fetch ``request.url`` and audit it.

    Pass ``client`` to reuse a connection pool (the comparator does); otherwise
    a client is opened for this one audit.
    """
    logger.info("Audit started: %s", request.url)
    if client is None:
        async with build_client(get_settings().USER_AGENT) as own_client:
            fetched = await fetch_page(own_client, request.url, request.timeout_ms)
    else:
        fetched = await fetch_page(client, request.url, request.timeout_ms)
    return await audit_fetched(request, fetched, config)
