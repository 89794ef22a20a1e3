# webaudit/audit/competitor_report.py
"""
Competitor comparison.

Audits a primary URL and an explicit list of competitor URLs with the same
pipeline, at most ``max_concurrency`` fetches in flight, then ranks every
successful audit by total score.

- A failed primary fails the comparison (no ranking is produced).
- A failed competitor is logged, listed in ``skipped`` and left out.
- Ranking is a stable descending sort, so ties keep input order
  (primary first, then competitors as given).
"""

from __future__ import annotations

import asyncio
import logging
from typing import List, Optional, Sequence

import httpx

from webaudit.audit.fetch import build_client
from webaudit.audit.models import AuditRequest, AuditResult, ComparisonResult, RankedScore, Recommendation
from webaudit.audit.rules import DEFAULT_SCORING, ScoringConfig
from webaudit.audit.runner import run_audit
from webaudit.config import get_settings

logger = logging.getLogger(__name__)


def rank_results(results: Sequence[AuditResult]) -> List[RankedScore]:
    ranked = [
        RankedScore(url=r.url, score=r.scores.total, grade=r.scores.grade)
        for r in results
        if r.success and r.scores is not None
    ]
    return sorted(ranked, key=lambda x: x.score, reverse=True)


def competitor_recommendations(primary: AuditResult, competitors: Sequence[AuditResult]) -> List[Recommendation]:
    """One recommendation at most: study the best competitor if it beats us."""
    if not primary.success or primary.scores is None:
        return []
    scored = [c for c in competitors if c.success and c.scores is not None]
    if not scored:
        return []

    # max() keeps the first of equal scores
    best = max(scored, key=lambda c: c.scores.total)
    ours, theirs = primary.scores.total, best.scores.total
    if theirs <= ours:
        return []
    return [
        Recommendation(
            priority="medium",
            category="competitor",
            title="Learn from Competitor",
            description=f"{best.url} scores {theirs} vs your {ours}",
            remediation=f"Analyze {best.url} for best practices",
        )
    ]


async def _audit_bounded(
    url: str,
    timeout_ms: int,
    client: httpx.AsyncClient,
    semaphore: asyncio.Semaphore,
    config: ScoringConfig,
) -> AuditResult:
    async with semaphore:
        return await run_audit(AuditRequest(url=url, timeout_ms=timeout_ms), client=client, config=config)


async def compare_with_competitors(
    url: str,
    competitors: Sequence[str],
    timeout_ms: Optional[int] = None,
    max_concurrency: Optional[int] = None,
    client: Optional[httpx.AsyncClient] = None,
    config: ScoringConfig = DEFAULT_SCORING,
) -> ComparisonResult:
    settings = get_settings()
    timeout_ms = timeout_ms or settings.AUDIT_TIMEOUT_MS
    semaphore = asyncio.Semaphore(max_concurrency or settings.COMPARE_MAX_CONCURRENCY)

    # Validate everything before any request goes out
    AuditRequest(url=url, timeout_ms=timeout_ms)
    for comp in competitors:
        AuditRequest(url=comp, timeout_ms=timeout_ms)

    async def _run_all(http: httpx.AsyncClient) -> List[AuditResult]:
        urls = [url, *competitors]
        tasks = [_audit_bounded(u, timeout_ms, http, semaphore, config) for u in urls]
        outcomes = await asyncio.gather(*tasks, return_exceptions=True)
        results: List[AuditResult] = []
        for u, outcome in zip(urls, outcomes):
            if isinstance(outcome, Exception):
                # an audit that raises counts as a failed audit
                logger.error("Audit of %s raised", u, exc_info=outcome)
                outcome = AuditResult(success=False, url=u, error=str(outcome) or outcome.__class__.__name__)
            elif isinstance(outcome, BaseException):
                raise outcome
            results.append(outcome)
        return results

    if client is None:
        async with build_client(settings.USER_AGENT) as own_client:
            results = await _run_all(own_client)
    else:
        results = await _run_all(client)

    primary, rest = results[0], results[1:]
    if not primary.success:
        logger.warning("Comparison aborted, primary %s failed: %s", url, primary.error)
        return ComparisonResult(success=False, error=primary.error, primary=primary)

    skipped: List[str] = []
    for comp in rest:
        if not comp.success:
            logger.warning("Skipping competitor %s: %s", comp.url, comp.error)
            skipped.append(comp.url)

    return ComparisonResult(
        success=True,
        primary=primary,
        ranked_scores=rank_results(results),
        recommendations=competitor_recommendations(primary, rest),
        skipped=skipped,
    )
