
"""WebAudit Audit Package

Modules:
- runner: fetch + six-extractor pipeline for a single URL.
- competitor_report: runs the pipeline over a primary URL and competitors and ranks them.
- seo, performance, mobile, security, content, links: the metric extractors.
- grader: sub-scores, weighted total and letter grade.
- recommendations: rule-based findings.
- markup, fetch: parsed-document view and the single HTTP GET.
- rules: scoring tables and weights.

Imported by webaudit.api.router via: from webaudit.audit import run_audit, compare_with_competitors
"""
from webaudit.audit.competitor_report import compare_with_competitors
from webaudit.audit.models import AuditRequest, AuditResult, ComparisonResult
from webaudit.audit.runner import audit_fetched, run_audit

__all__ = [
    'AuditRequest',
    'AuditResult',
    'ComparisonResult',
    'audit_fetched',
    'compare_with_competitors',
    'run_audit',
]
