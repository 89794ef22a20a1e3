# webaudit/audit/links.py
"""
Link profile of one page: internal vs external anchors with their details.

Targets are never requested, so ``broken_count`` stays 0. Checking liveness
would cost one extra round trip per link on every audit.
"""

from typing import List
from urllib.parse import urlparse

from webaudit.audit.markup import MarkupDocument
from webaudit.audit.models import LinkDetail, LinkMetrics
from webaudit.audit.utils import safe_str


def _host_of(url: str) -> str:
    return (urlparse(url).hostname or "").lower()


def is_internal(href: str, host: str) -> bool:
    """Root-relative paths and any href mentioning the audited host."""
    if href.startswith("/") and not href.startswith("//"):
        return True
    return bool(host) and host in href.lower()


def extract_links(doc: MarkupDocument, base_url: str) -> LinkMetrics:
    host = _host_of(base_url)
    anchors = doc.find_all("a")

    internal: List[LinkDetail] = []
    external: List[LinkDetail] = []
    for a in anchors:
        href = safe_str(a.get("href"))
        if not href:
            continue

        rel = doc.attr(a, "rel")
        detail = LinkDetail(
            href=href,
            text=doc.text_of(a),
            title=doc.attr(a, "title"),
            rel=rel,
            is_nofollow="nofollow" in (rel or "").lower().split(),
        )
        (internal if is_internal(href, host) else external).append(detail)

    return LinkMetrics(
        total=len(anchors),
        internal_count=len(internal),
        external_count=len(external),
        internal_links=internal,
        external_links=external,
    )

