# webaudit/audit/fetch.py
"""
The one network call of an audit: a single timed GET.

Failures never raise out of ``fetch_page``; they come back as a
``FetchResult`` with ``status_ok=False`` and ``error`` set, and the pipeline
decides what a failure means for the audit.
"""

from __future__ import annotations

import asyncio
import logging
from time import perf_counter
from typing import Optional

import httpx

from webaudit.audit.models import FetchResult

logger = logging.getLogger(__name__)

ACCEPT = "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"


def build_client(user_agent: str, transport: Optional[httpx.AsyncBaseTransport] = None) -> httpx.AsyncClient:
    """Client shared by every fetch of one audit or comparison run."""
    return httpx.AsyncClient(
        follow_redirects=True,
        headers={"User-Agent": user_agent, "Accept": ACCEPT},
        transport=transport,
    )


async def fetch_page(client: httpx.AsyncClient, url: str, timeout_ms: int) -> FetchResult:
    """
    GET ``url`` and time it.

    ``timeout_ms`` is one deadline for the whole exchange: connecting, sending
    and reading the entire body. Elapsed time covers the request and the body
    read. Non-2xx final responses are failures.
    """
    seconds = timeout_ms / 1000.0
    t_start = perf_counter()
    try:
        # httpx's own timeout is per phase; wait_for caps the whole exchange
        resp = await asyncio.wait_for(client.get(url, timeout=httpx.Timeout(seconds)), timeout=seconds)
        body = resp.text
    except (httpx.TimeoutException, asyncio.TimeoutError):
        logger.warning("Fetch timed out after %dms: %s", timeout_ms, url)
        return FetchResult(url=url, status_ok=False, error=f"Timed out after {timeout_ms}ms")
    except httpx.HTTPError as e:
        logger.warning("Fetch failed for %s: %s", url, e)
        return FetchResult(url=url, status_ok=False, error=str(e) or e.__class__.__name__)
    except (httpx.InvalidURL, ValueError) as e:
        # hosts httpx cannot encode (bad IDNA labels, control characters)
        logger.warning("Cannot request %s: %s", url, e)
        return FetchResult(url=url, status_ok=False, error=f"Invalid URL: {e}")
    elapsed_ms = (perf_counter() - t_start) * 1000.0

    headers = {k.lower(): v for k, v in resp.headers.items()}
    if not resp.is_success:
        logger.warning("Fetch of %s returned HTTP %d", url, resp.status_code)
        return FetchResult(
            url=url,
            final_url=str(resp.url),
            status_ok=False,
            status_code=resp.status_code,
            headers=headers,
            elapsed_ms=elapsed_ms,
            error=f"HTTP {resp.status_code}",
        )

    return FetchResult(
        url=url,
        final_url=str(resp.url),
        status_ok=True,
        status_code=resp.status_code,
        body=body,
        headers=headers,
        elapsed_ms=elapsed_ms,
    )
