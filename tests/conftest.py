from typing import Dict, Optional

import pytest

from webaudit.audit.markup import MarkupDocument
from webaudit.audit.models import FetchResult

TITLE_55 = "Acme Studio | Web Design and Development for Small Team"
DESCRIPTION_155 = (
    "Acme Studio designs fast, accessible websites and mobile apps for growing "
    "businesses. Branding, logo design and development under one roof, since mid 2009."
)

SECURE_HEADERS = {
    "content-type": "text/html; charset=utf-8",
    "strict-transport-security": "max-age=63072000",
    "x-xss-protection": "1; mode=block",
    "x-frame-options": "DENY",
    "x-content-type-options": "nosniff",
    "access-control-allow-origin": "*",
}


def page(head: str = "", body: str = "") -> str:
    return f"<!DOCTYPE html><html><head>{head}</head><body>{body}</body></html>"


def good_page() -> str:
    """A page that earns full marks in every scored group."""
    head = (
        f"<title>{TITLE_55}</title>"
        f'<meta name="description" content="{DESCRIPTION_155}">'
        '<meta name="viewport" content="width=device-width, initial-scale=1">'
        '<meta name="robots" content="index, follow">'
        '<link rel="canonical" href="https://acme.example/">'
    )
    filler = "design website mobile app development branding logo. " + "lorem ipsum dolor sit amet. " * 50
    body = (
        "<h1>Acme Studio</h1>"
        "<h2>Services</h2><h2>Work</h2>"
        "<h3>Web</h3><h3>Apps</h3><h3>Brand</h3>"
        '<img src="a.png" alt="Team"><img src="b.png" alt="Office">'
        + "".join(f"<p>{filler}</p>" for _ in range(5))
        + "<ul><li>One</li></ul><ol><li>Two</li></ol>"
        + '<a href="/contact">Contact</a><a href="https://partner.example/">Partner</a>'
    )
    return page(head, body)


def poor_page() -> str:
    return page("<title>Home</title>", "<p>Welcome to our site.</p>")


def make_fetch(
    body: str,
    url: str = "https://acme.example/",
    headers: Optional[Dict[str, str]] = None,
    elapsed_ms: float = 120.0,
) -> FetchResult:
    return FetchResult(
        url=url,
        final_url=url,
        status_ok=True,
        status_code=200,
        body=body,
        headers=SECURE_HEADERS if headers is None else headers,
        elapsed_ms=elapsed_ms,
    )


@pytest.fixture
def good_doc() -> MarkupDocument:
    return MarkupDocument(good_page())
