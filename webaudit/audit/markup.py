# webaudit/audit/markup.py
"""
Read-only view over a parsed HTML document.

Extractors query the document through ``MarkupDocument`` and never touch the
underlying BeautifulSoup tree directly, so one parse can be shared by all of
them. Parsing is permissive (``html.parser``): unclosed or stray tags are
tolerated and whatever structure is recoverable is kept.
"""

from __future__ import annotations

import logging
import re
from typing import Iterator, List, Optional

from bs4 import BeautifulSoup, ParserRejectedMarkup
from bs4.element import NavigableString, PreformattedString, Tag

from webaudit.audit.utils import collapse_ws, safe_str

logger = logging.getLogger(__name__)

# Elements whose text never shows up on the page
NON_TEXT_TAGS = frozenset({"script", "style", "noscript", "template"})
# Document metadata; html.parser leaves a stray <title> outside any <head>
HEAD_TAGS = frozenset({"head", "title"})

_STYLE_DECL_RE = re.compile(r"([\w-]+)\s*:\s*([^;]+)")
_PX_RE = re.compile(r"^(\d+(?:\.\d+)?)(px)?$", re.IGNORECASE)


class MarkupDocument:
    def __init__(self, html: str) -> None:
        self.degraded = False
        try:
            self._soup = BeautifulSoup(html or "", "html.parser")
        except ParserRejectedMarkup as e:
            logger.warning("Markup rejected by parser, continuing with an empty document: %s", e)
            self.degraded = True
            self._soup = BeautifulSoup("", "html.parser")

    # ------------------------------
    # Element lookup
    # ------------------------------
    def find_all(self, *names: str, **attrs) -> List[Tag]:
        return self._soup.find_all(list(names), attrs=attrs or {})

    def first(self, name: str, **attrs) -> Optional[Tag]:
        return self._soup.find(name, attrs=attrs or {})

    def count(self, *names: str) -> int:
        return len(self.find_all(*names))

    def meta_content(self, name: str) -> Optional[str]:
        """content of the first <meta name=...>, name matched case-insensitively."""
        wanted = name.lower()
        for meta in self._soup.find_all("meta"):
            if safe_str(meta.get("name")).lower() == wanted:
                return safe_str(meta.get("content")) or None
        return None

    def link_href(self, rel: str) -> Optional[str]:
        wanted = rel.lower()
        for link in self._soup.find_all("link"):
            rels = safe_str(link.get("rel")).lower().split()
            if wanted in rels:
                return safe_str(link.get("href")) or None
        return None

    # ------------------------------
    # Attributes & text
    # ------------------------------
    @staticmethod
    def attr(element: Tag, name: str) -> Optional[str]:
        value = safe_str(element.get(name))
        return value or None

    @staticmethod
    def box_metric(element: Tag, prop: str) -> Optional[float]:
        """
        Pixel size of ``prop`` (width, height, font-size) for one element.

        There is no layout engine here, so only sizes written on the element
        itself are known: inline ``style`` declarations, then the ``width`` /
        ``height`` attributes. Relative units (em, %, rem...) are unknown.
        Returns None when the size cannot be determined.
        """
        declared = None
        for name, value in _STYLE_DECL_RE.findall(safe_str(element.get("style"))):
            if name.lower() == prop:
                declared = value.strip()  # last declaration wins
        if declared is None and prop in ("width", "height"):
            declared = safe_str(element.get(prop)) or None
        if declared is None:
            return None
        declared = declared.replace("!important", "").strip()
        match = _PX_RE.match(declared)
        if not match:
            return None
        return float(match.group(1))

    def text_of(self, element: Optional[Tag]) -> str:
        if element is None:
            return ""
        return collapse_ws("".join(self._strings(element, NON_TEXT_TAGS)))

    def title_text(self) -> str:
        return self.text_of(self._soup.title)

    def body_text(self) -> str:
        if self._soup.body is not None:
            return self.text_of(self._soup.body)
        # html.parser does not synthesize <body>; use the document minus its head
        return collapse_ws("".join(self._strings(self._soup, NON_TEXT_TAGS | HEAD_TAGS)))

    @staticmethod
    def _strings(element: Tag, skip: frozenset) -> Iterator[str]:
        for node in element.descendants:
            # comments, doctypes and CDATA are strings too
            if not isinstance(node, NavigableString) or isinstance(node, PreformattedString):
                continue
            if any(p.name in skip for p in node.parents if isinstance(p, Tag)):
                continue
            yield str(node)
