"""
Link extraction utilities for SiteQA.
"""
from __future__ import annotations

from typing import List, Optional
from urllib.parse import urldefrag, urljoin, urlparse

from bs4 import BeautifulSoup
from bs4.element import Tag

_SKIPPED_PREFIXES = ("#", "mailto:", "tel:", "javascript:")


def sanitize_ref(href: Optional[str]) -> Optional[str]:
    """Drop anchors, ``mailto:``, ``tel:`` and ``javascript:`` references."""
    if not href:
        return None
    href = href.strip()
    if not href or href.lower().startswith(_SKIPPED_PREFIXES):
        return None
    return href


def extract_links(html: str, page_url: str) -> List[str]:
    """
    Extract absolute HTTP(S) URLs from every ``href``/``src`` attribute.

    Covers hyperlinks as well as assets (stylesheets, scripts, images).
    First-appearance order is kept; duplicates and fragments are removed.
    """
    if not html:
        return []

    soup = BeautifulSoup(html, "html.parser")
    seen: set[str] = set()
    links: List[str] = []
    for tag in soup.find_all(True):
        if not isinstance(tag, Tag):
            continue
        for attr in ("href", "src"):
            ref = tag.get(attr)
            if not isinstance(ref, str):
                continue
            ref = sanitize_ref(ref)
            if ref is None:
                continue
            try:
                absolute, _ = urldefrag(urljoin(page_url, ref))
            except ValueError:
                # malformed reference, e.g. an invalid IPv6 host
                continue
            if urlparse(absolute).scheme not in ("http", "https"):
                continue
            if absolute not in seen:
                seen.add(absolute)
                links.append(absolute)
    return links
