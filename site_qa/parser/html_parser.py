"""HTML parsing utilities for SiteQA.

:func:`parse_seo` reads the SEO-relevant part of a page head: the canonical
link, ``hreflang`` alternates, Open Graph and Twitter-card meta tags.

Malformed or empty markup never raises; it simply yields no findings.
"""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import List, Tuple

from bs4 import BeautifulSoup
from bs4.element import Tag

__all__: Sequence[str] = ("SeoMeta", "parse_seo")

@dataclass(slots=True)
class SeoMeta:
    """SEO metadata found in a page head."""

    canonical: str = ""
    hreflangs: List[Tuple[str, str]] = field(default_factory=list)
    og_title: bool = False
    og_description: bool = False
    og_image: bool = False
    twitter_card: bool = False
    twitter_title: bool = False

    def has_hreflang(self, lang: str) -> bool:
        """Case-insensitive lookup of an alternate language."""
        lang = lang.lower()
        return any(code.lower() == lang for code, _ in self.hreflangs)

    def canonical_ok(self, prefix: str) -> bool:
        """Canonical must be absolute and live under *prefix* (https + expected host)."""
        return bool(self.canonical) and self.canonical.startswith(prefix)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _rel_values(tag: Tag) -> List[str]:
    rel = tag.get("rel") or []
    if isinstance(rel, str):
        rel = rel.split()
    return [r.lower() for r in rel]


def _has_meta(soup: BeautifulSoup, attr: str, key: str) -> bool:
    for tag in soup.find_all("meta", attrs={attr: True}):
        if str(tag.get(attr, "")).strip().lower() != key:
            continue
        if str(tag.get("content", "")).strip():
            return True
    return False


# ---------------------------------------------------------------------------
# Public functions
# ---------------------------------------------------------------------------


def parse_seo(html: str) -> SeoMeta:
    """Extract canonical / hreflang / OG / Twitter data from *html*."""
    meta = SeoMeta()
    if not html:
        return meta

    soup = BeautifulSoup(html, "html.parser")

    for tag in soup.find_all("link", href=True):
        rel = _rel_values(tag)
        href = str(tag["href"]).strip()
        if "canonical" in rel and not meta.canonical:
            meta.canonical = href
        elif "alternate" in rel and tag.get("hreflang"):
            meta.hreflangs.append((str(tag["hreflang"]).strip(), href))

    meta.og_title = _has_meta(soup, "property", "og:title")
    meta.og_description = _has_meta(soup, "property", "og:description")
    meta.og_image = _has_meta(soup, "property", "og:image")
    meta.twitter_card = _has_meta(soup, "name", "twitter:card")
    meta.twitter_title = _has_meta(soup, "name", "twitter:title")
    return meta
