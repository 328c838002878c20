"""Per-page SEO findings rendered as report lines."""
from __future__ import annotations

from typing import List, Sequence

from site_qa.parser.html_parser import SeoMeta


def _mark(flag: bool) -> str:
    return "✅" if flag else "❌"


def seo_lines(meta: SeoMeta, site_url: str, hreflangs: Sequence[str]) -> List[str]:
    """Canonical, hreflang, Open Graph and Twitter lines for one page."""
    if meta.canonical_ok(site_url):
        canonical = f"- Canonical: {meta.canonical} ✅"
    else:
        canonical = (
            f"- Canonical: {meta.canonical or 'missing'} "
            f"❌ (must be absolute, under {site_url})"
        )
    langs = " ".join(f"{lang}={_mark(meta.has_hreflang(lang))}" for lang in hreflangs)
    return [
        canonical,
        f"- hreflang: {langs}",
        (
            f"- OpenGraph: title={_mark(meta.og_title)} "
            f"description={_mark(meta.og_description)} image={_mark(meta.og_image)}"
        ),
        f"- Twitter: card={_mark(meta.twitter_card)} title={_mark(meta.twitter_title)}",
    ]
