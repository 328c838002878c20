"""
Data models for the SiteQA fetch/check layer.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from site_qa.parser.html_parser import SeoMeta


@dataclass(slots=True)
class FetchResult:
    """One HTTP answer: final status, lower-cased headers and decoded body (if read)."""

    url: str
    status: int
    headers: Dict[str, str] = field(default_factory=dict)
    text: str = ""

    @property
    def ok(self) -> bool:
        return self.status < 400


@dataclass(slots=True)
class LinkCheck:
    """Reachability verdict for one extracted link (status 0 = no response)."""

    url: str
    status: int


@dataclass(slots=True)
class PageResult:
    """Audited page: path from the audit list plus what the server answered."""

    path: str
    url: str
    status: int
    seo: Optional[SeoMeta] = None
    bad_links: List[LinkCheck] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return 0 < self.status < 400
