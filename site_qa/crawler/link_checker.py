"""
Link reachability checks: HEAD first, GET when HEAD is unsupported or fails.
"""
from __future__ import annotations

import asyncio
from typing import Iterable, List, Optional

from site_qa.crawler.fetcher import Fetcher
from site_qa.crawler.models import LinkCheck


async def check_link(fetcher: Fetcher, url: str) -> LinkCheck:
    """Return the final status of *url* (0 when nothing answered)."""
    head = await fetcher.head(url)
    status = head.status if head is not None else 0
    if not status or status >= 400:
        # 405 included: many static hosts refuse HEAD
        got = await fetcher.get(url, read_body=False)
        if got is not None:
            status = got.status
    return LinkCheck(url=url, status=status)


def is_bad(check: LinkCheck) -> bool:
    return not check.status or check.status >= 400


async def check_links(
    fetcher: Fetcher,
    urls: Iterable[str],
    concurrency: Optional[int] = None,
) -> List[LinkCheck]:
    """
    Check all *urls* concurrently and return the bad ones, sorted by URL.

    *concurrency* caps simultaneous checks; ``None`` means no cap.
    """
    semaphore = asyncio.Semaphore(concurrency) if concurrency else None

    async def _guarded(url: str) -> LinkCheck:
        if semaphore is None:
            return await check_link(fetcher, url)
        async with semaphore:
            return await check_link(fetcher, url)

    results = await asyncio.gather(*(_guarded(u) for u in urls))
    return sorted((r for r in results if is_bad(r)), key=lambda r: r.url)
