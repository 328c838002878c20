# site_qa/crawler/fetcher.py
"""
Fetcher module: GET/HEAD requests with cache-busting and a per-request timeout.

Every failure (timeout, connection error, abort) collapses into ``None`` so
callers treat "no response" the same way as an error response.
"""
from __future__ import annotations

import asyncio
import logging
import time
from typing import Optional
from urllib.parse import parse_qsl, urlencode, urlparse, urlunparse

from aiohttp import ClientError, ClientResponse, ClientSession

from site_qa.config import AuditConfig
from site_qa.crawler.models import FetchResult
from site_qa.logger import LOGGER_NAME

HTML_ACCEPT = "text/html,application/xhtml+xml"
CACHE_BUSTER = "_qa"


def bust_cache(url: str, stamp: Optional[int] = None) -> str:
    """Add (or replace) the ``_qa=<epoch ms>`` query parameter."""
    parsed = urlparse(url)
    stamp = int(time.time() * 1000) if stamp is None else stamp
    query = [(k, v) for k, v in parse_qsl(parsed.query, keep_blank_values=True) if k != CACHE_BUSTER]
    query.append((CACHE_BUSTER, str(stamp)))
    return urlunparse(parsed._replace(query=urlencode(query)))


def _headers(resp: ClientResponse) -> dict[str, str]:
    return {name.lower(): value for name, value in resp.headers.items()}


class Fetcher:
    """Thin wrapper over a shared :class:`aiohttp.ClientSession`."""

    def __init__(self, session: ClientSession, config: AuditConfig) -> None:
        self.session = session
        self.config = config
        self.logger = logging.getLogger(LOGGER_NAME)

    async def get(self, url: str, *, read_body: bool = True) -> FetchResult | None:
        """
        GET *url* with a cache-busting parameter, following redirects.

        The body is decoded only when *read_body* is set and the status is
        below 400.  Returns ``None`` when no response was obtained.
        """
        target = bust_cache(url)
        try:
            async with self.session.get(
                target,
                allow_redirects=True,
                headers={"Accept": HTML_ACCEPT},
            ) as resp:
                text = ""
                if read_body and resp.status < 400:
                    text = await resp.text(errors="replace")
                return FetchResult(url=url, status=resp.status, headers=_headers(resp), text=text)
        except asyncio.TimeoutError:
            self.logger.warning("GET %s: timeout after %.1f s", url, self.config.timeout)
        except ClientError as exc:
            self.logger.warning("GET %s failed: %s", url, exc)
        return None

    async def head(self, url: str) -> FetchResult | None:
        """HEAD *url*, following redirects. Returns ``None`` when no response was obtained."""
        try:
            async with self.session.head(url, allow_redirects=True) as resp:
                return FetchResult(url=url, status=resp.status, headers=_headers(resp))
        except asyncio.TimeoutError:
            self.logger.debug("HEAD %s: timeout after %.1f s", url, self.config.timeout)
        except ClientError as exc:
            self.logger.debug("HEAD %s failed: %s", url, exc)
        return None
