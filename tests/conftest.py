# File: tests/conftest.py
from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable
from typing import Dict, Iterable, Union

import pytest
import pytest_asyncio
from aiohttp import web

from site_qa.config import AuditConfig
from site_qa.logger import configure

SiteBuilder = Callable[[str], web.Application]

SECURITY_HEADERS: Dict[str, str] = {
    "Content-Security-Policy": "default-src 'self'",
    "Strict-Transport-Security": "max-age=63072000",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Permissions-Policy": "camera=()",
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
}

#: page template, ``{site}`` is replaced with the served base URL
PAGE_HTML = """<!doctype html>
<html lang="fr"><head>
<title>Voix off</title>
<link rel="canonical" href="{site}">
<link rel="alternate" hreflang="fr" href="{site}">
<link rel="alternate" hreflang="en" href="{site}en/">
<link rel="alternate" hreflang="x-default" href="{site}">
<meta property="og:title" content="Voix off IA">
<meta property="og:description" content="Sous-titres et voix off">
<meta property="og:image" content="{site}assets/logo.png">
<meta name="twitter:card" content="summary_large_image">
<meta name="twitter:title" content="Voix off IA">
<link rel="stylesheet" href="/assets/styles.min.css">
<script src="/assets/main.min.js" defer></script>
</head><body>
<a href="/ok">ok</a>
<a href="#top">top</a>
<a href="mailto:hello@example.com">mail</a>
<a href="tel:+33100000000">call</a>
<a href="javascript:void(0)">js</a>
<img src="/assets/logo.png" alt="logo">
</body></html>
"""

ROBOTS_OK = "User-agent: *\nAllow: /\n\nSitemap: {site}sitemap.xml\n"

SITEMAP_OK = """<?xml version="1.0" encoding="UTF-8"?>
<sitemapindex xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">
  <sitemap><loc>{site}sitemap-fr.xml</loc></sitemap>
  <sitemap><loc>{site}sitemap-en.xml</loc></sitemap>
</sitemapindex>
"""


@pytest.fixture(autouse=True)
def _rebind_logging():
    """Rebind the project logger to the current (captured) stdout for each test."""
    configure(level="DEBUG")


def _make_config(base_url: str, **overrides) -> AuditConfig:
    data = {
        "base_url": base_url,
        "site_url": base_url,
        "pages": ["/", "/en/"],
        "timeout": 2.0,
        "user_agent": "TestAgent/1.0",
    }
    data.update(overrides)
    return AuditConfig(**data)


def _site_app(
    site: str,
    *,
    page_html: str = PAGE_HTML,
    robots: str | None = ROBOTS_OK,
    sitemap: str | None = SITEMAP_OK,
    css_size: int = 100_000,
    js_size: int = 50_000,
    headers: Dict[str, str] | None = None,
    head_refused: Iterable[str] = (),
) -> web.Application:
    """Small static site: two pages, robots.txt, sitemap index and assets."""
    app = web.Application()
    page_headers = dict(SECURITY_HEADERS if headers is None else headers)
    html = page_html.replace("{site}", site)

    async def page(_):
        return web.Response(text=html, content_type="text/html", headers=page_headers)

    async def plain(_):
        return web.Response(text="ok", content_type="text/html")

    def static(body: bytes, ctype: str):
        async def handler(_):
            return web.Response(body=body, content_type=ctype)
        return handler

    app.router.add_get("/", page)
    app.router.add_get("/en/", page)
    app.router.add_get("/ok", plain)
    app.router.add_get("/assets/logo.png", static(b"\x89PNG", "image/png"))
    app.router.add_get("/assets/styles.min.css", static(b"a" * css_size, "text/css"))
    app.router.add_get("/assets/main.min.js", static(b"b" * js_size, "application/javascript"))
    for path in head_refused:
        # GET only: HEAD answers 405
        app.router.add_get(path, plain, allow_head=False)
    if robots is not None:
        app.router.add_get("/robots.txt", static(robots.replace("{site}", site).encode(), "text/plain"))
    if sitemap is not None:
        app.router.add_get(
            "/sitemap.xml", static(sitemap.replace("{site}", site).encode(), "application/xml")
        )
    return app


@pytest_asyncio.fixture
async def serve(
    unused_tcp_port_factory,
) -> AsyncIterator[Callable[[Union[web.Application, SiteBuilder]], Awaitable[str]]]:
    """Start an app (or a ``base_url -> app`` builder) on a free port; returns its base URL."""
    runners: list[web.AppRunner] = []

    async def _serve(app: Union[web.Application, SiteBuilder]) -> str:
        port = unused_tcp_port_factory()
        base = f"http://127.0.0.1:{port}/"
        if not isinstance(app, web.Application):
            app = app(base)
        runner = web.AppRunner(app)
        await runner.setup()
        site = web.TCPSite(runner, "127.0.0.1", port)
        await site.start()
        runners.append(runner)
        return base

    try:
        yield _serve
    finally:
        for runner in runners:
            await runner.cleanup()


@pytest.fixture()
def make_config() -> Callable[..., AuditConfig]:
    """Factory for an AuditConfig pointed at a test server (two pages, 2 s timeout)."""
    return _make_config


@pytest.fixture()
def build_site() -> Callable[..., SiteBuilder]:
    """``build_site(**options)`` returns a builder usable with :func:`serve`."""

    def _builder(**options) -> SiteBuilder:
        return lambda base: _site_app(base, **options)

    return _builder
