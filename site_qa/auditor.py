# === FILE: site_qa/auditor.py ===
from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from typing import List, Optional
from urllib.parse import urljoin

from aiohttp import ClientSession, ClientTimeout

from site_qa.aggregator import AuditReport
from site_qa.checks import (
    BudgetResult,
    HeaderCheck,
    budget_line,
    content_length,
    evaluate_headers,
    header_lines,
    seo_lines,
)
from site_qa.config import AuditConfig
from site_qa.crawler.fetcher import Fetcher
from site_qa.crawler.link_checker import check_links
from site_qa.crawler.link_extractor import extract_links
from site_qa.crawler.models import FetchResult, PageResult
from site_qa.logger import LOGGER_NAME
from site_qa.parser.html_parser import parse_seo
from site_qa.parser.robots_parser import validate_robots
from site_qa.parser.sitemap_parser import validate_sitemap_index
from site_qa.report.text_report import ReportBuilder

__all__ = ("SiteAuditor", "page_url", "status_label")


def page_url(base_url: str, path: str) -> str:
    """Join *path* to *base_url* relative to it (a leading ``/`` does not reset the base path)."""
    return urljoin(base_url, path[1:] if path.startswith("/") else path)


def status_label(result: Optional[FetchResult]) -> str:
    return "ERR" if result is None else str(result.status)


class SiteAuditor:
    """Однопроходный аудит сайта: страницы, robots/sitemap, заголовки, бюджеты."""

    def __init__(self, config: AuditConfig) -> None:
        self.config = config
        self.session: Optional[ClientSession] = None
        self.fetcher: Optional[Fetcher] = None
        self.logger = logging.getLogger(LOGGER_NAME)

    async def __aenter__(self) -> SiteAuditor:
        timeout = ClientTimeout(total=self.config.timeout)
        self.session = ClientSession(
            timeout=timeout,
            headers={"User-Agent": self.config.user_agent},
            raise_for_status=False,
        )
        self.fetcher = Fetcher(self.session, self.config)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()

    def _require_fetcher(self) -> Fetcher:
        if self.fetcher is None:
            raise RuntimeError("Session not initialized")
        return self.fetcher

    async def run(self) -> AuditReport:
        """Выполняет все проверки по порядку и возвращает накопленный отчёт."""
        start = time.monotonic()
        base = self.config.base_url
        report = AuditReport(
            base_url=base,
            started_at=datetime.now(timezone.utc).isoformat(timespec="seconds"),
        )
        out = ReportBuilder()
        out.title(f"QA report — {report.started_at}")
        out.title(f"Base: {base}")
        self.logger.info("Старт аудита: %s (%d страниц)", base, len(self.config.pages))

        for path in self.config.pages:
            report.pages.append(await self.audit_page(path, out))

        report.robots_warnings = await self.check_robots(out)
        report.sitemap_warnings = await self.check_sitemaps(out)
        report.headers = await self.check_security_headers(out)
        report.budgets = await self.check_budgets(out)

        out.heading("Page HTTP summary")
        for page in report.pages:
            out.add(f"- {page.path} → {page.status} {'✅' if page.ok else '❌'}")

        report.lines = out.lines
        report.duration = time.monotonic() - start
        self.logger.info(
            "Аудит завершён за %.1f с: %d/%d страниц в ошибке, %d битых ссылок",
            report.duration, len(report.failed_pages), len(report.pages), report.bad_link_count,
        )
        return report

    async def audit_page(self, path: str, out: ReportBuilder) -> PageResult:
        """GET страницы, SEO-метаданные и проверка всех ссылок на ней."""
        fetcher = self._require_fetcher()
        url = page_url(self.config.base_url, path)
        res = await fetcher.get(url)
        page = PageResult(path=path, url=url, status=res.status if res else 0)
        html = res.text if res is not None and res.ok else ""

        out.heading(f"Page: {path} — HTTP {status_label(res)}")
        if not html:
            self.logger.warning("Страница %s недоступна (HTTP %s)", path, status_label(res))
            out.add("- Unable to load HTML. ❌")
        else:
            page.seo = parse_seo(html)
            out.extend(seo_lines(page.seo, self.config.site_url, self.config.hreflangs))

        links = extract_links(html, url)
        self.logger.debug("%s: %d ссылок к проверке", path, len(links))
        page.bad_links = await check_links(fetcher, links, self.config.link_concurrency)
        out.add("\n**Links (4xx/5xx)**")
        if not page.bad_links:
            out.add("- No broken links. ✅")
        else:
            out.extend(f"- {b.url} → {b.status}" for b in page.bad_links)
        return page

    async def check_robots(self, out: ReportBuilder) -> List[str]:
        fetcher = self._require_fetcher()
        out.heading("robots.txt")
        res = await fetcher.get(page_url(self.config.base_url, "robots.txt"))
        if res is None or not res.ok:
            warnings = [f"robots.txt HTTP {status_label(res)}"]
        else:
            sitemap_url = urljoin(self.config.site_url, self.config.sitemap_index)
            warnings = validate_robots(res.text, sitemap_url, self.config.secondary_path)
        out.bullets(warnings)
        return warnings

    async def check_sitemaps(self, out: ReportBuilder) -> List[str]:
        fetcher = self._require_fetcher()
        out.heading("Sitemaps")
        res = await fetcher.get(page_url(self.config.base_url, self.config.sitemap_index))
        if res is None or not res.ok:
            warnings = [f"{self.config.sitemap_index} HTTP {status_label(res)}"]
        else:
            expected = [urljoin(self.config.site_url, name) for name in self.config.language_sitemaps]
            warnings = validate_sitemap_index(res.text, expected)
        out.bullets(warnings)
        return warnings

    async def check_security_headers(self, out: ReportBuilder) -> List[HeaderCheck]:
        fetcher = self._require_fetcher()
        out.heading("Security headers (HEAD)")
        checks: List[HeaderCheck] = []
        for path in self.config.header_paths:
            res = await fetcher.head(page_url(self.config.base_url, path))
            check = evaluate_headers(path, res.headers if res else None, self.config.required_headers)
            checks.append(check)
            out.extend(header_lines(check))
        return checks

    async def check_budgets(self, out: ReportBuilder) -> List[BudgetResult]:
        fetcher = self._require_fetcher()
        out.heading("Asset budgets")
        results: List[BudgetResult] = []
        for asset, budget in self.config.budgets.items():
            url = page_url(self.config.base_url, asset)
            res = await fetcher.head(url)
            name = asset.rsplit("/", 1)[-1]
            # an error page carries its own content-length
            size = content_length(res.headers) if res is not None and res.ok else None
            if size is None:
                self.logger.warning("%s: размер недоступен (HTTP %s)", url, status_label(res))
            status = res.status if res is not None else None
            results.append(BudgetResult(name=name, url=url, size=size, budget=budget, status=status))
        width = max((len(r.name) for r in results), default=0)
        out.extend(budget_line(r, width) for r in results)
        return results
