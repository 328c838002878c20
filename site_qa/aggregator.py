# File: site_qa/aggregator.py
"""site_qa.aggregator: Итоговая модель результатов аудита."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List

from site_qa.checks.budgets import BudgetResult
from site_qa.checks.headers import HeaderCheck
from site_qa.crawler.models import PageResult


@dataclass(slots=True)
class AuditReport:
    """Результаты одного прогона: строки отчёта и структурированные данные."""

    base_url: str
    started_at: str
    lines: List[str] = field(default_factory=list)
    pages: List[PageResult] = field(default_factory=list)
    robots_warnings: List[str] = field(default_factory=list)
    sitemap_warnings: List[str] = field(default_factory=list)
    headers: List[HeaderCheck] = field(default_factory=list)
    budgets: List[BudgetResult] = field(default_factory=list)
    duration: float = 0.0

    @property
    def failed_pages(self) -> List[PageResult]:
        return [p for p in self.pages if not p.ok]

    @property
    def bad_link_count(self) -> int:
        return sum(len(p.bad_links) for p in self.pages)

    def summary(self) -> Dict[str, Any]:
        """Краткая сводка для логов и JSON."""
        return {
            "pages": len(self.pages),
            "failed_pages": len(self.failed_pages),
            "bad_links": self.bad_link_count,
            "robots_warnings": len(self.robots_warnings),
            "sitemap_warnings": len(self.sitemap_warnings),
            "headers_ok": all(h.ok for h in self.headers),
            "budgets_ok": all(b.ok for b in self.budgets),
        }

    def to_dict(self) -> Dict[str, Any]:
        data = {k: v for k, v in asdict(self).items() if k != "lines"}
        for page, raw in zip(self.pages, data["pages"]):
            raw["ok"] = page.ok
        for check, raw in zip(self.budgets, data["budgets"]):
            raw["ok"] = check.ok
        data["summary"] = self.summary()
        return data

    def json(self, *, pretty: bool = False) -> str:
        """Возвращает JSON-представление отчёта без текстовых строк."""
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=2 if pretty else None)
