"""Asset weight budgets (built CSS/JS bundles)."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional


@dataclass(slots=True)
class BudgetResult:
    name: str
    url: str
    size: Optional[int]
    budget: int
    status: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.size is not None and self.size <= self.budget


def content_length(headers: Optional[Mapping[str, str]]) -> Optional[int]:
    """Parse ``content-length``; ``None`` when absent, unparseable or no response."""
    if not headers:
        return None
    raw = headers.get("content-length")
    if raw is None:
        return None
    try:
        return int(raw.strip())
    except ValueError:
        return None


def fmt_size(size: Optional[int]) -> str:
    if size is None:
        return "n/a"
    return f"{size / 1024:.1f} KB"


def budget_line(result: BudgetResult, width: int = 0) -> str:
    verdict = "✅ OK" if result.ok else f"❌ > {result.budget // 1024} KB"
    shown = fmt_size(result.size)
    if result.status is not None and result.status >= 400:
        shown += f" (HTTP {result.status})"
    return f"- {result.name.ljust(width)} : {shown} ({verdict})"
