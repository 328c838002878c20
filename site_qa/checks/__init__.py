"""site_qa.checks: pure verdict helpers (SEO, security headers, asset budgets)."""

from site_qa.checks.budgets import BudgetResult, budget_line, content_length, fmt_size
from site_qa.checks.headers import HeaderCheck, evaluate_headers, header_lines
from site_qa.checks.seo import seo_lines

__all__ = [
    "BudgetResult",
    "HeaderCheck",
    "budget_line",
    "content_length",
    "evaluate_headers",
    "fmt_size",
    "header_lines",
    "seo_lines",
]
