# File: site_qa/report/__init__.py
"""site_qa.report: запись отчётов (Markdown и JSON), используемая CLI и тестами."""

from __future__ import annotations

from site_qa.report.json_report import render_json
from site_qa.report.text_report import ReportBuilder, atomic_write, render_text

__all__ = ["ReportBuilder", "atomic_write", "render_json", "render_text"]
