# File: site_qa/engine.py
"""site_qa.engine: Orchestration layer для запуска аудита и записи отчётов."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from site_qa.aggregator import AuditReport
from site_qa.auditor import SiteAuditor
from site_qa.config import AuditConfig
from site_qa.logger import logger
from site_qa.report.json_report import render_json
from site_qa.report.text_report import render_text

__all__ = ["start_audit", "write_reports"]


async def start_audit(config: AuditConfig) -> AuditReport:
    """Запускает SiteAuditor в контексте сессии и возвращает AuditReport.

    Сетевые ошибки и HTTP-статусы ≥ 400 отражаются в отчёте; исключение
    здесь означает сбой самого инструмента.
    """
    async with SiteAuditor(config) as auditor:
        return await auditor.run()


def write_reports(
    report: AuditReport,
    out: Union[str, Path],
    json_out: Optional[Union[str, Path]] = None,
) -> Path:
    """Единственная запись на диск: Markdown-отчёт (и JSON, если задан путь)."""
    saved = render_text(report.lines, out)
    logger.info("Отчёт записан: %s", saved)
    if json_out is not None:
        saved_json = render_json(report, json_out)
        logger.info("JSON-отчёт записан: %s", saved_json)
    return saved
