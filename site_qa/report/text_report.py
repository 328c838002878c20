# File: site_qa/report/text_report.py
"""site_qa.report.text_report: накопление строк отчёта и атомарная запись файла."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Iterable, List, Union

OK_MESSAGE = "No issues detected. ✅"


class ReportBuilder:
    """Упорядоченный буфер строк; в файл пишется один раз, в конце прогона."""

    def __init__(self) -> None:
        self._lines: List[str] = []

    @property
    def lines(self) -> List[str]:
        return list(self._lines)

    def title(self, text: str) -> None:
        self._lines.append(f"\n# {text}")

    def heading(self, text: str) -> None:
        self._lines.append(f"\n## {text}")

    def add(self, *lines: str) -> None:
        self._lines.extend(lines)

    def extend(self, lines: Iterable[str]) -> None:
        self._lines.extend(lines)

    def bullets(self, items: Iterable[str], empty: str = OK_MESSAGE) -> None:
        """Маркированный список; пустой список даёт строку *empty*."""
        items = list(items)
        if not items:
            self._lines.append(f"- {empty}")
        else:
            self._lines.extend(f"- {item}" for item in items)


def atomic_write(path: Union[str, Path], content: str) -> Path:
    """Пишет *content* во временный файл рядом с *path* и подменяет его через os.replace."""
    output = Path(path)
    output.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{output.name}.", suffix=".tmp", dir=output.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(content)
        os.replace(tmp_name, output)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    return output


def render_text(lines: List[str], output_path: Union[str, Path]) -> Path:
    """
    Сохраняет строки отчёта (Markdown) по указанному пути.

    Пример:
    ```python
    from site_qa.report.text_report import render_text
    report_path = render_text(report.lines, 'tools/report.md')
    ```
    """
    return atomic_write(output_path, "\n".join(lines) + "\n")
