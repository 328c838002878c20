# site_qa/report/json_report.py

"""
Генерация JSON-отчёта для проекта SiteQA.

Сериализация объекта AuditReport в файл.
"""
from pathlib import Path

from site_qa.aggregator import AuditReport
from site_qa.report.text_report import atomic_write


def render_json(report: AuditReport, output_path: Path | str) -> Path:
    """
    Сохраняет отчёт report в формате JSON по указанному пути.

    :param report: объект AuditReport с результатами аудита
    :param output_path: путь к JSON-файлу
    :return: Path сохранённого файла

    Пример:
    ```python
    from site_qa.report.json_report import render_json
    report_path = render_json(report, 'tools/report.json')
    print(f"JSON report saved to: {report_path}")
    ```
    """
    return atomic_write(output_path, report.json(pretty=True) + "\n")
