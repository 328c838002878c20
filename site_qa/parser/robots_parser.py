# File: site_qa/parser/robots_parser.py
"""site_qa.parser.robots_parser: разбор robots.txt и проверка его согласованности с сайтом."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass
class RobotsDirectives:
    """Директивы robots.txt, важные для аудита (без привязки к User-Agent)."""

    sitemaps: List[str] = field(default_factory=list)
    disallowed: List[str] = field(default_factory=list)


def parse_robots(text: str) -> RobotsDirectives:
    """Разбирает текст robots.txt и собирает Sitemap/Disallow по всем группам.

    Args:
        text: содержимое robots.txt.

    Returns:
        RobotsDirectives; пустые Disallow (разрешить всё) пропускаются.
    """
    directives = RobotsDirectives()
    for key, value in _prepare_lines(text):
        if key == "sitemap" and value:
            directives.sitemaps.append(value)
        elif key == "disallow" and value:
            directives.disallowed.append(value)
    return directives


def validate_robots(text: str, sitemap_url: str, protected_path: str) -> List[str]:
    """Возвращает список предупреждений для robots.txt.

    * sitemap_url должен быть указан в одной из директив ``Sitemap:``;
    * protected_path (например ``/en/``) не должен быть закрыт ни в одной группе.
    """
    directives = parse_robots(text)
    warnings: List[str] = []
    expected = sitemap_url.lower()
    if not any(s.lower().startswith(expected) for s in directives.sitemaps):
        warnings.append(f"robots.txt: {_basename(sitemap_url)} not referenced")
    protected = protected_path.lower()
    if any(d.lower().startswith(protected) for d in directives.disallowed):
        warnings.append(f"robots.txt: {protected_path} must not be disallowed")
    return warnings


def _basename(url: str) -> str:
    return url.rstrip("/").rsplit("/", 1)[-1]


def _prepare_lines(text: str) -> List[Tuple[str, str]]:
    """Очищает текст от комментариев и разделяет на (директива, значение)."""
    lines: List[Tuple[str, str]] = []
    for raw in text.splitlines():
        line = raw.split("#", 1)[0].strip()
        if not line or ":" not in line:
            continue
        key, val = (part.strip() for part in line.split(":", 1))
        lines.append((key.lower(), val))
    return lines
