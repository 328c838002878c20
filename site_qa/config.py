"""
Модуль для загрузки и валидации конфигурации аудита SiteQA.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
from urllib.parse import urlparse

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)

PRODUCTION_URL = "https://www.voiceover-captions-ai.com/"

DEFAULT_PAGES: List[str] = [
    "/", "/en/",
    "/blog.html", "/en/blog.html",
    "/blog-elevenlabs.html", "/en/blog-elevenlabs.html",
    "/mentions-legales", "/politique-de-confidentialite",
    "/legal-notice", "/privacy-policy",
    "/404.html",
]

SECURITY_HEADERS: List[str] = [
    "content-security-policy",
    "strict-transport-security",
    "referrer-policy",
    "permissions-policy",
    "x-content-type-options",
    "x-frame-options",
]


class AuditConfig(BaseModel):
    """Конфигурация для одного прогона QA-аудита."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    base_url: str = Field(PRODUCTION_URL, description="Корневой URL проверяемого деплоя.")
    site_url: str = Field(
        PRODUCTION_URL,
        description="Ожидаемый абсолютный https-префикс для canonical и sitemap.",
    )
    pages: List[str] = Field(default_factory=lambda: list(DEFAULT_PAGES), min_length=1)
    timeout: float = Field(20.0, gt=0, description="Таймаут на один запрос (секунд).")
    user_agent: str = Field(
        "VOCA-QA/1.0 (+https://www.voiceover-captions-ai.com/)",
        min_length=1,
        description="Заголовок User-Agent.",
    )
    hreflangs: List[str] = Field(default_factory=lambda: ["fr", "en", "x-default"])
    secondary_path: str = Field("/en/", description="Путь, который robots.txt не должен закрывать.")
    sitemap_index: str = Field("sitemap.xml")
    language_sitemaps: List[str] = Field(
        default_factory=lambda: ["sitemap-fr.xml", "sitemap-en.xml"]
    )
    header_paths: List[str] = Field(default_factory=lambda: ["/", "/en/"])
    required_headers: List[str] = Field(default_factory=lambda: list(SECURITY_HEADERS))
    budgets: Dict[str, int] = Field(
        default_factory=lambda: {
            "assets/styles.min.css": 120 * 1024,
            "assets/main.min.js": 80 * 1024,
        },
        description="Лимиты размера ассетов в байтах.",
    )
    link_concurrency: Optional[int] = Field(
        16, ge=1, description="Макс. число одновременных проверок ссылок (None = без лимита)."
    )

    @field_validator("base_url", "site_url", mode="before")
    def _ensure_trailing_slash(cls, v: Any) -> Any:
        if not isinstance(v, str):
            return v
        parsed = urlparse(v.strip())
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(f"ожидается http(s) URL, получено {v!r}")
        return v.strip() if v.strip().endswith("/") else v.strip() + "/"

    @field_validator("required_headers", "hreflangs")
    def _lowercase(cls, v: List[str]) -> List[str]:
        return [item.lower() for item in v]

    def with_base(self, base_url: Optional[str]) -> AuditConfig:
        """Возвращает копию конфига с другим base_url (с повторной валидацией)."""
        if not base_url:
            return self
        return AuditConfig(**{**self.model_dump(), "base_url": base_url})


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Неправильный YAML в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень YAML должен быть mapping, получено {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Неправильный JSON в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень JSON должен быть mapping, получено {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None]) -> AuditConfig:
    """
    Читает YAML или JSON и возвращает проверенный объект AuditConfig.
    Без пути возвращает конфиг по умолчанию (продакшн-сайт).
    """
    if path is None:
        return AuditConfig()

    path_obj = Path(path).expanduser().resolve()
    if not path_obj.is_file():
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")

    return AuditConfig(**data)
