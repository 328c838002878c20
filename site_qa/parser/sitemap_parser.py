# File: site_qa/parser/sitemap_parser.py
"""site_qa.parser.sitemap_parser: Модуль для парсинга sitemap.xml и проверки индекса."""

from __future__ import annotations

from typing import Iterable, List

from lxml import etree


def parse_sitemap(xml_content: str) -> List[str]:
    """Разбирает XML content sitemap и возвращает список URL из тегов <loc>.

    Работает и для индекса (<sitemapindex>), и для обычного <urlset>.
    Битый или пустой XML даёт пустой список, а не исключение.

    Args:
        xml_content: строка с содержимым sitemap.xml.

    Returns:
        Список URL, найденных в <loc> тегах.
    """
    if not xml_content or not xml_content.strip():
        return []
    parser = etree.XMLParser(ns_clean=True, recover=True, resolve_entities=False)
    try:
        root = etree.fromstring(xml_content.encode("utf-8"), parser=parser)
    except etree.XMLSyntaxError:
        return []
    if root is None:
        return []
    locs = root.findall(".//{*}loc")
    return [loc.text.strip() for loc in locs if loc.text]


def validate_sitemap_index(xml_content: str, expected_urls: Iterable[str]) -> List[str]:
    """Проверяет, что индекс sitemap ссылается на все ожидаемые языковые sitemap.

    Returns:
        Список предупреждений (по одному на каждый отсутствующий URL).
    """
    found = {url.lower() for url in parse_sitemap(xml_content)}
    warnings: List[str] = []
    for url in expected_urls:
        if url.lower() not in found:
            name = url.rstrip("/").rsplit("/", 1)[-1]
            warnings.append(f"sitemap.xml: link to {name} missing")
    return warnings
