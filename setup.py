# setup.py
from setuptools import setup, find_packages

setup(
    name="site_qa",
    version="0.1.0",
    description="Асинхронный QA-аудит сайта SiteQA (SEO, ссылки, robots/sitemap, заголовки, бюджеты)",
    packages=find_packages(exclude=["tests", "tests.*"]),  # автоматически найдёт папку site_qa
    install_requires=[
        "aiohttp>=3.10",
        "beautifulsoup4>=4.12",
        "click>=8.1",
        "lxml>=5.0",
        "pydantic>=2.5",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": [
            "site-qa=site_qa.cli:cli",
        ],
    },
    python_requires=">=3.11",
)
