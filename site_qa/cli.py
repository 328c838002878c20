#!/usr/bin/env python3
"""
Точка входа для запуска QA-аудита SiteQA через командную строку.

Команды:
  run       Запустить аудит и записать отчёт
  config    Показать текущую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (по умолчанию встроенные значения)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stdout, если не указан)
  --log-format FORMAT Формат логирования (e.g. "%(asctime)s %(levelname)s %(message)s")

Команда run опции:
  --base URL          Корневой URL проверяемого сайта
  --out PATH          Путь к Markdown-отчёту (default: tools/report.md)
  --json PATH         Дополнительно сохранить JSON-отчёт

Дополнительно:
  --version, -v       Показать версию SiteQA

Пример:
  site-qa run --base https://www.voiceover-captions-ai.com --out tools/report.md
"""
import asyncio
import sys
from pathlib import Path

import click

from site_qa import __version__
from site_qa.config import load_config
from site_qa.engine import start_audit, write_reports
from site_qa.logger import DEFAULT_FORMAT, init_logging, logger

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])
DEFAULT_REPORT = Path("tools") / "report.md"


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='SiteQA, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (stdout, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Группа команд SiteQA CLI."""
    init_logging(
        level=log_level,
        log_file=log_file,
        log_format=log_format,
    )
    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('run', context_settings=CONTEXT_SETTINGS)
@click.option(
    '--base', '-b', 'base_url',
    default=None,
    help='Корневой URL сайта (по умолчанию base_url из конфига).'
)
@click.option(
    '--out', '-o', 'out_path',
    default=DEFAULT_REPORT,
    show_default=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help='Путь к Markdown-отчёту'
)
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help='Сохранить JSON-отчёт в файл'
)
@click.pass_context
def run(ctx, base_url, out_path, json_output):
    """Запустить аудит и записать отчёт."""
    try:
        cfg = ctx.obj['config'].with_base(base_url)
    except Exception as e:
        print_error(f'Некорректный --base: {e}')

    click.echo(f'Auditing {cfg.base_url}')
    try:
        report = asyncio.run(start_audit(cfg))
        saved = write_reports(report, out_path, json_output)
    except Exception as e:
        logger.exception('QA run failed')
        print_error(f'Ошибка QA: {e}')

    click.echo(f'Report written → {saved}')
    click.echo(f'Duration: {round(report.duration)}s')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать текущую конфигурацию в JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
