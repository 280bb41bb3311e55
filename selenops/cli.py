# === FILE: selenops/cli.py ===
#!/usr/bin/env python3
"""
Command-line entry point of the Selenops word-search crawler.

Commands:
  search    Crawl from a start page looking for a word
  config    Show the resolved configuration

Common options:
  --config PATH       YAML/JSON config file with defaults for search
  --log-level LEVEL   Logging level (DEBUG, INFO, ...)
  --log-file PATH     Log file (stderr only if omitted)
  --log-format FORMAT Logging format string

search options:
  --start, -s URL     Starting page URL (http:// or https:// prefix)
  --word, -w WORD     Word to look for
  --max, -m INT       Maximum number of pages to visit
  --timeout SEC       Timeout of a single request
  --json              Print the summary as JSON
  --scan-timeout SEC  Timeout of the whole crawl

Also:
  --version, -v       Show the Selenops version

Example:
  selenops search --start https://example.com --word fall --max 20
"""
import asyncio
import json
import sys
from pathlib import Path
from typing import Any, Optional

import click
from pydantic import ValidationError

from selenops import __version__
from selenops.config import CrawlConfig, load_config
from selenops.logger import configure
from selenops.scanner import start_search

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


def _build_config(config_path: Optional[Path], **overrides: Any) -> CrawlConfig:
    try:
        return load_config(config_path, **overrides)
    except ValidationError as e:
        print_error(f'Invalid configuration: {e}')
    except (OSError, ValueError, TypeError) as e:
        print_error(f'Failed to load configuration: {e}')


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='Selenops, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Path to a YAML or JSON config file.'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Logging level'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Log file path (stderr only if omitted)'
)
@click.option(
    '--log-format', 'log_format',
    default='%(asctime)s %(levelname)s %(message)s',
    show_default=True,
    help='Logging format string'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Selenops: search for a word across the pages of a site."""
    configure(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    ctx.ensure_object(dict)
    ctx.obj['config_path'] = config_path


@cli.command('search', context_settings=CONTEXT_SETTINGS)
@click.option('--start', '-s', 'start_url', default=None,
              help='The starting page URL (must have http:// or https:// prefix).')
@click.option('--word', '-w', 'word', default=None, help='The word to look for.')
@click.option('--max', '-m', 'max_pages', type=int, default=None,
              help='The maximum number of pages to visit.  [default: 10]')
@click.option('--timeout', 'timeout', type=float, default=None,
              help='Timeout of a single request (seconds).')
@click.option('--json', 'as_json', is_flag=True, help='Print the summary as JSON')
@click.option('--scan-timeout', 'scan_timeout', type=float, default=None,
              help='Timeout of the whole crawl (seconds)')
@click.pass_context
def search(ctx, start_url, word, max_pages, timeout, as_json, scan_timeout):
    """Crawl from the start page and report pages containing the word."""
    cfg = _build_config(
        ctx.obj['config_path'],
        start_url=start_url, word=word, max_pages=max_pages, timeout=timeout,
    )
    if not as_json:
        click.echo(f'Searching for: {cfg.word}')
        click.echo(f'Starting from: {cfg.start_url}')
        click.echo(f'Maximum number of pages to visit: {cfg.max_pages}')
    try:
        if scan_timeout:
            summary = asyncio.run(
                asyncio.wait_for(start_search(cfg), timeout=scan_timeout)
            )
        else:
            summary = asyncio.run(start_search(cfg))
    except asyncio.TimeoutError:
        print_error(f'Crawl did not finish within {scan_timeout} seconds')
    except Exception as e:
        print_error(f'Crawl failed: {e}')

    if as_json:
        click.echo(json.dumps(summary.as_dict(), ensure_ascii=False, indent=2))
        return

    click.echo(f'Visited pages: {len(summary.visited)}')
    click.echo(f"Found {len(summary.matches)} pages containing '{summary.word}'")
    for url in summary.matches:
        click.echo(f'  {url}')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.option('--start', '-s', 'start_url', default=None, help='Override the starting page URL.')
@click.option('--word', '-w', 'word', default=None, help='Override the word to look for.')
@click.pass_context
def show_config(ctx, start_url: Optional[str], word: Optional[str]):
    """Show the resolved configuration as JSON."""
    cfg = _build_config(ctx.obj['config_path'], start_url=start_url, word=word)
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
