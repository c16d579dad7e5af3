"""Click CLI commands for sha256-digest."""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from sha256_digest.config import Settings, engine_from_settings, get_settings
from sha256_digest.engine import ENGINES, EngineFactory, get_engine

console = Console()
logger = logging.getLogger(__name__)

ENGINE_CHOICE = click.Choice(sorted(ENGINES))


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-7s %(name)s  %(message)s",
        datefmt="%H:%M:%S",
    )


def _resolve_engine(settings: Settings, name: str | None) -> EngineFactory:
    """--engine wins over the configured engine."""
    if name:
        return get_engine(name)
    return engine_from_settings(settings)


def _print_digest(hexdigest: str, label: str) -> None:
    console.print(f"{hexdigest}  {escape(label)}", highlight=False, soft_wrap=True)


def _print_error(label: str, exc: OSError) -> None:
    reason = exc.strerror or str(exc)
    console.print(f"[red]error:[/red] {escape(label)}: {escape(reason)}", soft_wrap=True)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """sha256-digest — SHA-256 digests of files and text."""
    _setup_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


# ---------------------------------------------------------------------------
# file
# ---------------------------------------------------------------------------


async def _digest_many(
    paths: tuple[Path, ...],
    engine: EngineFactory,
    settings: Settings,
) -> list[str | OSError]:
    """Hash all paths concurrently, at most max_concurrent at a time."""
    from sha256_digest.digest import async_digest_from_path

    sem = asyncio.Semaphore(settings.max_concurrent)

    async def _one(path: Path) -> str | OSError:
        async with sem:
            try:
                return await async_digest_from_path(
                    path, engine=engine, chunk_size=settings.chunk_size,
                )
            except OSError as exc:
                logger.warning("Failed to hash %s: %s", path, exc)
                return exc

    return await asyncio.gather(*(_one(p) for p in paths))


def _digest_each(
    paths: tuple[Path, ...],
    engine: EngineFactory,
    settings: Settings,
) -> list[str | OSError]:
    from sha256_digest.digest import digest_from_path

    results: list[str | OSError] = []
    for path in paths:
        try:
            results.append(digest_from_path(path, engine=engine, chunk_size=settings.chunk_size))
        except OSError as exc:
            logger.warning("Failed to hash %s: %s", path, exc)
            results.append(exc)
    return results


@cli.command("file")
@click.argument("paths", nargs=-1, required=True, type=click.Path(path_type=Path))
@click.option("--engine", "engine_name", type=ENGINE_CHOICE, default=None,
              help="Hash engine (overrides config).")
@click.option("--async", "use_async", is_flag=True, help="Hash files concurrently on the event loop.")
def file_cmd(paths: tuple[Path, ...], engine_name: str | None, use_async: bool) -> None:
    """Print the SHA-256 digest of each file."""
    settings = get_settings()
    engine = _resolve_engine(settings, engine_name)

    if use_async:
        results = asyncio.run(_digest_many(paths, engine, settings))
    else:
        results = _digest_each(paths, engine, settings)

    failed = 0
    for path, result in zip(paths, results):
        if isinstance(result, OSError):
            _print_error(str(path), result)
            failed += 1
        else:
            _print_digest(result, str(path))

    if failed:
        sys.exit(1)


# ---------------------------------------------------------------------------
# text
# ---------------------------------------------------------------------------


@cli.command("text")
@click.argument("value")
@click.option("--engine", "engine_name", type=ENGINE_CHOICE, default=None,
              help="Hash engine (overrides config).")
def text_cmd(value: str, engine_name: str | None) -> None:
    """Print the SHA-256 digest of VALUE encoded as UTF-8."""
    from sha256_digest.digest import digest

    engine = _resolve_engine(get_settings(), engine_name)
    _print_digest(digest(value, engine=engine), "-")


# ---------------------------------------------------------------------------
# check
# ---------------------------------------------------------------------------


@cli.command("check")
@click.argument("path", type=click.Path(path_type=Path))
@click.argument("expected")
@click.option("--engine", "engine_name", type=ENGINE_CHOICE, default=None,
              help="Hash engine (overrides config).")
def check_cmd(path: Path, expected: str, engine_name: str | None) -> None:
    """Verify that PATH hashes to the EXPECTED hex digest."""
    from sha256_digest.digest import digest_from_path

    settings = get_settings()
    engine = _resolve_engine(settings, engine_name)

    try:
        actual = digest_from_path(path, engine=engine, chunk_size=settings.chunk_size)
    except OSError as exc:
        _print_error(str(path), exc)
        sys.exit(1)

    if actual == expected.strip().lower():
        console.print(f"{escape(str(path))}: [green]OK[/green]", soft_wrap=True)
    else:
        console.print(f"{escape(str(path))}: [red]FAILED[/red]", soft_wrap=True)
        console.print(f"  expected {expected.strip().lower()}", highlight=False)
        console.print(f"  actual   {actual}", highlight=False)
        sys.exit(1)
