"""
mdtidy – Markdown normaliser CLI

    python -m mdtidy < in.md > out.md        # filter stdin -> stdout
    python -m mdtidy notes.md README.md      # rewrite files in place
    python -m mdtidy --config mdtidy.json notes.md

Exit status 0 on success, 1 when a rule, the input or the config fails.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from .formatter import Formatter, RuleError, build_formatter, default_formatter, format_text
from .logconf import get_logger, init
from .validate import ConfigError, load_config

app = typer.Typer(pretty_exceptions_show_locals=False, add_completion=False)
logger = get_logger("mdtidy")


def _err(msg: str) -> None:
    Console(stderr=True, highlight=False, soft_wrap=True).print(msg)


def _fail(msg: str) -> None:
    _err(f"[red]❌ {escape(msg)}[/]")
    raise typer.Exit(code=1)


# ═════════ helpers ═════════
def _decode(raw: bytes, origin: str) -> str:
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        _fail(f"{origin}: not valid UTF-8 ({e.reason} at byte {e.start})")


def _filter_stdin(fmt: Formatter) -> None:
    text = _decode(typer.get_binary_stream("stdin").read(), "<stdin>")
    try:
        out = format_text(text, fmt)
    except RuleError as e:
        _fail(str(e))
    stdout = typer.get_binary_stream("stdout")
    stdout.write(out.encode("utf-8"))
    stdout.flush()


def _rewrite(path: Path, fmt: Formatter) -> bool:
    try:
        raw = path.read_bytes()
    except OSError as e:
        _fail(f"{path}: {e.strerror or e}")
    text = _decode(raw, str(path))
    try:
        out = format_text(text, fmt)
    except RuleError as e:
        _fail(f"{path}: {e}")
    if out == text:
        return False
    path.write_bytes(out.encode("utf-8"))
    return True


# ═════════ command ═════════
@app.command()
def main(
    paths: Optional[List[Path]] = typer.Argument(
        None, help="Markdown files to rewrite in place (stdin -> stdout if omitted)"
    ),
    config: Optional[Path] = typer.Option(None, "--config", help="JSON rule configuration"),
    log_level: str = typer.Option("WARNING", "--log-level", envvar="MDTIDY_LOG_LEVEL"),
    log_file: Optional[Path] = typer.Option(None, "--log-file"),
) -> None:
    """Normalise headings, lists, tables, inline math and quotes in Markdown."""
    init(log_level, log_file)

    if config is None:
        fmt = default_formatter()
    else:
        try:
            fmt = build_formatter(load_config(config))
        except ConfigError as e:
            _fail(f"config: {e}")
    logger.debug("rules: %s", ", ".join(fmt.names))

    if not paths:
        _filter_stdin(fmt)
        return

    for p in paths:
        changed = _rewrite(p, fmt)
        logger.info("%s %s", "cleaned" if changed else "unchanged", p)
        _err(f"[green]✓ cleaned {escape(str(p))}[/]" if changed else f"[grey50]· unchanged {escape(str(p))}[/]")


if __name__ == "__main__":
    app()
