"""CLI command implementations"""

import difflib
import json
import logging
import sys
from pathlib import Path
from typing import Annotated, Optional

import typer
import yaml
from pydantic import ValidationError

from blockmark.config import Settings, load_config
from blockmark.core.clipboard import import_table_from_clipboard
from blockmark.core.emit import serialize_document
from blockmark.core.models import ClipboardPayload, DocumentAdapter
from blockmark.core.parse import parse_document, parse_file
from blockmark.core.sample import SAMPLE_DOCUMENT
from blockmark.core.validate import validate_document


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling and apply the log level."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    return settings


def _read(path: Path) -> str:
    try:
        return path.read_text(encoding='utf-8')
    except OSError as e:
        _fail(f"Cannot read {path}", e)


def _dump(data, fmt: str, indent: int) -> str:
    if fmt == "yaml":
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True, indent=indent or None)
    return json.dumps(data, indent=indent or None, ensure_ascii=False)


def _report_diff(path: Path, source: str, normalized: str) -> bool:
    """Print a unified diff against the normalized text and a change count to stderr.

    Returns False when there is nothing to report.
    """
    diff = list(difflib.unified_diff(
        source.split('\n'), normalized.split('\n'),
        fromfile=str(path), tofile=f"{path} (normalized)", lineterm='',
        ))
    if not diff:
        return False
    typer.echo('\n'.join(diff))
    # skip the '---'/'+++' file header
    changes = [line[0] for line in diff[2:] if not line.startswith('@@')]
    typer.echo(f"{path}: {changes.count('+')} added, {changes.count('-')} deleted", err=True)
    return True


def parse_cmd(
    path: Annotated[Path, typer.Argument(exists=True, dir_okay=False, help="Markup file to parse")],
    fmt: Annotated[Optional[str], typer.Option("--format", help="json or yaml")] = None,
    ):
    """Parse a markup file and print its block AST."""
    settings = _settings(overrides={"output_format": fmt})
    blocks = parse_file(path)
    data = DocumentAdapter.dump_python(blocks, mode="json", exclude_none=True)
    typer.echo(_dump(data, settings.output_format, settings.indent))


def fmt_cmd(
    path: Annotated[Path, typer.Argument(help="Markup file to normalize")],
    check: Annotated[bool, typer.Option("--check", help="Print a diff and exit 1 if the file is not normalized")] = False,
    write: Annotated[bool, typer.Option("--write", help="Rewrite the file in place")] = False,
    ):
    """Re-serialize a markup file into its canonical form."""
    _settings()
    source = _read(path)
    normalized = serialize_document(parse_document(source)) + "\n"

    if check:
        if _report_diff(path, source, normalized):
            raise typer.Exit(1)
        typer.echo(f"{path}: already normalized")
    elif write:
        path.write_text(normalized, encoding='utf-8')
        typer.echo(f"Normalized {path}")
    else:
        typer.echo(normalized, nl=False)


def validate_cmd(
    path: Annotated[Path, typer.Argument(exists=True, dir_okay=False, help="Markup file to validate")],
    no_fail: Annotated[bool, typer.Option("--no-fail", help="Exit 0 even when defects are found")] = False,
    ):
    """Report structural defects in a markup file."""
    settings = _settings(overrides={"fail_on_defects": False if no_fail else None})
    errors = validate_document(parse_file(path))
    for msg in errors:
        typer.echo(f"  {msg}")
    typer.echo(f"{path}: {len(errors)} defect(s) found")
    if errors and settings.fail_on_defects:
        raise typer.Exit(1)


def emit_cmd(
    path: Annotated[Path, typer.Argument(help="JSON or YAML block AST file")],
    ):
    """Serialize a block AST file back to markup."""
    _settings()
    raw = _read(path)
    try:
        data = yaml.safe_load(raw) if path.suffix in ('.yaml', '.yml') else json.loads(raw)
        blocks = DocumentAdapter.validate_python(data)
    except (ValueError, yaml.YAMLError, ValidationError) as e:
        _fail(f"Invalid block AST in {path}", e)
    typer.echo(serialize_document(blocks))


def import_table_cmd(
    html: Annotated[Optional[Path], typer.Option("--html", help="File holding the text/html clipboard flavor")] = None,
    text: Annotated[Optional[Path], typer.Option("--text", help="File holding the text/plain clipboard flavor")] = None,
    title: Annotated[Optional[str], typer.Option("--title", help="Table title attribute")] = None,
    caption: Annotated[Optional[str], typer.Option("--caption", help="Table caption attribute")] = None,
    ):
    """Convert pasted table data into a ':::table' block. Reads stdin when no file is given."""
    _settings()
    if html is None and text is None:
        payload = ClipboardPayload(text=sys.stdin.read())
    else:
        payload = ClipboardPayload(
            html=_read(html) if html else None,
            text=_read(text) if text else None,
        )

    result = import_table_from_clipboard(payload, title=title, caption=caption)
    if not result.success:
        _fail(result.error)
    typer.echo(result.text)


def sample_cmd():
    """Print a starter document containing every block kind."""
    typer.echo(SAMPLE_DOCUMENT)
