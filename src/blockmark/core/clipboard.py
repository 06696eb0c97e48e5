"""Pasted table detection: HTML, TSV, CSV and Markdown pipe tables.

Detectors run in a fixed priority order and the first match wins. Each one
checks a cheap precondition (a '<table' tag, a tab, a comma, a pipe) before
doing any real parsing, and returns None to pass the content down the chain.
"""

import logging
import re
from typing import Callable, Optional

from bs4 import BeautifulSoup

from blockmark.core.emit import emit_table
from blockmark.core.extract.segment import split_lines
from blockmark.core.models import ClipboardPayload, ImportResult, ParsedTable, TableBlock


logger = logging.getLogger(__name__)

DETECT_FAILED = (
    "Could not detect table format. Please paste from Google Docs, Excel, "
    "or use tab/comma separated format."
)
QUOTE_RE = re.compile(r'^["\']|["\']$')
PIPE_RULE_RE = re.compile(r'^[|\-\s]+$')
PIPE_SEPARATOR_RE = re.compile(r'^\|?(?:[\s\-:]+\|)*[\s\-:]+\|?$')

Detector = Callable[[str], Optional[ParsedTable]]


def _lines(content: str) -> list[str]:
    return [line for line in split_lines(content) if line.strip()]


def _has_content(row: list[str]) -> bool:
    return any(cell != '' for cell in row)


def detect_html_table(content: str) -> ParsedTable | None:
    """First <tr> gives headers (th or td); later rows that are all empty are dropped."""
    lowered = content.lower()
    if '<table' not in lowered and '<tr' not in lowered:
        return None

    soup = BeautifulSoup(content, "html.parser")
    table = soup.find('table') or soup
    rows = table.find_all('tr')
    if not rows:
        return None

    def _texts(tr) -> list[str]:
        # cell text collapses to one line so it fits a single table row
        return [' '.join(cell.get_text(' ').split()) for cell in tr.find_all(['th', 'td'])]

    headers = _texts(rows[0])
    data = [r for r in (_texts(tr) for tr in rows[1:]) if _has_content(r)]
    return ParsedTable(headers=headers, rows=data)


def detect_tsv(content: str) -> ParsedTable | None:
    """Tab-separated text as copied from spreadsheets; rows must match the header width."""
    if '\t' not in content:
        return None
    lines = _lines(content)
    if len(lines) < 2:
        return None

    headers = [h.strip() for h in lines[0].split('\t')]
    rows = [[c.strip() for c in line.split('\t')] for line in lines[1:]]
    valid = [r for r in rows if len(r) == len(headers)]
    return ParsedTable(headers=headers, rows=valid) if valid else None


def detect_csv(content: str) -> ParsedTable | None:
    """Comma-separated text with surrounding quotes stripped; quoted commas are not supported."""
    if ',' not in content:
        return None
    lines = _lines(content)
    if len(lines) < 2:
        return None

    def _split(line: str) -> list[str]:
        return [QUOTE_RE.sub('', c.strip()) for c in line.split(',')]

    headers = _split(lines[0])
    rows = [_split(line) for line in lines[1:]]
    valid = [r for r in rows if len(r) == len(headers) and _has_content(r)]
    return ParsedTable(headers=headers, rows=valid) if valid else None


def detect_pipe_table(content: str) -> ParsedTable | None:
    """Markdown pipe tables; '|a|b|' framing and '|---|:--:|' rules are discarded."""
    if '|' not in content:
        return None
    lines = [line for line in _lines(content) if not PIPE_RULE_RE.match(line.strip())]
    if len(lines) < 2:
        return None

    def _split(line: str) -> list[str]:
        cells = [c.strip() for c in line.split('|')]
        last = len(cells) - 1
        return [c for i, c in enumerate(cells) if not (c == '' and i in (0, last))]

    headers = _split(lines[0])
    rows = [_split(line) for line in lines[1:] if not PIPE_SEPARATOR_RE.match(line.strip())]
    valid = [r for r in rows if len(r) == len(headers) and _has_content(r)]
    return ParsedTable(headers=headers, rows=valid) if valid else None


DETECTORS: list[tuple[str, Detector]] = [
    ("html", detect_html_table),
    ("tsv",  detect_tsv),
    ("csv",  detect_csv),
    ("pipe", detect_pipe_table),
]


def parse_table_from_clipboard(content: str) -> tuple[str, ParsedTable] | None:
    """Run the detector chain over one clipboard flavor; returns (detector, table) or None."""
    if not content or not content.strip():
        return None
    for name, detector in DETECTORS:
        table = detector(content)
        if table is not None:
            logger.debug("Clipboard content matched the %s detector", name)
            return name, table
    return None


def table_to_block_text(table: ParsedTable, title: str | None = None, caption: str | None = None) -> str:
    """Render a detected table as ':::table' markup for splicing into the editor."""
    block = TableBlock(id="table-0", title=title, caption=caption, headers=table.headers, rows=table.rows)
    return emit_table(block)


def import_table_from_clipboard(
    payload: ClipboardPayload | str,
    title: str | None = None,
    caption: str | None = None,
    ) -> ImportResult:
    """Detect a table in a paste payload, trying the HTML flavor before plain text.

    A bare string is treated as the plain-text flavor. Never raises; failure is
    an ImportResult with success=False and a user-facing error.
    """
    if isinstance(payload, str):
        payload = ClipboardPayload(text=payload)

    for content in (payload.html, payload.text):
        match = parse_table_from_clipboard(content or '')
        if match is not None:
            name, table = match
            return ImportResult(
                success=True,
                table=table,
                text=table_to_block_text(table, title, caption),
                detector=name,
            )

    logger.info("No table detected in clipboard payload")
    return ImportResult(success=False, error=DETECT_FAILED)
