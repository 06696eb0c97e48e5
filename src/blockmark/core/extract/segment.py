"""Line scanner that splits a document into top-level ':::type ... :::' spans"""

import logging
import re
from typing import Iterator, NamedTuple, Union

from blockmark.core.models import RawBlock


logger = logging.getLogger(__name__)

FENCE = ':::'
HEADER_RE = re.compile(r'^:::\s*([A-Za-z]*)[^\[]*(?:\[(.*)\])?')


class BlockOpen(NamedTuple):
    type: str
    attrs: str
    line: int


class BlockClose(NamedTuple):
    line: int


class Line(NamedTuple):
    text: str
    line: int


Event = Union[BlockOpen, BlockClose, Line]


def split_lines(text: str) -> list[str]:
    r"""Split on '\n' only, dropping a trailing '\r' from each line.

    Other Unicode line boundaries (\u2028, \x85, form feed) stay inside the line.
    """
    lines = [line[:-1] if line.endswith('\r') else line for line in text.split('\n')]
    if lines and lines[-1] == '':
        lines.pop()
    return lines


def _header(stripped: str, lineno: int) -> BlockOpen:
    """Split a ':::type [attrs]' header into type keyword and annotation text."""
    m = HEADER_RE.match(stripped)
    return BlockOpen(type=m.group(1).lower(), attrs=m.group(2) or '', line=lineno)


def tokenize(text: str) -> Iterator[Event]:
    """Yield BlockOpen/BlockClose/Line events, one per source line."""
    for lineno, raw in enumerate(split_lines(text), start=1):
        stripped = raw.strip()
        if stripped == FENCE:
            yield BlockClose(lineno)
        elif stripped.startswith(FENCE):
            yield _header(stripped, lineno)
        else:
            yield Line(raw, lineno)


def segment(text: str) -> list[RawBlock]:
    """Fold tokenized events into RawBlocks in source order.

    A header met while a block is open closes that block first, and a block
    still open at end of input is closed there.
    """
    blocks: list[RawBlock] = []
    current: BlockOpen | None = None
    body: list[str] = []

    def _flush() -> None:
        blocks.append(RawBlock(current.type, current.attrs, '\n'.join(body), current.line))

    for event in tokenize(text or ''):
        if isinstance(event, BlockOpen):
            if current is not None:
                logger.debug("Block at line %d closed implicitly by line %d", current.line, event.line)
                _flush()
            current, body = event, []
        elif isinstance(event, BlockClose):
            if current is None:
                logger.debug("Stray block close at line %d", event.line)
                continue
            _flush()
            current, body = None, []
        elif current is not None:
            body.append(event.text)
        elif event.text.strip():
            logger.debug("Ignoring text outside any block at line %d", event.line)

    if current is not None:
        logger.debug("Block at line %d left open at end of input", current.line)
        _flush()
    return blocks
