"""Document entry points: markup text or file to content block list"""

from pathlib import Path

from blockmark.core.extract.extract import extract_blocks
from blockmark.core.extract.segment import segment
from blockmark.core.models import ContentBlock


def parse_document(text: str) -> list[ContentBlock]:
    """Parse markup into an ordered block list. Never raises on malformed input."""
    if not text or not text.strip():
        return []
    return extract_blocks(segment(text))


def parse_file(path: Path) -> list[ContentBlock]:
    """Read a UTF-8 markup file and parse it."""
    return parse_document(path.read_text(encoding='utf-8'))
