"""Per-type parsers turning a RawBlock body into a typed content block"""

import re
from typing import Callable

from blockmark.core.extract.segment import split_lines
from blockmark.core.extract.steps import parse_steps, strip_item
from blockmark.core.models import (
    BlockType,
    GalleryImage,
    ImageBlock,
    ImageGalleryBlock,
    NotesBlock,
    TableBlock,
    TextBlock,
    TimelineBlock,
    TipsBlock,
)


GALLERY_SEPARATOR = '---'
TABLE_SEPARATOR_RE = re.compile(r'^\|?[\s|:-]*---[\s|:-]*$')

BlockParser = Callable[[str, dict[str, str], str], object]


def _list_items(body: str) -> list[str]:
    """Non-empty trimmed lines, '- ' prefix stripped; '#' heading lines are skipped.

    Plain lines without the prefix are items too.
    """
    items = []
    for raw in split_lines(body):
        line = raw.strip()
        if line and not line.startswith('#'):
            items.append(strip_item(line))
    return items


def _key_values(lines: list[str]) -> dict[str, str]:
    """Parse 'key: value' lines; lines without a key or value are ignored."""
    pairs: dict[str, str] = {}
    for raw in lines:
        key, sep, value = raw.strip().partition(':')
        key, value = key.strip(), value.strip()
        if sep and key and value:
            pairs[key] = value
    return pairs


def _split_cells(line: str) -> list[str]:
    """Pipe-split a table line; cells are trimmed and empty cells dropped."""
    return [cell.strip() for cell in line.split('|') if cell.strip()]


def parse_text(body: str, attrs: dict[str, str], block_id: str) -> TextBlock:
    return TextBlock(id=block_id, content=body.strip(), heading=attrs.get('heading'))


def parse_tips(body: str, attrs: dict[str, str], block_id: str) -> TipsBlock:
    return TipsBlock(id=block_id, title=attrs.get('title'), tips=_list_items(body))


def parse_notes(body: str, attrs: dict[str, str], block_id: str) -> NotesBlock:
    return NotesBlock(id=block_id, title=attrs.get('title'), notes=_list_items(body))


def parse_timeline(body: str, attrs: dict[str, str], block_id: str) -> TimelineBlock:
    return TimelineBlock(id=block_id, title=attrs.get('title'), steps=parse_steps(split_lines(body)))


def parse_image(body: str, attrs: dict[str, str], block_id: str) -> ImageBlock:
    """Parse url/caption/alt lines; a missing url becomes '' for the validator to flag."""
    pairs = _key_values(split_lines(body))
    return ImageBlock(id=block_id, url=pairs.get('url', ''), caption=pairs.get('caption'), alt=pairs.get('alt'))


def parse_gallery(body: str, attrs: dict[str, str], block_id: str) -> ImageGalleryBlock:
    """Split the body on '---' lines and parse each non-blank segment as an image."""
    segments: list[list[str]] = [[]]
    for line in split_lines(body):
        if line.strip() == GALLERY_SEPARATOR:
            segments.append([])
        else:
            segments[-1].append(line)

    images = []
    for seg in segments:
        if not any(line.strip() for line in seg):
            continue
        pairs = _key_values(seg)
        images.append(GalleryImage(url=pairs.get('url', ''), caption=pairs.get('caption'), alt=pairs.get('alt')))
    return ImageGalleryBlock(id=block_id, title=attrs.get('title'), images=images)


def parse_table(body: str, attrs: dict[str, str], block_id: str) -> TableBlock:
    """First non-empty line is headers, an optional '---' line follows, the rest are rows."""
    lines = [line.strip() for line in split_lines(body) if line.strip()]
    table = TableBlock(id=block_id, title=attrs.get('title'), caption=attrs.get('caption'))
    if not lines:
        return table

    table.headers = _split_cells(lines[0])
    rest = lines[1:]
    if rest and TABLE_SEPARATOR_RE.match(rest[0]):
        rest = rest[1:]
    table.rows = [_split_cells(line) for line in rest]
    return table


BLOCK_PARSERS: dict[BlockType, BlockParser] = {
    BlockType.text:     parse_text,
    BlockType.tips:     parse_tips,
    BlockType.notes:    parse_notes,
    BlockType.timeline: parse_timeline,
    BlockType.image:    parse_image,
    BlockType.gallery:  parse_gallery,
    BlockType.table:    parse_table,
}
