"""Serialize content blocks back to ':::type [attrs] ... :::' markup"""

from typing import Callable

from blockmark.core.extract.attrs import format_attributes
from blockmark.core.extract.blocks import GALLERY_SEPARATOR
from blockmark.core.models import (
    BlockType,
    ContentBlock,
    ImageBlock,
    ImageGalleryBlock,
    ItineraryStep,
    NotesBlock,
    TableBlock,
    TextBlock,
    TimelineBlock,
    TipsBlock,
)


def _wrap(keyword: BlockType, attrs: dict[str, str | None], body: list[str]) -> str:
    """Frame body lines with the header and closing fence."""
    return '\n'.join([f":::{keyword.value}{format_attributes(attrs)}", *body, ':::'])


def _items(values: list[str]) -> list[str]:
    return [f"- {v}" for v in values]


def _cells(values: list[str]) -> str:
    """Join table cells; an empty row is written as a bare pipe so it is not lost."""
    return ' | '.join(values) if values else '|'


def _image_fields(url: str, caption: str | None, alt: str | None) -> list[str]:
    lines = [f"url: {url}"]
    if caption is not None:
        lines.append(f"caption: {caption}")
    if alt is not None:
        lines.append(f"alt: {alt}")
    return lines


def _step_lines(step: ItineraryStep) -> list[str]:
    """A step without blank lines: title, details, then any tips/notes sub-sections.

    An untitled step leads with its sub-sections, since a leading detail line
    would be read back as the title. An untitled step with details but no
    sub-sections has nothing to lead with, so its first detail comes back as
    the title.
    """
    sections = []
    for section in ('tips', 'notes'):
        values = getattr(step, section)
        if values is not None:
            sections += [f"[{section}]", *_items(values), f"[/{section}]"]
    if step.title:
        return [step.title, *_items(step.details), *sections]
    return [*sections, *_items(step.details)]


def emit_text(block: TextBlock) -> str:
    return _wrap(BlockType.text, {"heading": block.heading}, [block.content])


def emit_tips(block: TipsBlock) -> str:
    return _wrap(BlockType.tips, {"title": block.title}, _items(block.tips))


def emit_notes(block: NotesBlock) -> str:
    return _wrap(BlockType.notes, {"title": block.title}, _items(block.notes))


def emit_timeline(block: TimelineBlock) -> str:
    body: list[str] = []
    for i, step in enumerate(block.steps):
        if i:
            body.append('')
        body += _step_lines(step)
    return _wrap(BlockType.timeline, {"title": block.title}, body)


def emit_image(block: ImageBlock) -> str:
    return _wrap(BlockType.image, {}, _image_fields(block.url, block.caption, block.alt))


def emit_gallery(block: ImageGalleryBlock) -> str:
    body: list[str] = []
    for i, img in enumerate(block.images):
        if i:
            body.append(GALLERY_SEPARATOR)
        body += _image_fields(img.url, img.caption, img.alt)
    return _wrap(BlockType.gallery, {"title": block.title}, body)


def emit_table(block: TableBlock) -> str:
    body: list[str] = []
    if block.headers or block.rows:
        body = [_cells(block.headers), '---', *(_cells(row) for row in block.rows)]
    return _wrap(BlockType.table, {"title": block.title, "caption": block.caption}, body)


EMITTERS: dict[str, Callable[..., str]] = {
    "text":         emit_text,
    "tips":         emit_tips,
    "notes":        emit_notes,
    "timeline":     emit_timeline,
    "image":        emit_image,
    "imageGallery": emit_gallery,
    "table":        emit_table,
}


def serialize_block(block: ContentBlock) -> str:
    """Render a single block in its canonical markup form."""
    return EMITTERS[block.type](block)


def serialize_document(blocks: list[ContentBlock]) -> str:
    """Join serialized blocks with one blank line between them."""
    return '\n\n'.join(serialize_block(b) for b in blocks)
