"""Structural checks over a parsed document; defects are reported, never raised"""

from typing import Callable

from blockmark.core.models import (
    ContentBlock,
    ImageBlock,
    ImageGalleryBlock,
    NotesBlock,
    TableBlock,
    TextBlock,
    TimelineBlock,
    TipsBlock,
)


def _check_text(block: TextBlock, n: int) -> list[str]:
    return [] if block.content.strip() else [f"Block {n}: Text block is empty"]


def _check_tips(block: TipsBlock, n: int) -> list[str]:
    return [] if block.tips else [f"Block {n}: Tips block is empty"]


def _check_notes(block: NotesBlock, n: int) -> list[str]:
    return [] if block.notes else [f"Block {n}: Notes block is empty"]


def _check_timeline(block: TimelineBlock, n: int) -> list[str]:
    errors = [] if block.steps else [f"Block {n}: Timeline has no steps"]
    for m, step in enumerate(block.steps, start=1):
        if not step.title.strip():
            errors.append(f"Block {n}, Step {m}: Missing title")
    return errors


def _check_image(block: ImageBlock, n: int) -> list[str]:
    return [] if block.url.strip() else [f"Block {n}: Image URL is required"]


def _check_gallery(block: ImageGalleryBlock, n: int) -> list[str]:
    errors = [] if block.images else [f"Block {n}: Gallery has no images"]
    for m, img in enumerate(block.images, start=1):
        if not img.url.strip():
            errors.append(f"Block {n}, Image {m}: Missing URL")
    return errors


def _check_table(block: TableBlock, n: int) -> list[str]:
    errors = []
    if not block.headers:
        errors.append(f"Block {n}: Table has no headers")
    if not block.rows:
        errors.append(f"Block {n}: Table has no data rows")
    expected = len(block.headers)
    for m, row in enumerate(block.rows, start=1):
        if len(row) != expected:
            errors.append(f"Block {n}, Row {m}: Expected {expected} columns, got {len(row)}")
    return errors


VALIDATORS: dict[str, Callable[..., list[str]]] = {
    "text":         _check_text,
    "tips":         _check_tips,
    "notes":        _check_notes,
    "timeline":     _check_timeline,
    "image":        _check_image,
    "imageGallery": _check_gallery,
    "table":        _check_table,
}


def validate_block(block: ContentBlock, index: int) -> list[str]:
    """Return defects for the block at zero-based index (messages count from 1)."""
    return VALIDATORS[block.type](block, index + 1)


def validate_document(blocks: list[ContentBlock]) -> list[str]:
    """Return all defects in block order; an empty list means none were found."""
    return [msg for i, b in enumerate(blocks) for msg in validate_block(b, i)]
