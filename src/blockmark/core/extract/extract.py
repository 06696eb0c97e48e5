"""Convert segmented RawBlocks into typed content blocks"""

import logging

from blockmark.core.extract.attrs import parse_attributes
from blockmark.core.extract.blocks import BLOCK_PARSERS
from blockmark.core.models import ContentBlock, RawBlock


logger = logging.getLogger(__name__)


def extract_blocks(raw_blocks: list[RawBlock]) -> list[ContentBlock]:
    """Dispatch each RawBlock to its type parser; unknown types are skipped.

    Block ids are positional ('<type>-<index>' over the returned list), so they
    shift when blocks are added, removed or reordered.
    """
    blocks: list[ContentBlock] = []
    for raw in raw_blocks:
        parser = BLOCK_PARSERS.get(raw.type)
        if parser is None:
            logger.warning("Skipping unknown block type %r at line %d", raw.type, raw.line)
            continue
        block_id = f"{raw.type}-{len(blocks)}"
        blocks.append(parser(raw.body, parse_attributes(raw.attrs), block_id))
    return blocks
