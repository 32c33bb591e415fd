"""
Turn the ordered block sequence of an article into renderable nodes.

Dispatch is a table keyed by block type. Types without a handler, and blocks
whose resource URL is missing, produce no node; nothing in here raises.
"""
from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, Iterator, Optional

from blog.models import (
    BlockType,
    ContentBlock,
    ExternalLink,
    Heading,
    Image,
    LineBreak,
    MapFrame,
    Paragraph,
    RenderedNode,
)

logger = logging.getLogger(__name__)

BlockHandler = Callable[[ContentBlock], Optional[RenderedNode]]


def is_map_url(url: str) -> bool:
    """Literal, case-sensitive check: both "google" and "map" appear somewhere."""
    return "google" in url and "map" in url


def _paragraph(block: ContentBlock) -> RenderedNode:
    text = block.text or ""
    if not text:
        return LineBreak(key=block.id)
    return Paragraph(key=block.id, text=text)


def _heading(level: int) -> BlockHandler:
    def handler(block: ContentBlock) -> RenderedNode:
        return Heading(key=block.id, level=level, text=block.text or "")

    return handler


def _image(block: ContentBlock) -> Optional[RenderedNode]:
    if not block.url:
        return None
    return Image(key=block.id, url=block.url)


def _link_like(block: ContentBlock) -> Optional[RenderedNode]:
    url = block.url
    if not url:
        return None
    if is_map_url(url):
        return MapFrame(key=block.id, url=url)
    return ExternalLink(key=block.id, url=url)


HANDLERS: Dict[BlockType, BlockHandler] = {
    BlockType.PARAGRAPH: _paragraph,
    BlockType.HEADING_1: _heading(1),
    BlockType.HEADING_2: _heading(2),
    BlockType.HEADING_3: _heading(3),
    BlockType.IMAGE: _image,
    BlockType.EMBED: _link_like,
    BlockType.BOOKMARK: _link_like,
    BlockType.LINK_PREVIEW: _link_like,
}


def render_block(block: ContentBlock) -> Optional[RenderedNode]:
    handler = HANDLERS.get(block.type)
    if handler is None:
        return None
    return handler(block)


def render_blocks(blocks: Iterable[ContentBlock]) -> Iterator[RenderedNode]:
    """Yield one node per renderable block, in input order."""
    skipped = 0
    for block in blocks:
        node = render_block(block)
        if node is None:
            skipped += 1
            continue
        yield node
    if skipped:
        logger.debug("Skipped %d unsupported or empty blocks", skipped)
