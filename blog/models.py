"""
Core data structures shared by the blog frontend.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, List, Mapping, Optional, Union

DEFAULT_TITLE = "제목 없음"
DEFAULT_CATEGORY = "Uncategorized"
PLACEHOLDER_THUMBNAIL = "https://via.placeholder.com/400x200"
DEFAULT_PAGE_SIZE = 6


class BlockType(str, Enum):
    PARAGRAPH = "paragraph"
    HEADING_1 = "heading_1"
    HEADING_2 = "heading_2"
    HEADING_3 = "heading_3"
    IMAGE = "image"
    EMBED = "embed"
    BOOKMARK = "bookmark"
    LINK_PREVIEW = "link_preview"
    OTHER = "other"

    @classmethod
    def from_tag(cls, tag: Optional[str]) -> "BlockType":
        try:
            return cls(tag)
        except ValueError:
            return cls.OTHER


TEXT_BLOCK_TYPES = frozenset(
    {BlockType.PARAGRAPH, BlockType.HEADING_1, BlockType.HEADING_2, BlockType.HEADING_3}
)
LINK_BLOCK_TYPES = frozenset({BlockType.EMBED, BlockType.BOOKMARK, BlockType.LINK_PREVIEW})


class SortOrder(str, Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"


@dataclass
class ArticleSummary:
    """
    One row of the archive listing, with every field already defaulted.
    """

    id: str
    title: str = DEFAULT_TITLE
    category: str = DEFAULT_CATEGORY
    date: str = ""
    summary: str = ""
    thumbnail: str = PLACEHOLDER_THUMBNAIL


@dataclass
class ArticleDetail:
    title: str = DEFAULT_TITLE
    category: str = DEFAULT_CATEGORY
    date: str = ""
    thumbnail: str = ""


@dataclass(frozen=True)
class ContentBlock:
    """
    A single body block. `text` is set for text-bearing types, `url` for
    media/link types; either may be None when the upstream omitted it.
    """

    id: str
    type: BlockType
    text: Optional[str] = None
    url: Optional[str] = None


@dataclass
class ArticleBundle:
    detail: Optional[ArticleDetail]
    blocks: List[ContentBlock] = field(default_factory=list)


# Rendered nodes -----------------------------------------------------------


@dataclass(frozen=True)
class LineBreak:
    key: str
    kind: str = "break"


@dataclass(frozen=True)
class Paragraph:
    key: str
    text: str
    kind: str = "paragraph"


@dataclass(frozen=True)
class Heading:
    key: str
    level: int
    text: str
    kind: str = "heading"


@dataclass(frozen=True)
class Image:
    key: str
    url: str
    kind: str = "image"


@dataclass(frozen=True)
class MapFrame:
    key: str
    url: str
    kind: str = "map"


@dataclass(frozen=True)
class ExternalLink:
    key: str
    url: str
    kind: str = "link"


RenderedNode = Union[LineBreak, Paragraph, Heading, Image, MapFrame, ExternalLink]


# Archive view state -------------------------------------------------------


def _positive_int(raw: Any, default: int = 1) -> int:
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return default
    return value if value > 0 else default


@dataclass(frozen=True)
class ArchiveViewState:
    """
    Ephemeral per-visitor listing state. Any change to the search term, sort
    order or category lands back on page 1.
    """

    search_term: str = ""
    sort_order: SortOrder = SortOrder.DESCENDING
    current_page: int = 1
    category: Optional[str] = None

    def with_search(self, search_term: str) -> "ArchiveViewState":
        if search_term == self.search_term:
            return self
        return replace(self, search_term=search_term, current_page=1)

    def with_sort(self, sort_order: SortOrder) -> "ArchiveViewState":
        if sort_order == self.sort_order:
            return self
        return replace(self, sort_order=sort_order, current_page=1)

    def with_category(self, category: Optional[str]) -> "ArchiveViewState":
        if category == self.category:
            return self
        return replace(self, category=category, current_page=1)

    def with_page(self, page: int) -> "ArchiveViewState":
        return replace(self, current_page=_positive_int(page))

    @classmethod
    def from_query(cls, args: Mapping[str, Any], category: Optional[str] = None) -> "ArchiveViewState":
        """Build a state from request query args (`q`, `sort`, `page`)."""
        raw_sort = str(args.get("sort") or SortOrder.DESCENDING.value).strip().lower()
        try:
            sort_order = SortOrder(raw_sort)
        except ValueError:
            sort_order = SortOrder.DESCENDING
        return cls(
            search_term=str(args.get("q") or ""),
            sort_order=sort_order,
            current_page=_positive_int(args.get("page")),
            category=category,
        )


@dataclass
class ArchivePage:
    articles: List[ArticleSummary]
    total_pages: int
    current_page: int
    total_matches: int

    @property
    def is_empty(self) -> bool:
        return not self.articles

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def previous_page(self) -> int:
        return max(1, self.current_page - 1)

    @property
    def next_page(self) -> int:
        return max(1, min(self.total_pages, self.current_page + 1))

    @property
    def page_numbers(self) -> List[int]:
        return list(range(1, self.total_pages + 1))
