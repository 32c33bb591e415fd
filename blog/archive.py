"""
Archive listing logic: search filter, date sort and fixed-size pagination.

`present_archive` is a pure function of (articles, state); the page-change
side effect (scroll back to the top) is left to the caller's callback.
"""
from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Callable, List, Optional, Sequence

from blog.models import (
    DEFAULT_PAGE_SIZE,
    ArchivePage,
    ArchiveViewState,
    ArticleSummary,
    SortOrder,
)


def parse_date_timestamp(value: Optional[str]) -> float:
    """Epoch seconds for an ISO-8601 date; 0.0 when empty or unparseable."""
    if not value:
        return 0.0
    try:
        dt = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except (TypeError, ValueError):
        return 0.0
    if not dt.tzinfo:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.timestamp()


def filter_articles(articles: Sequence[ArticleSummary], search_term: str) -> List[ArticleSummary]:
    needle = (search_term or "").lower()
    if not needle:
        return list(articles)
    return [
        article
        for article in articles
        if needle in article.title.lower() or needle in article.summary.lower()
    ]


def sort_articles(articles: Sequence[ArticleSummary], order: SortOrder) -> List[ArticleSummary]:
    # sorted() is stable, and so is reverse=True: ties keep their input order.
    return sorted(
        articles,
        key=lambda article: parse_date_timestamp(article.date),
        reverse=order is SortOrder.DESCENDING,
    )


def total_pages_for(count: int, page_size: int = DEFAULT_PAGE_SIZE) -> int:
    return math.ceil(count / page_size) if count > 0 else 0


def paginate(
    articles: Sequence[ArticleSummary], page: int, page_size: int = DEFAULT_PAGE_SIZE
) -> List[ArticleSummary]:
    start = (page - 1) * page_size
    if start < 0:
        return []
    return list(articles[start : page * page_size])


def present_archive(
    articles: Sequence[ArticleSummary],
    state: ArchiveViewState,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> ArchivePage:
    matches = sort_articles(filter_articles(articles, state.search_term), state.sort_order)
    return ArchivePage(
        articles=paginate(matches, state.current_page, page_size),
        total_pages=total_pages_for(len(matches), page_size),
        current_page=state.current_page,
        total_matches=len(matches),
    )


def change_page(
    state: ArchiveViewState,
    page: int,
    on_change: Optional[Callable[[ArchiveViewState], None]] = None,
) -> ArchiveViewState:
    """Move to `page`, then fire `on_change` with the updated state."""
    updated = state.with_page(page)
    if on_change is not None:
        on_change(updated)
    return updated
