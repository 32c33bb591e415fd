"""
Public API for the blog content layer.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from blog.adapters.base import ContentSource
from blog.adapters.notion import NotionContentAdapter
from blog.archive import change_page, present_archive
from blog.models import ArchivePage, ArchiveViewState, ArticleBundle, ArticleSummary
from blog.renderer import render_blocks
from blog.settings import BlogSettings, load_settings
from blog.status import build_status

SETTINGS: BlogSettings = load_settings()
_source: ContentSource = NotionContentAdapter(SETTINGS)


def get_articles(category: Optional[str] = None) -> List[ArticleSummary]:
    """All articles, newest first as returned by the database query."""
    return _source.query_articles(category)


def get_archive(state: ArchiveViewState) -> ArchivePage:
    articles = get_articles(state.category)
    return present_archive(articles, state)


def get_article(page_id: str) -> ArticleBundle:
    return _source.fetch_article(page_id)


def get_status() -> Dict[str, Any]:
    return build_status(SETTINGS)


__all__ = [
    "SETTINGS",
    "change_page",
    "get_archive",
    "get_article",
    "get_articles",
    "get_status",
    "render_blocks",
]
