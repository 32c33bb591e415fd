"""
Protocol for content sources feeding the blog.
"""
from __future__ import annotations

from typing import List, Optional, Protocol

from blog.models import ArticleBundle, ArticleDetail, ArticleSummary, ContentBlock


class ContentSource(Protocol):
    name: str

    def query_articles(self, category: Optional[str] = None) -> List[ArticleSummary]:
        ...

    def fetch_article_details(self, page_id: str) -> Optional[ArticleDetail]:
        ...

    def fetch_article_blocks(self, page_id: str) -> List[ContentBlock]:
        ...

    def fetch_article(self, page_id: str) -> ArticleBundle:
        ...
