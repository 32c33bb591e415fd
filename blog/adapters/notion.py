"""
Adapter that reads pages, block children and database queries from Notion.
"""
from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Dict, List, Optional, TypeVar
from urllib.parse import quote

from pydantic import ValidationError

from blog.http_client import HttpClient
from blog.models import (
    DEFAULT_CATEGORY,
    DEFAULT_TITLE,
    LINK_BLOCK_TYPES,
    PLACEHOLDER_THUMBNAIL,
    TEXT_BLOCK_TYPES,
    ArticleBundle,
    ArticleDetail,
    ArticleSummary,
    BlockType,
    ContentBlock,
)
from blog.schemas import BlockPayload, ListResponse, NotionBlock, NotionPage, PageProperty, RichText
from blog.settings import BlogSettings, PropertyNames

logger = logging.getLogger(__name__)

BLOCK_PAGE_SIZE = 100

T = TypeVar("T")


class NotionContentAdapter:
    """
    Fetches blog content from one Notion database. Every call is a fresh round
    trip; failures resolve to None/[] and are only logged.
    """

    name = "notion"

    def __init__(self, settings: BlogSettings, http: Optional[HttpClient] = None) -> None:
        self.settings = settings
        self.base_url = settings.notion_api_base
        self.database_id = settings.notion_database_id
        self.properties = settings.properties
        self.http = http or HttpClient(
            api_key=settings.notion_api_key,
            notion_version=settings.notion_version,
            timeout=settings.request_timeout,
            max_retries=settings.max_retries,
        )

    def query_articles(self, category: Optional[str] = None) -> List[ArticleSummary]:
        if not self.database_id:
            logger.warning("NOTION_DATABASE_ID missing; archive will be empty")
            return []

        body: Dict[str, Any] = {
            "sorts": [{"property": self.properties.date, "direction": "descending"}],
        }
        if category is not None:
            body["filter"] = {
                "property": self.properties.category,
                "select": {"equals": category},
            }

        start = time.time()
        payload = self.http.post(f"{self.base_url}/databases/{_segment(self.database_id)}/query", body)
        if payload is None:
            return []
        listing = _parse_listing(payload)
        articles: List[ArticleSummary] = []
        for raw in listing.results:
            page = _parse_page(raw)
            if page is None:
                continue
            articles.append(summary_from_page(page, self.properties))
        logger.debug(
            "Queried %d articles (category=%s) in %.0fms",
            len(articles),
            category,
            (time.time() - start) * 1000,
        )
        return articles

    def fetch_article_details(self, page_id: str) -> Optional[ArticleDetail]:
        payload = self.http.get(f"{self.base_url}/pages/{_segment(page_id)}")
        if payload is None:
            return None
        page = _parse_page(payload)
        if page is None:
            return ArticleDetail()
        return detail_from_page(page, self.properties)

    def fetch_article_blocks(self, page_id: str) -> List[ContentBlock]:
        payload = self.http.get(
            f"{self.base_url}/blocks/{_segment(page_id)}/children",
            params={"page_size": BLOCK_PAGE_SIZE},
        )
        if payload is None:
            return []
        listing = _parse_listing(payload)
        if listing.has_more:
            logger.warning(
                "Article %s has more than %d blocks; only the first page is rendered",
                page_id,
                BLOCK_PAGE_SIZE,
            )
        return [block_from_payload(raw) for raw in listing.results]

    def fetch_article(self, page_id: str) -> ArticleBundle:
        """Fetch page details and body blocks concurrently, joining both."""
        with ThreadPoolExecutor(max_workers=2) as executor:
            detail_future = executor.submit(self.fetch_article_details, page_id)
            blocks_future = executor.submit(self.fetch_article_blocks, page_id)
            detail = _result_or_default(detail_future.result, None, "details", page_id)
            blocks = _result_or_default(blocks_future.result, [], "blocks", page_id)
        return ArticleBundle(detail=detail, blocks=blocks)


def _result_or_default(getter: Callable[[], T], default: T, label: str, page_id: str) -> T:
    try:
        return getter()
    except Exception as exc:  # pragma: no cover - safety net
        logger.error("Fetching %s for %s failed: %s", label, page_id, exc)
        return default


def _segment(value: str) -> str:
    return quote(str(value), safe="-")


def _parse_listing(payload: Dict[str, Any]) -> ListResponse:
    try:
        return ListResponse.model_validate(payload)
    except ValidationError as exc:
        logger.warning("Unexpected list payload shape: %s", exc.errors()[:1])
        return ListResponse()


def _parse_page(raw: Any) -> Optional[NotionPage]:
    if not isinstance(raw, dict):
        return None
    try:
        return NotionPage.model_validate(raw)
    except ValidationError as exc:
        logger.debug("Page %s failed validation: %s", raw.get("id"), exc.errors()[:1])
        # Keep the record; every field falls back to its default.
        return NotionPage(id=str(raw.get("id") or ""))


# Field extraction ---------------------------------------------------------


def _property(page: NotionPage, name: str) -> Optional[PageProperty]:
    raw = page.properties.get(name)
    if not isinstance(raw, dict):
        return None
    try:
        return PageProperty.model_validate(raw)
    except ValidationError as exc:
        logger.debug("Page %s property %r failed validation: %s", page.id, name, exc.errors()[:1])
        return None


def join_rich_text(runs: Optional[List[RichText]]) -> str:
    return "".join(run.plain_text or "" for run in runs or [])


def _first_plain_text(runs: Optional[List[RichText]]) -> str:
    if not runs:
        return ""
    return runs[0].plain_text or ""


def _title(prop: Optional[PageProperty]) -> str:
    return (_first_plain_text(prop.title) if prop else "") or DEFAULT_TITLE


def _category(prop: Optional[PageProperty]) -> str:
    if prop and prop.select and prop.select.name:
        return prop.select.name
    return DEFAULT_CATEGORY


def _date(prop: Optional[PageProperty]) -> str:
    if prop and prop.date and prop.date.start:
        return prop.date.start
    return ""


def _summary(prop: Optional[PageProperty]) -> str:
    return _first_plain_text(prop.rich_text) if prop else ""


def _thumbnail(prop: Optional[PageProperty], default: str) -> str:
    if not prop or not prop.files:
        return default
    first = prop.files[0]
    if first.file and first.file.url:
        return first.file.url
    if first.external and first.external.url:
        return first.external.url
    return default


def summary_from_page(page: NotionPage, names: PropertyNames) -> ArticleSummary:
    return ArticleSummary(
        id=page.id,
        title=_title(_property(page, names.title)),
        category=_category(_property(page, names.category)),
        date=_date(_property(page, names.date)),
        summary=_summary(_property(page, names.summary)),
        thumbnail=_thumbnail(_property(page, names.thumbnail), PLACEHOLDER_THUMBNAIL),
    )


def detail_from_page(page: NotionPage, names: PropertyNames) -> ArticleDetail:
    return ArticleDetail(
        title=_title(_property(page, names.title)),
        category=_category(_property(page, names.category)),
        date=_date(_property(page, names.date)),
        thumbnail=_thumbnail(_property(page, names.thumbnail), ""),
    )


def _image_url(payload: BlockPayload) -> Optional[str]:
    source = payload.external if payload.type == "external" else payload.file
    return source.url if source and source.url else None


def block_from_payload(raw: Any) -> ContentBlock:
    """
    Reduce one raw block to its type, text and url. Anything that does not
    validate becomes an OTHER block so the renderer skips it.
    """
    if not isinstance(raw, dict):
        return ContentBlock(id="", type=BlockType.OTHER)
    block_id = str(raw.get("id") or "")
    try:
        block = NotionBlock.model_validate(raw)
    except ValidationError as exc:
        logger.debug("Block %s failed validation: %s", block_id, exc.errors()[:1])
        return ContentBlock(id=block_id, type=BlockType.OTHER)

    block_type = BlockType.from_tag(block.type)
    payload = block.payload()
    if block_type in TEXT_BLOCK_TYPES:
        text = join_rich_text(payload.rich_text) if payload else ""
        return ContentBlock(id=block.id, type=block_type, text=text)
    if block_type is BlockType.IMAGE:
        url = _image_url(payload) if payload else None
        return ContentBlock(id=block.id, type=block_type, url=url)
    if block_type in LINK_BLOCK_TYPES:
        url = payload.url if payload and payload.url else None
        return ContentBlock(id=block.id, type=block_type, url=url)
    return ContentBlock(id=block.id, type=BlockType.OTHER)
