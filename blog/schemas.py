"""
Pydantic models for the raw Notion payloads we read.
Every field is optional: the upstream schema is owned by Notion and by whoever
edits the database, so records routinely omit properties.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, field_validator


class RichText(BaseModel):
    plain_text: Optional[str] = None


class LinkTarget(BaseModel):
    url: Optional[str] = None


class FileObject(BaseModel):
    name: Optional[str] = None
    type: Optional[str] = None
    file: Optional[LinkTarget] = None
    external: Optional[LinkTarget] = None


class SelectOption(BaseModel):
    name: Optional[str] = None


class DateValue(BaseModel):
    start: Optional[str] = None
    end: Optional[str] = None


class PageProperty(BaseModel):
    type: Optional[str] = None
    title: Optional[List[RichText]] = None
    rich_text: Optional[List[RichText]] = None
    select: Optional[SelectOption] = None
    date: Optional[DateValue] = None
    files: Optional[List[FileObject]] = None


class NotionPage(BaseModel):
    id: str = ""
    properties: Dict[str, Any] = {}

    @field_validator("properties", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        return value or {}


class BlockPayload(BaseModel):
    """Union of the per-type payload fields we care about."""

    type: Optional[str] = None
    rich_text: Optional[List[RichText]] = None
    url: Optional[str] = None
    file: Optional[LinkTarget] = None
    external: Optional[LinkTarget] = None


class NotionBlock(BaseModel):
    id: str = ""
    type: Optional[str] = None
    paragraph: Optional[BlockPayload] = None
    heading_1: Optional[BlockPayload] = None
    heading_2: Optional[BlockPayload] = None
    heading_3: Optional[BlockPayload] = None
    image: Optional[BlockPayload] = None
    embed: Optional[BlockPayload] = None
    bookmark: Optional[BlockPayload] = None
    link_preview: Optional[BlockPayload] = None

    def payload(self) -> Optional[BlockPayload]:
        if not self.type:
            return None
        value = getattr(self, self.type, None)
        return value if isinstance(value, BlockPayload) else None


class ListResponse(BaseModel):
    results: List[Any] = []
    has_more: Optional[bool] = False
    next_cursor: Optional[str] = None

    @field_validator("results", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        return value or []
