"""
Centralised settings for the blog frontend (env-first, code-light).

Secrets and identifiers come from the environment; the Notion property
names, navigation categories, image allow-list and contact address can additionally be
overridden from the optional YAML file (see `blog.config_loader`).
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from blog.config_loader import load_site_config

logger = logging.getLogger(__name__)

DEFAULT_CATEGORIES = ["Travel", "Books", "Investment"]
DEFAULT_IMAGE_HOSTS = [
    "www.notion.so",
    "images.unsplash.com",
    "s3.us-west-2.amazonaws.com",
    "prod-files-secure.s3.us-west-2.amazonaws.com",
    "via.placeholder.com",
]
DEFAULT_INSTAGRAM_ID = "your-account"
DEFAULT_CONTACT_EMAIL = "your@email.com"


@dataclass
class PropertyNames:
    """Column names of the Notion database backing the blog."""

    title: str = "제목"
    category: str = "카테고리"
    date: str = "작성일"
    summary: str = "요약"
    thumbnail: str = "썸네일"


@dataclass
class BlogSettings:
    notion_api_key: Optional[str]
    notion_database_id: Optional[str]
    notion_version: str
    notion_api_base: str
    request_timeout: int
    max_retries: int
    instagram_id: str
    contact_email: str
    categories: List[str]
    image_hosts: List[str]
    properties: PropertyNames = field(default_factory=PropertyNames)

    @property
    def instagram_url(self) -> str:
        return f"https://instagram.com/{self.instagram_id}"


def _int_from_env(key: str, default: int, minimum: int = 1) -> int:
    raw = os.getenv(key)
    if raw is None or str(raw).strip() == "":
        return default
    try:
        value = int(raw)
        return value if value >= minimum else default
    except Exception:
        logger.warning("Invalid int value for %s=%s; using default %s", key, raw, default)
        return default


def _parse_list(raw: Any, default: List[str]) -> List[str]:
    if raw is None:
        return list(default)
    tokens = raw.split(",") if isinstance(raw, str) else raw
    if not isinstance(tokens, list):
        logger.warning("Expected a list, got %r; using defaults.", raw)
        return list(default)
    cleaned = [str(token).strip() for token in tokens if str(token).strip()]
    return cleaned or list(default)


def _property_names(overrides: Dict[str, Any]) -> PropertyNames:
    names = PropertyNames()
    for key, value in (overrides or {}).items():
        if not hasattr(names, key):
            logger.warning("Unknown property mapping '%s' in site config; skipping.", key)
            continue
        if isinstance(value, str) and value.strip():
            setattr(names, key, value.strip())
    return names


def load_settings(config_path: Optional[Path] = None) -> BlogSettings:
    path_env = os.getenv("BLOG_CONFIG_PATH")
    resolved_path = config_path or (Path(path_env) if path_env else Path("blog_config.yaml"))
    site_config = load_site_config(resolved_path)

    instagram_id = (
        os.getenv("INSTAGRAM_ID")
        or os.getenv("NEXT_PUBLIC_INSTAGRAM_ID")
        or site_config.get("instagram_id")
        or DEFAULT_INSTAGRAM_ID
    )
    categories_raw = os.getenv("BLOG_CATEGORIES") or site_config.get("categories")

    return BlogSettings(
        notion_api_key=os.getenv("NOTION_API_KEY") or None,
        notion_database_id=os.getenv("NOTION_DATABASE_ID") or None,
        notion_version=os.getenv("NOTION_VERSION", "2022-06-28"),
        notion_api_base=os.getenv("NOTION_API_BASE", "https://api.notion.com/v1").rstrip("/"),
        request_timeout=_int_from_env("NOTION_TIMEOUT", 15),
        max_retries=_int_from_env("NOTION_MAX_RETRIES", 0, minimum=0),
        instagram_id=str(instagram_id),
        contact_email=os.getenv("CONTACT_EMAIL") or site_config.get("contact_email") or DEFAULT_CONTACT_EMAIL,
        categories=_parse_list(categories_raw, DEFAULT_CATEGORIES),
        image_hosts=_parse_list(site_config.get("image_hosts"), DEFAULT_IMAGE_HOSTS),
        properties=_property_names(site_config.get("properties") or {}),
    )
