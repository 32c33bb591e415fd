"""
Status helpers for the health endpoint. Only reports whether secrets are
configured, never their values.
"""
from __future__ import annotations

from dataclasses import asdict
from datetime import datetime, timezone
from typing import Any, Dict

from blog.models import DEFAULT_PAGE_SIZE
from blog.settings import BlogSettings
from utils.security import is_configured_key


def build_status(settings: BlogSettings) -> Dict[str, Any]:
    api_key_ready = is_configured_key(settings.notion_api_key or "")
    database_ready = is_configured_key(settings.notion_database_id or "")
    return {
        "generated_at": datetime.now(timezone.utc).isoformat(),
        "notion": {
            "api_key_configured": api_key_ready,
            "database_configured": database_ready,
            "ready": api_key_ready and database_ready,
            "version": settings.notion_version,
            "timeout_seconds": settings.request_timeout,
            "max_retries": settings.max_retries,
        },
        "site": {
            "categories": list(settings.categories),
            "page_size": DEFAULT_PAGE_SIZE,
            "image_hosts": list(settings.image_hosts),
            "properties": asdict(settings.properties),
        },
    }
