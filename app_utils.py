"""Utility functions for the Travesia web app."""
from __future__ import annotations

import logging
import os
from datetime import datetime, timezone
from typing import Iterable, Optional
from urllib.parse import urlparse

from blog.models import PLACEHOLDER_THUMBNAIL

logger = logging.getLogger("travesia")


def get_env(name: str, default: Optional[str] = None, required: bool = False) -> Optional[str]:
    """Get environment variable with optional validation.

    Args:
        name: Environment variable name.
        default: Default value if variable is not set.
        required: Whether the variable is required.

    Returns:
        The environment variable value or default.
    """
    env_value = os.getenv(name, default)
    if required and (not env_value or env_value.startswith("YOUR_")):
        logger.warning("Environment variable %s missing; pages will render their empty states", name)
        return None
    return env_value


def get_current_timestamp() -> str:
    """Get current UTC timestamp in ISO format.

    Returns:
        ISO formatted timestamp string.
    """
    return datetime.now(timezone.utc).isoformat()


def allowed_image_src(url: str, allowed_hosts: Iterable[str], fallback: str = PLACEHOLDER_THUMBNAIL) -> str:
    """Return `url` when it is an https URL on an allow-listed host, else `fallback`."""
    if not url:
        return fallback
    parsed = urlparse(url)
    if parsed.scheme == "https" and parsed.hostname in set(allowed_hosts):
        return url
    return fallback
