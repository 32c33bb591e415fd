"""
HTTP helper for the Notion API: bearer auth, version header, no-store.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests
from urllib3.util.retry import Retry

from utils.security import redact_secrets

logger = logging.getLogger(__name__)


class HttpClient:
    """
    Thin wrapper over requests.Session. Non-success responses and transport
    errors come back as None so callers can fall back to their defaults.
    """

    def __init__(
        self,
        api_key: Optional[str],
        notion_version: str = "2022-06-28",
        timeout: int = 15,
        max_retries: int = 0,
        user_agent: str | None = None,
    ):
        self.timeout = timeout
        self.session = requests.Session()
        retry = Retry(
            total=max_retries,
            backoff_factor=0.6,
            status_forcelist=[429, 500, 502, 503, 504],
            allowed_methods=["GET", "POST"],
            raise_on_status=False,
        )
        adapter = requests.adapters.HTTPAdapter(max_retries=retry)
        self.session.mount("http://", adapter)
        self.session.mount("https://", adapter)
        headers = {
            "User-Agent": user_agent or "Travesia-Blog/1.0",
            "Accept": "application/json",
            "Notion-Version": notion_version,
            "Cache-Control": "no-store",
        }
        if api_key:
            headers["Authorization"] = f"Bearer {api_key}"
        self.session.headers.update(headers)

    def get(self, url: str, params: Optional[Dict[str, Any]] = None) -> Optional[Dict[str, Any]]:
        return self._request("GET", url, params=params)

    def post(self, url: str, payload: Optional[Dict[str, Any]] = None) -> Optional[Dict[str, Any]]:
        return self._request("POST", url, json=payload or {})

    def _request(self, method: str, url: str, **kwargs: Any) -> Optional[Dict[str, Any]]:
        try:
            resp = self.session.request(method, url, timeout=self.timeout, **kwargs)
            if resp.ok:
                data = resp.json()
                if isinstance(data, dict):
                    return data
                logger.warning("HTTP %s %s returned a non-object body", method, redact_secrets(url))
                return None
            logger.warning(
                "HTTP %s failed %s %s", method, resp.status_code, redact_secrets(resp.text[:200])
            )
        except Exception as exc:
            logger.error("HTTP %s exception %s", method, redact_secrets(str(exc)))
        return None
