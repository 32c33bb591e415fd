import re

# Notion integration tokens: legacy "secret_..." and current "ntn_..." formats
NOTION_TOKEN_RE = re.compile(r"\b(?:secret|ntn)_[A-Za-z0-9]{20,}")
BEARER_RE = re.compile(r"(?i)Bearer\s+[A-Za-z0-9._\-]+")
QUERY_SECRET_RE = re.compile(r"(?i)(api[_-]?key|key|token|secret)=([^&\s]+)")


def redact_secrets(text: str) -> str:
    """Redact Notion tokens and bearer credentials from logs and error strings."""
    if not isinstance(text, str):
        return text

    redacted = NOTION_TOKEN_RE.sub("***REDACTED***", text)
    redacted = BEARER_RE.sub("Bearer ***REDACTED***", redacted)
    redacted = QUERY_SECRET_RE.sub(r"\1=***REDACTED***", redacted)
    return redacted


def is_configured_key(value: str) -> bool:
    """Return True if an env var-like key is configured (not empty or placeholder)."""
    if not value:
        return False
    s = value.strip()
    if not s:
        return False
    return ('YOUR_' not in s) and ('your_' not in s)
