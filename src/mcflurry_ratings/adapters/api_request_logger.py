"""Utility for logging backend requests when MCR_LOG_REQUESTS is enabled."""

import json
import logging
import os
from typing import Any

logger = logging.getLogger(__name__)

SENSITIVE_HEADERS = frozenset({"apikey", "authorization", "cookie"})


def should_log_requests() -> bool:
    """Check if request logging is enabled via MCR_LOG_REQUESTS environment variable."""
    return os.getenv("MCR_LOG_REQUESTS", "").lower() == "true"


def _build_url_with_params(url: str, params: dict[str, Any] | None) -> str:
    if not params:
        return url
    query = "&".join(f"{key}={value}" for key, value in sorted(params.items()))
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{query}"


def _redact_headers(headers: dict[str, str]) -> dict[str, str]:
    """Replace credentials with a placeholder."""
    return {
        name: "***REDACTED***" if name.lower() in SENSITIVE_HEADERS else value
        for name, value in headers.items()
    }


def _format_payload(payload: Any) -> str:
    try:
        return json.dumps(payload, indent=2, ensure_ascii=False, default=str)
    except (TypeError, ValueError):
        return str(payload)


def log_api_request(
    method: str,
    url: str,
    params: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
    payload: Any = None,
) -> None:
    """Log a backend request if MCR_LOG_REQUESTS is enabled.

    Args:
        method: HTTP method (GET, POST, etc.).
        url: Request URL.
        params: Query parameters (optional).
        headers: Request headers (optional, credentials are redacted).
        payload: Request body (optional).
    """
    if not should_log_requests():
        return

    lines = [f"{method} {_build_url_with_params(url, params)}"]
    if headers:
        lines.append(f"Headers: {json.dumps(_redact_headers(headers), indent=2)}")
    if payload is not None:
        lines.append(f"Payload: {_format_payload(payload)}")

    logger.info("API Request:\n" + "\n".join(lines))
