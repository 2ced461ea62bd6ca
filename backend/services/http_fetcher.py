"""
Single-shot HTTP GET returning the fully buffered body.

No retries and no timeout of our own: transport errors from ``requests``
propagate to the caller as-is.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Mapping, Optional

import requests

from domain.models import FetchResult
from settings import Settings, settings as default_settings

logger = logging.getLogger(__name__)


def join_header_values(values: Iterable[object], separator: str) -> str:
    """Join header value parts, e.g. ``("application/json", "charset=utf-8")``."""
    return separator.join(str(v) for v in values)


def build_default_headers(settings: Optional[Settings] = None) -> Dict[str, str]:
    cfg = settings or default_settings
    return {
        name: join_header_values(parts, cfg.HEADER_SEPARATOR)
        for name, parts in cfg.DEFAULT_HEADER_FIELDS
    }


def fetch(url: str, headers: Optional[Mapping[str, str]] = None) -> FetchResult:
    """GET ``url`` and return status plus the complete response body."""
    request_headers = dict(headers) if headers is not None else build_default_headers()
    logger.debug("GET %s", url)
    resp = requests.get(url, headers=request_headers)
    try:
        # content is the error body for >= 400 and the payload otherwise
        body = resp.content
    finally:
        resp.close()
    result = FetchResult.from_status(resp.status_code, body)
    logger.debug("GET %s -> %s (%d bytes)", url, result.status, len(result.body))
    return result
