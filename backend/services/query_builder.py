"""Build Nominatim search URLs for a street name."""

from __future__ import annotations

from typing import Optional
from urllib.parse import quote_plus

from services.errors import QueryEncodingError
from settings import Settings, settings as default_settings

QUERY_ENCODING = "utf-8"


def _encode(value: str) -> str:
    if not isinstance(value, str):
        raise QueryEncodingError(f"expected text, got {type(value).__name__}")
    try:
        return quote_plus(value, encoding=QUERY_ENCODING, errors="strict")
    except (UnicodeEncodeError, LookupError) as exc:
        raise QueryEncodingError(str(exc)) from exc


def build_search_url(street: str, settings: Optional[Settings] = None) -> str:
    """
    Return the fully encoded search URL for ``street`` in the configured city.

    Spaces become ``+`` and non-ASCII text is sent as UTF-8 percent escapes.
    """
    cfg = settings or default_settings
    return (
        f"{cfg.SEARCH_URL}?street={_encode(street)}"
        f"&format={_encode(cfg.RESPONSE_FORMAT)}"
        f"&city={_encode(cfg.CITY)}"
    )
