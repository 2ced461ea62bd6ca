from dataclasses import dataclass
from typing import Tuple

# Fixed configuration for the address lookup. Built once and passed around explicitly.

NOMINATIM_SEARCH_URL = "http://nominatim.openstreetmap.org/search"
USER_AGENT = "street-geocoder/0.1"

# (header name, value parts); parts are joined with HEADER_SEPARATOR
DEFAULT_HEADER_FIELDS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("Content-Type", ("application/json", "charset=utf-8")),
    ("User-Agent", (USER_AGENT,)),
)


@dataclass(frozen=True)
class Settings:
    SEARCH_URL: str = NOMINATIM_SEARCH_URL
    RESPONSE_FORMAT: str = "json"
    CITY: str = "СПб"
    HEADER_SEPARATOR: str = ";"
    DEFAULT_HEADER_FIELDS: Tuple[Tuple[str, Tuple[str, ...]], ...] = DEFAULT_HEADER_FIELDS


settings = Settings()
