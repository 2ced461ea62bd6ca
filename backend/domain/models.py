"""
Domain models for the street search utility.
Plain immutable values shared by the services and the CLI.
"""
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

# Responses with a status code at or above this are failures.
ERROR_STATUS_THRESHOLD = 400


@dataclass(frozen=True)
class Place:
    """A single search hit from Nominatim."""
    display_name: str = ""
    osm_type: str = ""
    type: str = ""

    def __str__(self) -> str:
        return (
            f"{{display_name: {self.display_name}"
            f", osm_type: {self.osm_type}"
            f", type: {self.type}}}"
        )


@dataclass(frozen=True)
class FetchResult:
    """
    Raw outcome of one HTTP GET.

    The body holds the error content for failed responses and the main
    content otherwise, so callers can always read text from it.
    """
    ok: bool
    status: int
    body: bytes = b""

    @classmethod
    def from_status(cls, status: int, body: Optional[bytes]) -> "FetchResult":
        return cls(ok=status < ERROR_STATUS_THRESHOLD, status=status, body=body or b"")

    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


@dataclass(frozen=True)
class DownloadOutcome:
    """Result of one search: either the decoded places or a bare failure."""
    ok: bool
    places: Tuple[Place, ...] = ()

    @classmethod
    def success(cls, places: Sequence[Place]) -> "DownloadOutcome":
        return cls(ok=True, places=tuple(places))

    @classmethod
    def failure(cls) -> "DownloadOutcome":
        return cls(ok=False)
