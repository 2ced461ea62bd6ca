"""
Background street search: build the query URL, fetch it, decode the places.

Every call gets its own thread and exactly one of the two callbacks runs on
that thread when the pipeline ends. The HTTP status is informational only;
the body is decoded whatever the status, and only exceptions mean failure.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future
from typing import Callable, List, Mapping, Optional

import requests

from domain.models import DownloadOutcome, FetchResult, Place
from services.errors import PlaceDecodeError, QueryEncodingError
from services.http_fetcher import build_default_headers, fetch as http_fetch
from services.place_decoder import decode_places
from services.query_builder import build_search_url
from settings import Settings, settings as default_settings

logger = logging.getLogger(__name__)

THREAD_NAME = "search-address"

OnDownload = Callable[[List[Place]], None]
OnError = Callable[[], None]
Fetch = Callable[[str, Mapping[str, str]], FetchResult]


def _failure_kind(exc: BaseException) -> str:
    if isinstance(exc, QueryEncodingError):
        return "encoding"
    if isinstance(exc, requests.RequestException):
        return "transport"
    if isinstance(exc, PlaceDecodeError):
        return "parse"
    return "unexpected"


def run_search(street: str, settings: Settings, fetch: Fetch) -> List[Place]:
    """Run the three pipeline stages in order on the current thread."""
    url = build_search_url(street, settings)
    result = fetch(url, build_default_headers(settings))
    if not result.ok:
        logger.debug("search for %r returned status %s; decoding body anyway", street, result.status)
    return decode_places(result.text())


def _deliver(callback: Callable[..., None], *args) -> None:
    try:
        callback(*args)
    except Exception:
        logger.exception("search callback %r raised", callback)


def _search_worker(
    street: str,
    on_download: OnDownload,
    on_error: OnError,
    settings: Settings,
    fetch: Fetch,
    future: Future[DownloadOutcome],
) -> None:
    try:
        places = run_search(street, settings, fetch)
    except Exception as exc:
        logger.warning("search for %r failed (%s): %s", street, _failure_kind(exc), exc)
        _deliver(on_error)
        future.set_result(DownloadOutcome.failure())
        return
    _deliver(on_download, places)
    future.set_result(DownloadOutcome.success(places))


def search_addresses(
    street: str,
    on_download: OnDownload,
    on_error: OnError,
    *,
    settings: Optional[Settings] = None,
    fetch: Optional[Fetch] = None,
) -> Future[DownloadOutcome]:
    """
    Start a search in a new thread and return immediately.

    The returned future is already running, so it cannot be cancelled. It
    resolves to a DownloadOutcome once the callback has returned.
    """
    future: Future[DownloadOutcome] = Future()
    future.set_running_or_notify_cancel()
    worker = threading.Thread(
        target=_search_worker,
        name=THREAD_NAME,
        args=(street, on_download, on_error, settings or default_settings, fetch or http_fetch, future),
    )
    worker.start()
    return future
