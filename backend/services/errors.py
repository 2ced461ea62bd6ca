"""Errors raised by the search pipeline.

Transport failures are not wrapped: they surface as ``requests.RequestException``.
"""


class QueryEncodingError(ValueError):
    """The street text could not be encoded into a query URL."""


class PlaceDecodeError(ValueError):
    """The response body is not a JSON array of place objects."""
