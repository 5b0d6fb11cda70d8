from __future__ import annotations


class SearchError(Exception):
    """Base class for every error raised by fuzzysearch."""


class InvalidInput(SearchError, ValueError):
    """
    Raised by the call that received bad configuration: a non-text search term,
    a data collection that is not made of records, a malformed field set, or an
    out-of-range limit/offset. Nothing is deferred to execute().
    """
