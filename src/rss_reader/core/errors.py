"""Exceptions raised by the fetch and feed layers."""


class RssReaderError(Exception):
    """Base class for errors surfaced to tool and CLI callers."""


class FetchError(RssReaderError):
    """The URL could not be fetched or returned a non-success status."""


class FeedError(RssReaderError):
    """The fetched document could not be parsed as a feed."""
