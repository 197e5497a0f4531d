from __future__ import annotations


class LookupFailure(Exception):
    """Base class for failures that abort a lookup run."""


class FetchError(LookupFailure):
    """The proposals feed could not be retrieved."""


class DecodeError(LookupFailure):
    """The proposals feed payload is malformed or has an unexpected shape."""
