"""Exception types raised by the pigment color engine.

Every error derives from :class:`PigmentError` so that callers at the UI or
CLI boundary can catch the whole family at once. The concrete classes also
derive from :class:`ValueError` because they all describe a bad input value.
"""


class PigmentError(Exception):
    """Base class for all pigment errors."""


class ParseError(PigmentError, ValueError):
    """A color string could not be parsed (malformed hex, unknown format)."""


class InvalidAlgorithm(PigmentError, ValueError):
    """An unknown shade-generation algorithm tag was requested."""


class InvalidHarmony(PigmentError, ValueError):
    """An unknown harmony name was requested."""


class InvalidNamingPattern(PigmentError, ValueError):
    """An unknown shade naming pattern was requested."""


__all__ = [
    "PigmentError",
    "ParseError",
    "InvalidAlgorithm",
    "InvalidHarmony",
    "InvalidNamingPattern",
]
