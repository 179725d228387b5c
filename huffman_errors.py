# filename: huffman_errors.py


class HuffmanError(ValueError):
    """Base class for every failure raised by the coder."""


class EmptyFrequencyTableError(HuffmanError):
    """A tree was requested from a frequency table with no entries."""


class UnsupportedSymbolError(HuffmanError):
    """The text holds the end marker or a character the header cannot store."""


class MalformedHeaderError(HuffmanError):
    """The header is short, lists an invalid symbol or has no end marker entry."""


class CorruptBodyError(HuffmanError):
    """The packed body cannot be decoded back to text."""


class TruncatedBodyError(CorruptBodyError):
    """The bits ran out inside a code, or the body is not whole words."""


class MissingEofMarkerError(CorruptBodyError):
    """The bits ran out without the end marker being read."""


class MalformedBodyError(CorruptBodyError):
    """A body word has its unused top bit set."""
