# filename: huffman_header.py
#
# Header layout, all fields big-endian:
#
#   | entry count (4 bytes)
#   | symbol 1 (2 bytes) | count 1 (4 bytes)
#   | symbol 2 (2 bytes) | count 2 (4 bytes)
#   ...
#
# Entries appear in the order the encoder built its tree from.

import struct

from huffman_core import EOF_SYMBOL
from huffman_errors import MalformedHeaderError

COUNT_FORMAT = ">I"
ENTRY_FORMAT = ">HI"
# Symbols are stored in the 2-byte field of ENTRY_FORMAT
MAX_SYMBOL = 0xFFFF
# UTF-16 surrogate halves are not characters on their own
SURROGATES = range(0xD800, 0xE000)
COUNT_SIZE = struct.calcsize(COUNT_FORMAT)
ENTRY_SIZE = struct.calcsize(ENTRY_FORMAT)


def is_storable(symbol):
    return symbol <= MAX_SYMBOL and symbol not in SURROGATES


def header_size(entries):
    return COUNT_SIZE + ENTRY_SIZE * entries


def encode_header(frequencies):
    out = bytearray(struct.pack(COUNT_FORMAT, len(frequencies)))
    for symbol, count in frequencies:
        out += struct.pack(ENTRY_FORMAT, symbol, count)
    return bytes(out)


def decode_header(data):
    """Read the frequency table from the start of data.

    Returns the table and the offset of the first byte after the header.
    """
    if len(data) < COUNT_SIZE:
        raise MalformedHeaderError(f"need {COUNT_SIZE} bytes for the entry count, got {len(data)}")

    (entries,) = struct.unpack_from(COUNT_FORMAT, data, 0)
    end = header_size(entries)
    if end > len(data):
        raise MalformedHeaderError(
            f"header declares {entries} entries ({end} bytes) but only {len(data)} bytes are available"
        )

    frequencies = [
        struct.unpack_from(ENTRY_FORMAT, data, COUNT_SIZE + i * ENTRY_SIZE)
        for i in range(entries)
    ]
    for symbol, _ in frequencies:
        if not is_storable(symbol):
            raise MalformedHeaderError(f"frequency table lists invalid symbol {symbol:#06x}")
    if not any(symbol == EOF_SYMBOL for symbol, _ in frequencies):
        raise MalformedHeaderError("frequency table has no end marker entry")
    return frequencies, end
