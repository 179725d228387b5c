# filename: huffman_bits.py

import math

from huffman_errors import MalformedBodyError, TruncatedBodyError

# One bit narrower than a 16-bit word, so every group fits with the top bit clear
WORD_BITS = 15
WORD_BYTES = 2


def packed_size(bit_length):
    """Number of body bytes needed for bit_length bits."""
    return WORD_BYTES * math.ceil(bit_length / WORD_BITS)


def pack_bits(bits):
    """Pack a '0'/'1' string into big-endian 16-bit words of 15 bits each.

    The last group is padded on the right with '0' bits.
    """
    b = bytearray()
    for i in range(0, len(bits), WORD_BITS):
        group = bits[i:i + WORD_BITS].ljust(WORD_BITS, "0")
        b += int(group, 2).to_bytes(WORD_BYTES, "big")
    return bytes(b)


def unpack_bits(data):
    """Inverse of pack_bits, padding bits included."""
    if len(data) % WORD_BYTES != 0:
        raise TruncatedBodyError(f"body of {len(data)} bytes is not a whole number of words")

    groups = []
    for i in range(0, len(data), WORD_BYTES):
        word = int.from_bytes(data[i:i + WORD_BYTES], "big")
        if word >> WORD_BITS:
            raise MalformedBodyError(f"word {word:#06x} at body offset {i} has its top bit set")
        groups.append(format(word, f"0{WORD_BITS}b"))
    return "".join(groups)
