# filename: huffman_service.py

import logging

from huffman_bits import pack_bits, unpack_bits
from huffman_core import EOF_SYMBOL, HuffmanLogic
from huffman_errors import UnsupportedSymbolError
from huffman_header import decode_header, encode_header, is_storable

logger = logging.getLogger(__name__)


class HuffmanService:
    def __init__(self):
        self.logic = HuffmanLogic()

    def compress(self, text):
        """Compress text into a header followed by the packed body."""
        symbols = [ord(char) for char in text]
        for position, symbol in enumerate(symbols):
            if symbol == EOF_SYMBOL or not is_storable(symbol):
                raise UnsupportedSymbolError(
                    f"character {text[position]!r} at position {position} cannot be encoded"
                )
        symbols.append(EOF_SYMBOL)

        frequencies = self.logic.count_frequencies(symbols)
        tree = self.logic.build_tree(frequencies)
        codes = self.logic.generate_codes(tree)

        encoded_str = "".join([codes[symbol] for symbol in symbols])
        header = encode_header(frequencies)
        body = pack_bits(encoded_str)
        logger.debug(
            "compressed %d symbols: %d table entries, %d bits, %d body bytes",
            len(symbols), len(frequencies), len(encoded_str), len(body),
        )
        return header + body

    def decompress(self, data):
        """Rebuild the tree from the header and decode the body back to text."""
        frequencies, offset = decode_header(data)
        tree = self.logic.build_tree(frequencies)
        bits = unpack_bits(data[offset:])
        symbols = self.logic.decode_symbols(bits, tree)
        logger.debug("decompressed %d body bytes into %d symbols", len(data) - offset, len(symbols))
        return "".join(map(chr, symbols))


_service = HuffmanService()


def compress(text):
    return _service.compress(text)


def decompress(data):
    return _service.decompress(data)
