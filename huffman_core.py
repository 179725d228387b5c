# filename: huffman_core.py

import heapq
import itertools
import logging
from collections import Counter

from huffman_errors import (
    EmptyFrequencyTableError,
    MissingEofMarkerError,
    TruncatedBodyError,
)

logger = logging.getLogger(__name__)

# One past the largest byte value, so it never collides with a byte symbol
EOF_SYMBOL = 256


class HuffmanNode:
    def __init__(self, symbol, weight, left=None, right=None):
        self.symbol = symbol
        self.weight = weight
        self.left = left
        self.right = right

    @property
    def is_leaf(self):
        return self.left is None and self.right is None

    def __repr__(self):
        if self.is_leaf:
            return f"HuffmanNode(symbol={self.symbol!r}, weight={self.weight})"
        return f"HuffmanNode(weight={self.weight}, left={self.left!r}, right={self.right!r})"


class HuffmanLogic:
    def count_frequencies(self, symbols):
        """Return (symbol, count) pairs in first-occurrence order."""
        # Counter keeps insertion order, which is the order the header replays
        return list(Counter(symbols).items())

    def build_tree(self, frequencies):
        """Merge the two lightest nodes until a single root is left.

        Heap entries are (weight, sequence, node). The sequence number grows
        with every push, so nodes of equal weight leave the heap in the order
        they entered it. Encoder and decoder depend on this to build the same
        tree from the same frequency table.
        """
        if not frequencies:
            raise EmptyFrequencyTableError("cannot build a tree from an empty frequency table")

        sequence = itertools.count()
        priority_queue = [
            (weight, next(sequence), HuffmanNode(symbol, weight))
            for symbol, weight in frequencies
        ]
        heapq.heapify(priority_queue)

        while len(priority_queue) > 1:
            _, _, first = heapq.heappop(priority_queue)
            _, _, second = heapq.heappop(priority_queue)
            merged = HuffmanNode(None, first.weight + second.weight, first, second)
            heapq.heappush(priority_queue, (merged.weight, next(sequence), merged))

        root = priority_queue[0][2]
        logger.debug("built tree of weight %d from %d symbols", root.weight, len(frequencies))
        return root

    def contains(self, node, symbol):
        if node.is_leaf:
            return node.symbol == symbol
        return self.contains(node.left, symbol) or self.contains(node.right, symbol)

    def code_for(self, node, symbol):
        """Path from node to the leaf holding symbol, '0' for left and '1' for right."""
        if node.is_leaf:
            return ""
        if self.contains(node.left, symbol):
            return "0" + self.code_for(node.left, symbol)
        return "1" + self.code_for(node.right, symbol)

    def generate_codes(self, root):
        # A lone leaf has no path to describe; give it one bit so that every
        # occurrence still takes up room in the body.
        if root.is_leaf:
            return {root.symbol: "0"}

        codes = {}
        stack = [(root, "")]
        while stack:
            node, code = stack.pop()
            if node.is_leaf:
                codes[node.symbol] = code
                continue
            stack.append((node.right, code + "1"))
            stack.append((node.left, code + "0"))
        return codes

    def decode_symbols(self, bits, root, eof=EOF_SYMBOL):
        """Walk the tree over bits and return the symbols read before eof."""
        symbols = []
        position = 0
        total = len(bits)

        while True:
            if position >= total:
                raise MissingEofMarkerError(
                    f"bit stream ended after {len(symbols)} symbols without an end marker"
                )
            node = root
            if node.is_leaf:
                position += 1
            while not node.is_leaf:
                if position >= total:
                    raise TruncatedBodyError(f"bit stream ended inside a code at bit {position}")
                node = node.left if bits[position] == "0" else node.right
                position += 1

            if node.symbol == eof:
                return symbols
            symbols.append(node.symbol)
