# filename: huffman_core.py

import heapq
import itertools

from huffman_errors import (
    DuplicateSymbolError,
    HuffmanError,
    InputTooLongError,
    InvalidInputError,
)

MAX_STRING_LENGTH = 1024
MAX_CODE_LENGTH = MAX_STRING_LENGTH - 1

LEFT = "L"
RIGHT = "R"


class HuffmanNode:
    count = 0
    is_leaf = False


class Leaf(HuffmanNode):
    is_leaf = True

    def __init__(self, symbol, count):
        self.symbol = symbol
        self.count = count

    def __repr__(self):
        return f"Leaf({self.symbol!r}, {self.count})"


class Internal(HuffmanNode):
    def __init__(self, left, right):
        self.left = left
        self.right = right
        self.count = left.count + right.count

    def __repr__(self):
        return f"Internal(count={self.count})"


def contains(s, c):
    return c in s


def frequency(s, c):
    return s.count(c)


def nub(s, max_length=MAX_STRING_LENGTH):
    """Unique symbols of s in first-occurrence order.

    s may hold at most max_length - 1 symbols.
    """
    if len(s) > max_length - 1:
        raise InputTooLongError(len(s), max_length - 1)
    seen = []
    for c in s:
        if not contains(seen, c):
            seen.append(c)
    return "".join(seen)


def frequency_table(s, alphabet):
    """Occurrence count in s for each symbol of a duplicate-free alphabet."""
    table = {}
    for c in alphabet:
        if c in table:
            raise DuplicateSymbolError(c)
        table[c] = frequency(s, c)
    return table


class SortedForest:
    """Candidate trees ordered ascending by count.

    A node inserted with a count equal to existing entries is placed in
    front of them, so among equal counts the most recent insertion comes
    out first.
    """

    def __init__(self, nodes=()):
        self._heap = []
        self._seq = itertools.count()
        for node in nodes:
            self.insert(node)

    def insert(self, node):
        heapq.heappush(self._heap, (node.count, -next(self._seq), node))
        return self

    def pop(self):
        if not self._heap:
            raise HuffmanError("pop from an empty forest")
        return heapq.heappop(self._heap)[2]

    def __len__(self):
        return len(self._heap)

    def __iter__(self):
        return (entry[2] for entry in sorted(self._heap, key=lambda e: e[:2]))


def insert(forest, node):
    if forest is None:
        forest = SortedForest()
    return forest.insert(node)


def build_forest(s, alphabet):
    # Pre: alphabet is a duplicate-free version of s
    forest = SortedForest()
    for symbol, count in frequency_table(s, alphabet).items():
        if count == 0:
            raise InvalidInputError(f"alphabet symbol {symbol!r} does not occur in the input")
        forest.insert(Leaf(symbol, count))
    return forest


def reduce_forest(forest):
    if not len(forest):
        raise HuffmanError("cannot reduce an empty forest")
    while len(forest) > 1:
        left = forest.pop()
        right = forest.pop()
        forest.insert(Internal(left, right))
    return forest.pop()


class HuffmanLogic:
    def __init__(self, max_length=MAX_STRING_LENGTH):
        self.max_length = max_length

    def build_forest(self, data):
        return build_forest(data, nub(data, self.max_length))

    def build_tree(self, data):
        forest = self.build_forest(data)
        if not len(forest):
            return None
        return reduce_forest(forest)

    def generate_codes(self, node):
        """Map each leaf symbol to its path of LEFT/RIGHT letters.

        A lone leaf root gets the single-direction code LEFT.
        """
        codes = {}
        if node is None:
            return codes
        if node.is_leaf:
            codes[node.symbol] = LEFT
            return codes

        # right pushed first so the left subtree is visited first
        stack = [(node, "")]
        while stack:
            n, path = stack.pop()
            if n.is_leaf:
                codes[n.symbol] = path
                continue
            if len(path) >= MAX_CODE_LENGTH:
                raise HuffmanError(f"code longer than {MAX_CODE_LENGTH} directions")
            stack.append((n.right, path + RIGHT))
            stack.append((n.left, path + LEFT))
        return codes
