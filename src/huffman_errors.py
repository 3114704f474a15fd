# filename: huffman_errors.py


class HuffmanError(Exception):
    """Base class for every error raised by the Huffman modules."""


class InvalidInputError(HuffmanError, ValueError):
    """The caller broke an input contract."""


class InputTooLongError(InvalidInputError):
    def __init__(self, length, limit):
        self.length = length
        self.limit = limit
        super().__init__(f"input has {length} symbols, limit is {limit}")


class DuplicateSymbolError(InvalidInputError):
    def __init__(self, symbol):
        self.symbol = symbol
        super().__init__(f"alphabet is not duplicate-free: {symbol!r} repeats")


class SymbolNotInTreeError(InvalidInputError):
    def __init__(self, symbol, position):
        self.symbol = symbol
        self.position = position
        super().__init__(f"symbol {symbol!r} at position {position} is not in the tree")


class MalformedCodeError(InvalidInputError):
    def __init__(self, message, position):
        self.position = position
        super().__init__(f"{message} (code position {position})")
