# filename: huffman_service.py

from huffman_core import LEFT, RIGHT, HuffmanLogic
from huffman_errors import MalformedCodeError, SymbolNotInTreeError


class HuffmanService:
    def __init__(self, logic=None):
        self.logic = logic if logic is not None else HuffmanLogic()

    def build_tree(self, data):
        return self.logic.build_tree(data)

    def encode(self, tree, data):
        codes = self.logic.generate_codes(tree)
        out = []
        for position, char in enumerate(data):
            code = codes.get(char)
            if code is None:
                raise SymbolNotInTreeError(char, position)
            out.append(code)
        return "".join(out)

    def decode(self, tree, code):
        if tree is None:
            if code:
                raise MalformedCodeError("empty tree cannot decode directions", 0)
            return ""

        decoded = []
        # A lone leaf consumes one LEFT per symbol without stepping to a child
        if tree.is_leaf:
            for position, direction in enumerate(code):
                if direction != LEFT:
                    raise MalformedCodeError(f"unexpected direction {direction!r}", position)
                decoded.append(tree.symbol)
            return "".join(decoded)

        node = tree
        start = 0
        for position, direction in enumerate(code):
            if direction == LEFT:
                node = node.left
            elif direction == RIGHT:
                node = node.right
            else:
                raise MalformedCodeError(f"unknown direction {direction!r}", position)
            if node.is_leaf:
                decoded.append(node.symbol)
                node = tree
                start = position + 1

        if node is not tree:
            raise MalformedCodeError("code ends in the middle of a symbol", start)
        return "".join(decoded)

    def compress(self, data):
        tree = self.build_tree(data)
        return tree, self.encode(tree, data)

    def decompress(self, tree, code):
        return self.decode(tree, code)

    def code_length(self, tree, data):
        codes = self.logic.generate_codes(tree)
        total = 0
        for position, char in enumerate(data):
            if char not in codes:
                raise SymbolNotInTreeError(char, position)
            total += len(codes[char])
        return total


_default = HuffmanService()


def build_tree(data):
    return _default.build_tree(data)


def encode(tree, data):
    return _default.encode(tree, data)


def decode(tree, code):
    return _default.decode(tree, code)
