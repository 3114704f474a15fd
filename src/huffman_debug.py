# filename: huffman_debug.py

import sys

from huffman_core import HuffmanLogic


def _tree_lines(tree, lines):
    stack = [(tree, 0)]
    while stack:
        node, level = stack.pop()
        indent = "  " * (level + 1)
        if node.is_leaf:
            lines.append(f"{indent}Leaf: '{node.symbol}' with count {node.count}")
        else:
            lines.append(f"{indent}Node: accumulated count {node.count}")
            stack.append((node.right, level + 1))
            stack.append((node.left, level + 1))


def format_huffman_tree(tree):
    lines = ["Huffman tree:"]
    if tree is not None:
        _tree_lines(tree, lines)
    return "\n".join(lines) + "\n"


def format_huffman_tree_codes(tree):
    lines = ["Huffman tree codes:"]
    for symbol, code in HuffmanLogic().generate_codes(tree).items():
        lines.append(f"'{symbol}' has code \"{code}\"")
    return "\n".join(lines) + "\n"


def format_huffman_tree_list(forest):
    parts = ["Huffman tree list:\n"]
    for tree in forest:
        parts.append(format_huffman_tree(tree))
    return "".join(parts)


def print_huffman_tree(tree, file=None):
    (file or sys.stdout).write(format_huffman_tree(tree))


def print_huffman_tree_codes(tree, file=None):
    (file or sys.stdout).write(format_huffman_tree_codes(tree))


def print_huffman_tree_list(forest, file=None):
    (file or sys.stdout).write(format_huffman_tree_list(forest))
