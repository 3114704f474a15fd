#!/usr/bin/env python3
"""
Huffman tree driver.

Builds a Huffman tree from a string, prints the tree and its codes, then
encodes the string and decodes it back.

Run with:
    huffman-tree aabbbcccc
    echo -n "hello world" | huffman-tree --stdin --forest
"""
import argparse
import sys

from huffman_core import MAX_STRING_LENGTH, HuffmanLogic
from huffman_debug import print_huffman_tree, print_huffman_tree_codes, print_huffman_tree_list
from huffman_errors import InvalidInputError
from huffman_service import HuffmanService


def build_parser():
    parser = argparse.ArgumentParser(description="Build a Huffman tree and round-trip a string through it")
    parser.add_argument("text", nargs="?", default=None, help="Input string")
    parser.add_argument("--stdin", action="store_true", help="Read the input string from stdin")
    parser.add_argument("--no-tree", action="store_true", help="Do not print the tree")
    parser.add_argument("--no-codes", action="store_true", help="Do not print the code table")
    parser.add_argument("--forest", action="store_true", help="Print the initial forest before reduction")
    parser.add_argument(
        "--max-length",
        type=int,
        default=MAX_STRING_LENGTH,
        help=f"Input limit; at most N - 1 symbols are accepted (default: {MAX_STRING_LENGTH})"
    )
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.stdin:
        text = sys.stdin.read()
    elif args.text is not None:
        text = args.text
    else:
        parser.error("give TEXT or --stdin")

    service = HuffmanService(HuffmanLogic(max_length=args.max_length))

    try:
        if args.forest:
            print_huffman_tree_list(service.logic.build_forest(text))
        tree, code = service.compress(text)
        decoded = service.decompress(tree, code)
    except InvalidInputError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    if not args.no_tree:
        print_huffman_tree(tree)
    if not args.no_codes:
        print_huffman_tree_codes(tree)

    print(f"Encoded: {code}")
    print(f"Decoded: {decoded}")
    print(f"Directions: {service.code_length(tree, text)} for {len(text)} symbols")

    ok = decoded == text
    print(f"Round trip: {'OK' if ok else 'MISMATCH'}")
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
