import io

import huffman_debug as hd
from huffman_core import HuffmanLogic, Internal, Leaf


EXAMPLE_TREE = (
	"Huffman tree:\n"
	"  Node: accumulated count 9\n"
	"    Leaf: 'c' with count 4\n"
	"    Node: accumulated count 5\n"
	"      Leaf: 'a' with count 2\n"
	"      Leaf: 'b' with count 3\n"
)

EXAMPLE_CODES = (
	"Huffman tree codes:\n"
	"'c' has code \"L\"\n"
	"'a' has code \"RL\"\n"
	"'b' has code \"RR\"\n"
)


def test_print_huffman_tree(capsys):
	hd.print_huffman_tree(HuffmanLogic().build_tree("aabbbcccc"))
	assert capsys.readouterr().out == EXAMPLE_TREE


def test_print_huffman_tree_codes(capsys):
	hd.print_huffman_tree_codes(HuffmanLogic().build_tree("aabbbcccc"))
	assert capsys.readouterr().out == EXAMPLE_CODES


def test_print_to_stream():
	buf = io.StringIO()
	hd.print_huffman_tree(HuffmanLogic().build_tree("aaaa"), file=buf)
	assert buf.getvalue() == "Huffman tree:\n  Leaf: 'a' with count 4\n"


def test_format_empty_tree():
	assert hd.format_huffman_tree(None) == "Huffman tree:\n"
	assert hd.format_huffman_tree_codes(None) == "Huffman tree codes:\n"


def test_format_huffman_tree_list():
	forest = HuffmanLogic().build_forest("abb")
	assert hd.format_huffman_tree_list(forest) == (
		"Huffman tree list:\n"
		"Huffman tree:\n"
		"  Leaf: 'a' with count 1\n"
		"Huffman tree:\n"
		"  Leaf: 'b' with count 2\n"
	)


def test_printers_do_not_mutate_tree():
	tree = HuffmanLogic().build_tree("hello world")
	before = hd.format_huffman_tree(tree)
	hd.format_huffman_tree_codes(tree)
	assert hd.format_huffman_tree(tree) == before


def test_format_deep_tree():
	tree = Leaf("a", 1)
	for i in range(1, 1500):
		tree = Internal(tree, Leaf(chr(0x100 + i), 1))
	lines = hd.format_huffman_tree(tree).splitlines()
	assert len(lines) == 1 + 2 * 1500 - 1
	assert lines[1] == "  Node: accumulated count 1500"
	assert "  " * 1500 + "Leaf: 'a' with count 1" in lines
	assert lines[-1] == "    Leaf: '" + chr(0x100 + 1499) + "' with count 1"
