from adapters.lexer.char_lexer import CharLexer
from adapters.parser._printer import format_tokens, format_tree, to_infix, tree_height
from adapters.parser.recursive_descent_parser import RecursiveDescentParser


def _ast(text: str):
    return RecursiveDescentParser().parse(CharLexer().tokenize(text))


def test_format_tokens_renders_paren_without_direction():
    assert format_tokens(CharLexer().tokenize("(2+3)*4")) == "() 2 + 3 () * 4"


def test_to_infix_makes_grouping_explicit():
    assert to_infix(_ast("1 - 2 - 3")) == "((1 - 2) - 3)"
    assert to_infix(_ast("2 + 3 * 4")) == "(2 + (3 * 4))"
    assert to_infix(_ast("-(1 + 2)")) == "-(1 + 2)"
    assert to_infix(_ast("--5")) == "--5"


def test_format_tree_indents_children():
    assert format_tree(_ast("-2 * (3 + 4)")) == "\n".join([
        "*",
        "  neg",
        "    2",
        "  +",
        "    3",
        "    4",
    ])


def test_format_tree_keeps_left_then_right_order_in_chains():
    assert format_tree(_ast("1 + 2 * 3 - 4")) == "\n".join([
        "-",
        "  +",
        "    1",
        "    *",
        "      2",
        "      3",
        "  4",
    ])


def test_renderings_handle_long_operator_chains():
    ast = _ast("+".join(["1"] * 2000))

    infix = to_infix(ast)
    assert infix.startswith("(" * 1999 + "1 + 1)")
    assert infix.endswith(" + 1)")

    lines = format_tree(ast).splitlines()
    assert len(lines) == 3999
    assert lines[1999] == "  " * 1999 + "1"


def test_tree_height_counts_longest_path():
    assert tree_height(_ast("7")) == 1
    assert tree_height(_ast("1 - 2 - 3")) == 3
    assert tree_height(_ast("1 + 2 * -3")) == 4
    assert tree_height(_ast("+".join(["1"] * 500))) == 500
