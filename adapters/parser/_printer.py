"""
_printer.py — text renderings of token lists and expression trees.

Used by the CLI (tokens / tree subcommands) and by the /parse endpoint.
Left-folded operator chains are walked with loops, not recursion.
"""
from __future__ import annotations

from contracts import BinaryNode, ExprAST, NumberNode, Token, UnaryNode

_INDENT = "  "


def format_tokens(tokens: list[Token]) -> str:
    """Token list as a single line: "(2 + 3)" -> "() 2 + 3 ()"."""
    return " ".join(str(t) for t in tokens)


def to_infix(ast: ExprAST) -> str:
    """Fully parenthesized infix form: "1 - 2 - 3" -> "((1 - 2) - 3)"."""
    if isinstance(ast, NumberNode):
        return str(ast.value)
    if isinstance(ast, BinaryNode):
        spine: list[BinaryNode] = []
        node: ExprAST = ast
        while isinstance(node, BinaryNode):
            spine.append(node)
            node = node.left
        text = to_infix(node)
        for parent in reversed(spine):
            text = f"({text} {parent.op.value} {to_infix(parent.right)})"
        return text
    if isinstance(ast, UnaryNode):
        return f"{ast.op.value}{to_infix(ast.operand)}"
    raise TypeError(f"Unknown AST node type: {type(ast)}")


def format_tree(ast: ExprAST) -> str:
    """Indented tree, one node per line, children below their operator."""
    lines: list[str] = []
    stack: list[tuple[ExprAST, int]] = [(ast, 0)]
    while stack:
        node, depth = stack.pop()
        pad = _INDENT * depth
        if isinstance(node, NumberNode):
            lines.append(f"{pad}{node.value}")
        elif isinstance(node, BinaryNode):
            lines.append(f"{pad}{node.op.value}")
            # right pushed first so the left subtree is printed first
            stack.append((node.right, depth + 1))
            stack.append((node.left, depth + 1))
        elif isinstance(node, UnaryNode):
            lines.append(f"{pad}neg")
            stack.append((node.operand, depth + 1))
        else:
            raise TypeError(f"Unknown AST node type: {type(node)}")
    return "\n".join(lines)


def tree_height(ast: ExprAST) -> int:
    """Number of nodes on the longest root-to-leaf path; a lone number is 1."""
    height = 0
    stack: list[tuple[ExprAST, int]] = [(ast, 1)]
    while stack:
        node, depth = stack.pop()
        height = max(height, depth)
        if isinstance(node, BinaryNode):
            stack.append((node.left, depth + 1))
            stack.append((node.right, depth + 1))
        elif isinstance(node, UnaryNode):
            stack.append((node.operand, depth + 1))
    return height
