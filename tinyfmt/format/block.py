"""Block rendering: braces, one statement per line, indentation."""

from tinyfmt.format.statement import format_statement
from tinyfmt.models.syntax import SyntaxNode, SyntaxTree

INDENT = "  "


def indent(level: int) -> str:
    """Indentation prefix for a given level."""
    return INDENT * level


def format_block(tree: SyntaxTree, block: SyntaxNode, level: int = 0) -> str:
    """
    Format a block as `{`, one indented line per statement, and a closing `}`.

    Statements are rendered at `level + 1`; the closing brace is aligned at
    `level`. A block without statements renders as `{}`.

    Args:
        tree: Syntax tree the block belongs to
        block: Block node
        level: Indentation level of the construct introducing the block

    Returns:
        Rendered block text
    """
    statements = block.statements
    if not statements:
        return "{}"

    block_indent = indent(level)
    statement_indent = indent(level + 1)

    lines = []
    for statement in statements:
        text = format_statement(tree, statement, level=level + 1)
        lines.append(statement_indent + text)

    body = "\n".join(lines)
    return f"{{\n{body}\n{block_indent}}}"
