"""
Statement rendering.

Function declarations are delegated to the function renderer. Variable,
expression and return statements get a coarse operator spacing pass and a
guaranteed terminating semicolon. Every other statement kind is kept as
written.
"""

import re

from tinyfmt.models.syntax import NodeKind, SyntaxNode, SyntaxTree
from tinyfmt.utils.logging import get_logger

logger = get_logger(__name__)

SIMPLE_STATEMENT_KINDS = frozenset({
    NodeKind.VARIABLE_STATEMENT,
    NodeKind.EXPRESSION_STATEMENT,
    NodeKind.RETURN_STATEMENT,
})

# Only `=` and the four arithmetic operators; `==`, `+=` and friends are not
# special-cased here (see `format_expression` for the full scanner).
_BINARY_OPERATOR_RE = re.compile(r"\s*([=+\-*/])\s*")


def ensure_semicolon(text: str) -> str:
    """Append a terminating semicolon unless one is already there."""
    if text.endswith(";"):
        return text
    return text + ";"


def space_binary_operators(text: str) -> str:
    """Put single spaces around `=`, `+`, `-`, `*` and `/`."""
    return _BINARY_OPERATOR_RE.sub(r" \1 ", text)


def format_statement(tree: SyntaxTree, statement: SyntaxNode, level: int = 0) -> str:
    """
    Format a single statement.

    Args:
        tree: Syntax tree the statement belongs to
        statement: Statement node
        level: Indentation level of the statement

    Returns:
        Rendered statement text, without leading indentation
    """
    if statement.kind is NodeKind.FUNCTION_DECLARATION:
        # The function renders its own body at this level.
        from tinyfmt.format.function import format_function
        return format_function(tree, statement, level=level)

    if statement.kind in SIMPLE_STATEMENT_KINDS:
        raw = tree.get_text(statement).rstrip()
        return ensure_semicolon(space_binary_operators(raw))

    logger.debug(
        f"Keeping {statement.node_type} at line {statement.start_line} as written",
        extra={"file_name": tree.file_name, "node_kind": statement.kind.value}
    )
    return tree.get_text(statement)
