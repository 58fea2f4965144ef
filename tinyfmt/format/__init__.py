"""
Formatting core.

Renders functions, blocks, statements and expressions of a parsed file into
canonical text, and assembles whole files from top-level declarations.
"""

from typing import Optional

from tinyfmt.format.block import format_block
from tinyfmt.format.expression import format_expression, space_operators
from tinyfmt.format.function import format_function
from tinyfmt.format.statement import format_statement
from tinyfmt.models.syntax import NodeKind, SyntaxTree
from tinyfmt.utils.logging import get_logger

logger = get_logger(__name__)


def format_tree(tree: SyntaxTree) -> str:
    """
    Format every top-level declaration of a parsed file.

    Function declarations are rendered at level 0; everything else is kept as
    written. Parts are separated by one blank line.

    Args:
        tree: Parsed file

    Returns:
        Formatted file text
    """
    parts = []
    functions = 0

    for node in tree.statements:
        if node.kind is NodeKind.FUNCTION_DECLARATION:
            parts.append(format_function(tree, node))
            functions += 1
        else:
            parts.append(tree.get_text(node))

    logger.debug(
        f"Rendered {len(parts)} top-level nodes ({functions} functions)",
        extra={"file_name": tree.file_name, "language": tree.language}
    )
    return "\n\n".join(parts)


def format_source(source_text: str, file_name: str, manager=None) -> str:
    """
    Parse and format a whole source file.

    Args:
        source_text: File content
        file_name: File name, used to pick the parser
        manager: ParserManager to parse with (default manager if None)

    Returns:
        Formatted file text

    Raises:
        ParseError: If the source text is not syntactically valid
    """
    if manager is None:
        from parsers.manager import get_default_manager
        manager = get_default_manager()

    tree = manager.parse(source_text, file_name)
    return format_tree(tree)


__all__ = [
    "format_block",
    "format_expression",
    "format_function",
    "format_source",
    "format_statement",
    "format_tree",
    "space_operators",
]
