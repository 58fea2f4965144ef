"""Syntax tree data models."""

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, PrivateAttr


class NodeKind(str, Enum):
    """Kind of a syntax node, as seen by the formatter."""

    FUNCTION_DECLARATION = "function_declaration"
    BLOCK = "block"
    VARIABLE_STATEMENT = "variable_statement"
    EXPRESSION_STATEMENT = "expression_statement"
    RETURN_STATEMENT = "return_statement"
    EXPRESSION = "expression"
    COMMENT = "comment"
    OTHER = "other"


class SyntaxNode(BaseModel):
    """Syntax tree node with its source span."""

    kind: NodeKind
    node_type: str
    start_byte: int
    end_byte: int
    start_line: int
    end_line: int
    start_column: int
    end_column: int
    children: List['SyntaxNode'] = []

    @property
    def statements(self) -> List['SyntaxNode']:
        """Ordered statements of a block or program node."""
        return list(self.children)

    @property
    def expression(self) -> Optional['SyntaxNode']:
        """Expression carried by an expression or return statement."""
        for child in self.children:
            if child.kind is NodeKind.EXPRESSION:
                return child
        return None


class Parameter(BaseModel):
    """Function parameter."""

    name: str
    type_annotation: Optional[str] = None
    optional: bool = False
    default: Optional[str] = None


class FunctionNode(SyntaxNode):
    """Function declaration node."""

    name: str = ""
    type_parameters: Optional[str] = None
    parameters: List[Parameter] = []
    return_type: Optional[str] = None
    is_async: bool = False
    is_generator: bool = False
    body: Optional[SyntaxNode] = None


class SyntaxTree(BaseModel):
    """Parsed source file."""

    file_name: str
    language: str
    source_text: str
    root: SyntaxNode

    _source_bytes: bytes = PrivateAttr(default=b"")

    def model_post_init(self, __context: Any) -> None:
        self._source_bytes = self.source_text.encode("utf-8")

    def get_text(self, node: SyntaxNode) -> str:
        """
        Return the exact original text of a node's span.

        Args:
            node: Node belonging to this tree

        Returns:
            Source text between the node's start and end offsets
        """
        return self._source_bytes[node.start_byte:node.end_byte].decode("utf-8")

    @property
    def statements(self) -> List[SyntaxNode]:
        """Top-level statements of the file."""
        return self.root.statements


# Enable forward references for recursive models
SyntaxNode.model_rebuild()
FunctionNode.model_rebuild()
