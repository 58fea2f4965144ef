"""
Conversion of tree-sitter parse trees into formatter syntax trees.

Both the TypeScript and JavaScript grammars share node type names for the
constructs the formatter cares about, so one converter serves both plugins.
"""

import logging
from typing import Any, Dict, List, Optional

import tree_sitter

from parsers.base import ParseError
from tinyfmt.models.syntax import (
    FunctionNode,
    NodeKind,
    Parameter,
    SyntaxNode,
    SyntaxTree,
)

logger = logging.getLogger(__name__)

FUNCTION_TYPES = frozenset({
    "function_declaration",
    "generator_function_declaration",
    "function_signature",
})

KIND_BY_TYPE = {
    "statement_block": NodeKind.BLOCK,
    "lexical_declaration": NodeKind.VARIABLE_STATEMENT,
    "variable_declaration": NodeKind.VARIABLE_STATEMENT,
    "expression_statement": NodeKind.EXPRESSION_STATEMENT,
    "return_statement": NodeKind.RETURN_STATEMENT,
    "comment": NodeKind.COMMENT,
}

SIMPLE_STATEMENT_KINDS = frozenset({
    NodeKind.VARIABLE_STATEMENT,
    NodeKind.EXPRESSION_STATEMENT,
    NodeKind.RETURN_STATEMENT,
})

# Expression node types that don't follow the `*_expression` naming.
EXPRESSION_TYPES = frozenset({
    "identifier",
    "property_identifier",
    "number",
    "string",
    "template_string",
    "regex",
    "true",
    "false",
    "null",
    "undefined",
    "this",
    "super",
    "array",
    "object",
    "arrow_function",
    "function",
    "generator_function",
    "class",
    "type_assertion",
    "jsx_element",
    "jsx_self_closing_element",
})


def classify(node_type: str) -> NodeKind:
    """Map a grammar node type to the formatter's node kind."""
    if node_type in FUNCTION_TYPES:
        return NodeKind.FUNCTION_DECLARATION

    kind = KIND_BY_TYPE.get(node_type)
    if kind is not None:
        return kind

    if node_type.endswith("_expression") or node_type in EXPRESSION_TYPES:
        return NodeKind.EXPRESSION

    return NodeKind.OTHER


def trailing_comments(ts_node: tree_sitter.Node) -> List[tree_sitter.Node]:
    """
    Comments at the end of a simple statement.

    Without a terminating `;`, tree-sitter extends variable, expression and
    return statements over a comment that follows them on the same line.

    Args:
        ts_node: tree-sitter Node

    Returns:
        The trailing comment nodes in source order (empty for other kinds)
    """
    if classify(ts_node.type) not in SIMPLE_STATEMENT_KINDS:
        return []

    comments = []
    for child in reversed(ts_node.children):
        if child.type != "comment":
            break
        comments.append(child)

    if len(comments) == len(ts_node.children):
        return []

    comments.reverse()
    return comments


def find_first_error(node: tree_sitter.Node) -> Optional[tree_sitter.Node]:
    """
    Find the first ERROR or MISSING node in document order.

    Args:
        node: Root of the subtree to search

    Returns:
        The offending node, or None if the subtree parsed cleanly
    """
    if node.type == "ERROR" or node.is_missing:
        return node

    if not node.has_error:
        return None

    for child in node.children:
        found = find_first_error(child)
        if found is not None:
            return found

    return node


class SyntaxTreeBuilder:
    """Converts tree-sitter nodes of one source file into SyntaxNode models."""

    def __init__(self, source_bytes: bytes):
        self._source = source_bytes

    def text(self, ts_node: Optional[tree_sitter.Node]) -> str:
        if ts_node is None:
            return ""
        return self._source[ts_node.start_byte:ts_node.end_byte].decode("utf-8")

    def annotation_text(self, ts_node: Optional[tree_sitter.Node]) -> Optional[str]:
        """Text of a `: Type` annotation without its colon."""
        if ts_node is None:
            return None
        text = self.text(ts_node).strip()
        if text.startswith(":"):
            text = text[1:].strip()
        return text or None

    def convert(self, ts_node: tree_sitter.Node) -> SyntaxNode:
        """
        Convert a tree-sitter node and its named children.

        Args:
            ts_node: tree-sitter Node

        Returns:
            SyntaxNode (FunctionNode for function declarations)
        """
        kind = classify(ts_node.type)

        trailing = trailing_comments(ts_node)
        if trailing:
            kept = ts_node.children[:-len(trailing)]
            ts_children = [child for child in kept if child.is_named]
            end_byte, end_point = kept[-1].end_byte, kept[-1].end_point
        else:
            ts_children = ts_node.named_children
            end_byte, end_point = ts_node.end_byte, ts_node.end_point

        children = []
        for child in ts_children:
            children.append(self.convert(child))
            # Comments cut from the end of a statement follow it as siblings.
            children.extend(self.convert(comment) for comment in trailing_comments(child))

        fields: Dict[str, Any] = dict(
            kind=kind,
            node_type=ts_node.type,
            start_byte=ts_node.start_byte,
            end_byte=end_byte,
            start_line=ts_node.start_point[0] + 1,  # Convert to 1-indexed
            end_line=end_point[0] + 1,
            start_column=ts_node.start_point[1],
            end_column=end_point[1],
            children=children,
        )

        if kind is NodeKind.FUNCTION_DECLARATION:
            return self._convert_function(ts_node, fields)

        return SyntaxNode(**fields)

    def _convert_function(self, ts_node: tree_sitter.Node, fields: Dict[str, Any]) -> FunctionNode:
        body = None
        ts_body = ts_node.child_by_field_name("body")
        if ts_body is not None:
            for child in fields["children"]:
                if child.start_byte == ts_body.start_byte and child.node_type == ts_body.type:
                    body = child
                    break

        ts_params = ts_node.child_by_field_name("parameters")
        parameters = self._convert_parameters(ts_params) if ts_params is not None else []

        type_parameters = ts_node.child_by_field_name("type_parameters")
        anonymous = [child.type for child in ts_node.children if not child.is_named]

        return FunctionNode(
            **fields,
            name=self.text(ts_node.child_by_field_name("name")),
            type_parameters=self.text(type_parameters) if type_parameters is not None else None,
            parameters=parameters,
            return_type=self.annotation_text(ts_node.child_by_field_name("return_type")),
            is_async="async" in anonymous,
            is_generator=ts_node.type == "generator_function_declaration" or "*" in anonymous,
            body=body,
        )

    def _convert_parameters(self, ts_params: tree_sitter.Node) -> List[Parameter]:
        return [
            self._convert_parameter(child)
            for child in ts_params.named_children
            if child.type != "comment"
        ]

    def _convert_parameter(self, ts_param: tree_sitter.Node) -> Parameter:
        if ts_param.type in ("required_parameter", "optional_parameter"):
            pattern = ts_param.child_by_field_name("pattern")
            value = ts_param.child_by_field_name("value")
            return Parameter(
                name=self.text(pattern) if pattern is not None else self.text(ts_param),
                type_annotation=self.annotation_text(ts_param.child_by_field_name("type")),
                optional=ts_param.type == "optional_parameter",
                default=self.text(value) if value is not None else None,
            )

        if ts_param.type == "assignment_pattern":
            return Parameter(
                name=self.text(ts_param.child_by_field_name("left")),
                default=self.text(ts_param.child_by_field_name("right")),
            )

        return Parameter(name=self.text(ts_param))


def build_syntax_tree(
    ts_tree: tree_sitter.Tree,
    source_text: str,
    file_name: str,
    language: str
) -> SyntaxTree:
    """
    Build a SyntaxTree from a tree-sitter parse.

    Args:
        ts_tree: tree-sitter Tree of the source text
        source_text: Text that was parsed
        file_name: Name of the parsed file
        language: Language name of the parser

    Returns:
        SyntaxTree for the file

    Raises:
        ParseError: If the parse contains errors or missing tokens
    """
    error_node = find_first_error(ts_tree.root_node)
    if error_node is not None:
        line = error_node.start_point[0] + 1
        column = error_node.start_point[1] + 1
        if error_node.is_missing:
            detail = f"missing '{error_node.type}'"
        else:
            detail = "syntax error"
        raise ParseError(f"{file_name}:{line}:{column}: {detail}", file_name, line, column)

    builder = SyntaxTreeBuilder(source_text.encode("utf-8"))
    root = builder.convert(ts_tree.root_node)

    return SyntaxTree(
        file_name=file_name,
        language=language,
        source_text=source_text,
        root=root,
    )


class TreeSitterParser:
    """
    Mixin holding one tree-sitter parser per grammar of a plugin.

    Subclasses provide the grammars; parsers are created lazily.
    """

    def __init__(self):
        self._parsers: Dict[str, tree_sitter.Parser] = {}

    def _load_language(self, grammar: str) -> tree_sitter.Language:
        raise NotImplementedError

    def _parser_for(self, grammar: str) -> tree_sitter.Parser:
        parser = self._parsers.get(grammar)
        if parser is None:
            parser = tree_sitter.Parser(self._load_language(grammar))
            self._parsers[grammar] = parser
            logger.debug(f"Created tree-sitter parser for grammar '{grammar}'")
        return parser

    def _parse_with(self, grammar: str, source_text: str, file_name: str, language: str) -> SyntaxTree:
        ts_tree = self._parser_for(grammar).parse(source_text.encode("utf-8"))
        return build_syntax_tree(ts_tree, source_text, file_name, language)
