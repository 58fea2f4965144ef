"""Data models for the tiny TypeScript formatter."""

from .syntax import FunctionNode, NodeKind, Parameter, SyntaxNode, SyntaxTree

__all__ = [
    # Syntax models
    "NodeKind",
    "SyntaxNode",
    "Parameter",
    "FunctionNode",
    "SyntaxTree",
]
