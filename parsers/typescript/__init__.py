"""
TypeScript parser plugin.

Parses .ts and .tsx files with the tree-sitter TypeScript grammars.
"""

from parsers.typescript.parser import TypeScriptParser

__all__ = ['TypeScriptParser']
