"""
JavaScript parser plugin.

Parses .js, .mjs, .cjs and .jsx files with the tree-sitter JavaScript grammar.
"""

from parsers.javascript.parser import JavaScriptParser

__all__ = ['JavaScriptParser']
