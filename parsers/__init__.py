"""
Parser plugin architecture for the formatter.

This package provides the parser plugins that turn source text into syntax
trees, including the base parser interface and the parser manager.
"""

from parsers.base import LanguageParser, ParseError, load_parser_config
from parsers.manager import ParserManager, create_default_manager, get_default_manager

__all__ = [
    'LanguageParser',
    'ParseError',
    'load_parser_config',
    'ParserManager',
    'create_default_manager',
    'get_default_manager',
]
