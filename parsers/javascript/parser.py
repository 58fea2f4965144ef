"""
JavaScript Language Plugin for parsing.

This plugin turns JavaScript source into formatter syntax trees using
tree-sitter-javascript.
"""

import logging
from pathlib import Path
from typing import List, Optional

import tree_sitter
import tree_sitter_javascript

from parsers.base import LanguageParser, load_parser_config
from parsers.converter import TreeSitterParser
from tinyfmt.models.syntax import SyntaxTree

logger = logging.getLogger(__name__)


class JavaScriptParser(TreeSitterParser, LanguageParser):
    """JavaScript parser plugin using tree-sitter."""

    def __init__(self, config_dir: Optional[Path] = None):
        super().__init__()

        if config_dir is None:
            config_dir = Path(__file__).parent

        self._config = load_parser_config(config_dir)

        logger.info("JavaScript parser initialized successfully")

    @property
    def language_name(self) -> str:
        return self._config.get('name', 'javascript')

    @property
    def file_extensions(self) -> List[str]:
        return self._config.get('file_extensions', ['.js'])

    def _load_language(self, grammar: str) -> tree_sitter.Language:
        return tree_sitter.Language(tree_sitter_javascript.language())

    def parse(self, source_text: str, file_name: str) -> SyntaxTree:
        """
        Parse JavaScript source using tree-sitter-javascript.

        Raises:
            ParseError: If the file cannot be parsed
        """
        tree = self._parse_with("javascript", source_text, file_name, self.language_name)

        logger.debug(f"Successfully parsed JavaScript file: {file_name}")
        return tree
