"""
TypeScript Language Plugin for parsing.

This plugin turns TypeScript source into formatter syntax trees using
tree-sitter-typescript. `.tsx` files use the TSX grammar.
"""

import logging
from pathlib import Path
from typing import List, Optional

import tree_sitter
import tree_sitter_typescript

from parsers.base import LanguageParser, load_parser_config
from parsers.converter import TreeSitterParser
from tinyfmt.models.syntax import SyntaxTree

logger = logging.getLogger(__name__)


class TypeScriptParser(TreeSitterParser, LanguageParser):
    """TypeScript parser plugin using tree-sitter."""

    def __init__(self, config_dir: Optional[Path] = None):
        """
        Initialize the TypeScript plugin.

        Args:
            config_dir: Directory holding config.yaml. If None, uses the plugin directory.
        """
        super().__init__()

        if config_dir is None:
            config_dir = Path(__file__).parent

        self._config = load_parser_config(config_dir)
        self._tsx_extensions = self._config.get('tsx_extensions', ['.tsx'])

        logger.info("TypeScript parser initialized successfully")

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return self._config.get('name', 'typescript')

    @property
    def file_extensions(self) -> List[str]:
        """Return supported file extensions."""
        return self._config.get('file_extensions', ['.ts', '.tsx'])

    def _load_language(self, grammar: str) -> tree_sitter.Language:
        if grammar == "tsx":
            return tree_sitter.Language(tree_sitter_typescript.language_tsx())
        return tree_sitter.Language(tree_sitter_typescript.language_typescript())

    def grammar_for(self, file_name: str) -> str:
        """Pick the grammar ('typescript' or 'tsx') for a file name."""
        if any(file_name.endswith(ext) for ext in self._tsx_extensions):
            return "tsx"
        return "typescript"

    def parse(self, source_text: str, file_name: str) -> SyntaxTree:
        """
        Parse TypeScript source using tree-sitter-typescript.

        Args:
            source_text: File content as string
            file_name: Name of the file being parsed

        Returns:
            SyntaxTree for the file

        Raises:
            ParseError: If the file cannot be parsed
        """
        grammar = self.grammar_for(file_name)
        tree = self._parse_with(grammar, source_text, file_name, self.language_name)

        logger.debug(f"Successfully parsed TypeScript file: {file_name} ({grammar})")
        return tree
