"""
Parser Manager for language-specific parser plugins.

This module manages parser registration and selection based on file extensions.
"""

import logging
from typing import Dict, List, Optional

from parsers.base import LanguageParser, ParseError
from tinyfmt.models.syntax import SyntaxTree

logger = logging.getLogger(__name__)


class ParserManager:
    """Manages parser plugin registration and selection."""

    def __init__(self, default_language: Optional[str] = None):
        """
        Initialize the parser manager.

        Args:
            default_language: Language used for files with an unknown extension
        """
        self._parsers: Dict[str, LanguageParser] = {}
        self._extension_map: Dict[str, str] = {}
        self._default_language = default_language

    def register_parser(self, parser: LanguageParser) -> None:
        """
        Register a parser plugin.

        Args:
            parser: LanguageParser instance to register
        """
        language_name = parser.language_name

        if language_name in self._parsers:
            logger.warning(f"Parser for language '{language_name}' already registered, overwriting")

        self._parsers[language_name] = parser

        for ext in parser.file_extensions:
            if ext in self._extension_map:
                logger.warning(
                    f"Extension '{ext}' already mapped to '{self._extension_map[ext]}', "
                    f"overwriting with '{language_name}'"
                )
            self._extension_map[ext] = language_name

        logger.info(
            f"Registered parser for language '{language_name}' "
            f"with extensions: {parser.file_extensions}"
        )

    def unregister_parser(self, language_name: str) -> bool:
        """
        Unregister a parser.

        Args:
            language_name: Name of the language parser to unregister

        Returns:
            True if parser was unregistered, False if not found
        """
        if language_name not in self._parsers:
            return False

        parser = self._parsers.pop(language_name)

        for ext in parser.file_extensions:
            if self._extension_map.get(ext) == language_name:
                del self._extension_map[ext]

        logger.info(f"Unregistered parser for language '{language_name}'")
        return True

    def get_parser(self, language_name: str) -> Optional[LanguageParser]:
        """
        Get parser by language name.

        Args:
            language_name: Name of the language

        Returns:
            LanguageParser instance if found, None otherwise
        """
        return self._parsers.get(language_name)

    def get_parser_for_file(self, file_path: str) -> Optional[LanguageParser]:
        """
        Get appropriate parser based on file extension.

        The longest registered extension matching the end of the file name
        wins, so `.d.ts`-style compound extensions can be mapped separately.

        Args:
            file_path: Path to the file

        Returns:
            LanguageParser instance if found, None otherwise
        """
        matches = [ext for ext in self._extension_map if file_path.endswith(ext)]
        if matches:
            ext = max(matches, key=len)
            return self._parsers.get(self._extension_map[ext])

        logger.debug(f"No parser found for file: {file_path}")
        return None

    def list_supported_languages(self) -> List[str]:
        """List all registered language parsers."""
        return list(self._parsers.keys())

    def list_supported_extensions(self) -> List[str]:
        """List all supported file extensions."""
        return list(self._extension_map.keys())

    def parse(self, source_text: str, file_name: str) -> SyntaxTree:
        """
        Parse source text with the parser selected for the file name.

        Files with an unknown extension use the default language parser.

        Args:
            source_text: File content
            file_name: File name used to select the parser

        Returns:
            SyntaxTree for the file

        Raises:
            ParseError: If no parser applies or the text is not valid
        """
        parser = self.get_parser_for_file(file_name)

        if parser is None and self._default_language:
            parser = self.get_parser(self._default_language)
            if parser is not None:
                logger.debug(f"Using default '{self._default_language}' parser for {file_name}")

        if parser is None:
            raise ParseError(f"No parser registered for file: {file_name}", file_name)

        return parser.parse(source_text, file_name)


def create_default_manager(default_language: Optional[str] = None) -> ParserManager:
    """
    Create a manager with the TypeScript and JavaScript parsers registered.

    Args:
        default_language: Fallback language (settings.default_language if None)

    Returns:
        Configured ParserManager
    """
    from parsers.javascript import JavaScriptParser
    from parsers.typescript import TypeScriptParser

    if default_language is None:
        from tinyfmt.config import settings
        default_language = settings.default_language

    manager = ParserManager(default_language=default_language)
    manager.register_parser(TypeScriptParser())
    manager.register_parser(JavaScriptParser())
    return manager


_default_manager: Optional[ParserManager] = None


def get_default_manager() -> ParserManager:
    """Get or create the shared default parser manager."""
    global _default_manager
    if _default_manager is None:
        _default_manager = create_default_manager()
    return _default_manager
