"""
Base interface for language-specific parser plugins.

This module defines the abstract base class that all parser plugins must
implement to turn source text into a formatter syntax tree.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List

import yaml

from tinyfmt.models.syntax import SyntaxTree

logger = logging.getLogger(__name__)

REQUIRED_CONFIG_FIELDS = ("name", "version", "file_extensions")

_config_cache: Dict[str, Dict[str, Any]] = {}


class ParseError(ValueError):
    """Source text is not syntactically valid for the parser's language."""

    def __init__(self, message: str, file_name: str = "", line: int = 0, column: int = 0):
        super().__init__(message)
        self.file_name = file_name
        self.line = line
        self.column = column


class LanguageParser(ABC):
    """Base interface for language-specific parser plugins."""

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the language name (e.g., 'typescript', 'javascript')."""
        pass

    @property
    @abstractmethod
    def file_extensions(self) -> List[str]:
        """Return supported file extensions (e.g., ['.ts', '.tsx'])."""
        pass

    @abstractmethod
    def parse(self, source_text: str, file_name: str) -> SyntaxTree:
        """
        Parse source text into a syntax tree.

        Args:
            source_text: File content as string
            file_name: Name of the file being parsed

        Returns:
            SyntaxTree whose nodes expose kind, children and text spans

        Raises:
            ParseError: If the file cannot be parsed
        """
        pass


def load_parser_config(plugin_dir: Path) -> Dict[str, Any]:
    """
    Load parser plugin configuration from its config.yaml file.

    Args:
        plugin_dir: Directory containing the plugin and config.yaml

    Returns:
        Dictionary containing plugin configuration

    Raises:
        FileNotFoundError: If config.yaml is not found
        ValueError: If a required field is missing
        yaml.YAMLError: If config.yaml is malformed
    """
    config_path = Path(plugin_dir) / "config.yaml"

    cache_key = str(config_path)
    if cache_key in _config_cache:
        return _config_cache[cache_key]

    if not config_path.exists():
        raise FileNotFoundError(f"Parser configuration not found: {config_path}")

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        logger.error(f"Failed to parse parser configuration {config_path}: {e}")
        raise

    for field in REQUIRED_CONFIG_FIELDS:
        if field not in config:
            raise ValueError(f"Missing required field '{field}' in {config_path}")

    _config_cache[cache_key] = config
    logger.debug(f"Loaded parser configuration from {config_path}")
    return config
