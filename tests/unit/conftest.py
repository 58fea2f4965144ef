"""Shared fixtures for formatter unit tests."""

import pytest

from parsers.javascript import JavaScriptParser
from parsers.typescript import TypeScriptParser
from tinyfmt.models import NodeKind


@pytest.fixture(scope="session")
def ts_parser():
    """Create a TypeScript parser instance."""
    return TypeScriptParser()


@pytest.fixture(scope="session")
def js_parser():
    """Create a JavaScript parser instance."""
    return JavaScriptParser()


@pytest.fixture
def parse_ts(ts_parser):
    """Parse TypeScript source text into a syntax tree."""
    def _parse(source_text, file_name="test.ts"):
        return ts_parser.parse(source_text, file_name)
    return _parse


@pytest.fixture
def make_block_from_body(parse_ts):
    """Wrap a body in `function test()` and return (tree, body block)."""
    def _make(body):
        tree = parse_ts(f"function test() {body}")
        fn = next(n for n in tree.statements if n.kind is NodeKind.FUNCTION_DECLARATION)
        if fn.body is None:
            raise AssertionError("No function body found in test code")
        return tree, fn.body
    return _make


@pytest.fixture
def first_function(parse_ts):
    """Parse source and return (tree, first function declaration)."""
    def _first(source_text, file_name="test.ts"):
        tree = parse_ts(source_text, file_name)
        fn = next(n for n in tree.statements if n.kind is NodeKind.FUNCTION_DECLARATION)
        return tree, fn
    return _first
