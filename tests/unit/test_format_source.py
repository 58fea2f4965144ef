"""
Unit tests for whole-file formatting.

Tests the program assembler (format_tree / format_source) over the default
TypeScript and JavaScript parsers.
"""

import pytest

from parsers import ParseError, create_default_manager
from tinyfmt.format import format_source, format_tree


@pytest.fixture(scope="module")
def manager():
    """Create a parser manager with both plugins registered."""
    return create_default_manager(default_language="javascript")


SAMPLE_SOURCE = """import { x } from "./x";

function add(a:number,b:number):number
{
const sum=a+b
return sum
}


function main() {
function helper(n: number) { return n*2 }
console.log(add(1, 2))
}
"""


class TestFormatSource:
    """Test format_source."""

    def test_formats_functions_and_keeps_other_nodes(self, manager):
        """Test that functions are rendered and other nodes kept verbatim."""
        expected = (
            'import { x } from "./x";\n'
            "\n"
            "function add(a: number, b: number): number {\n"
            "  const sum = a + b;\n"
            "  return sum;\n"
            "}\n"
            "\n"
            "function main() {\n"
            "  function helper(n: number) {\n"
            "    return n * 2;\n"
            "  }\n"
            "  console.log(add(1, 2));\n"
            "}"
        )
        assert format_source(SAMPLE_SOURCE, "sample.ts", manager) == expected

    def test_top_level_statements_are_not_reformatted(self, manager):
        """Test that top-level non-function statements pass through."""
        source = "const x=1\nfunction f(){return x}"

        assert format_source(source, "a.ts", manager) == "const x=1\n\nfunction f() {\n  return x;\n}"

    def test_idempotent(self, manager):
        """Test that formatting formatted output changes nothing."""
        once = format_source(SAMPLE_SOURCE, "sample.ts", manager)
        assert format_source(once, "sample.ts", manager) == once

    def test_deterministic(self, manager):
        """Test that the same input gives the same output."""
        assert format_source(SAMPLE_SOURCE, "sample.ts", manager) == format_source(
            SAMPLE_SOURCE, "sample.ts", manager
        )

    def test_javascript_file(self, manager):
        """Test a JavaScript file with a default parameter."""
        source = "function greet(name, greeting='hi'){ return greeting+name }"

        expected = "function greet(name, greeting = 'hi') {\n  return greeting + name;\n}"
        assert format_source(source, "greet.js", manager) == expected

    def test_unknown_extension_uses_default_language(self, manager):
        """Test the fallback parser for unknown extensions."""
        source = "function f(a){return a}"

        assert format_source(source, "script.es", manager) == "function f(a) {\n  return a;\n}"

    def test_parse_error_propagates(self, manager):
        """Test that invalid source raises ParseError and produces no output."""
        with pytest.raises(ParseError) as exc_info:
            format_source("function broken( {", "broken.ts", manager)

        assert exc_info.value.file_name == "broken.ts"
        assert exc_info.value.line == 1

    def test_format_tree_joins_with_blank_lines(self, manager):
        """Test that top-level parts are separated by one blank line."""
        tree = manager.parse("function a(){}\nfunction b(){}", "two.ts")

        assert format_tree(tree) == "function a() {}\n\nfunction b() {}"

    def test_trailing_comment_keeps_output_valid(self, manager):
        """Test that a comment after an unterminated statement survives."""
        source = "function f() {\n  const x=1 // note\n  return x\n}"

        formatted = format_source(source, "a.ts", manager)

        assert formatted == "function f() {\n  const x = 1;\n  // note\n  return x;\n}"
        assert format_source(formatted, "a.ts", manager) == formatted

    def test_default_manager(self):
        """Test format_source without an explicit manager."""
        assert format_source("function f(){}", "f.ts") == "function f() {}"
