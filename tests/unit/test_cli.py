"""
Unit tests for the command-line entry point.
"""

import json
import logging

import pytest

from tinyfmt.cli import build_arg_parser, main


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo the handler setup performed by main()."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def _stderr_records(text):
    return [json.loads(line) for line in text.splitlines() if line.strip()]


class TestArgParser:
    """Test argument parsing."""

    def test_defaults(self):
        """Test the default arguments."""
        args = build_arg_parser().parse_args([])

        assert args.files == []
        assert args.write is False

    def test_log_level_is_case_insensitive(self):
        """Test that --log-level accepts lower case names."""
        args = build_arg_parser().parse_args(["--log-level", "debug", "a.ts"])

        assert args.log_level == "DEBUG"
        assert args.files == ["a.ts"]

    def test_invalid_log_level(self):
        """Test that an unknown log level is a usage error."""
        with pytest.raises(SystemExit) as exc_info:
            build_arg_parser().parse_args(["--log-level", "loud"])

        assert exc_info.value.code == 2


class TestMain:
    """Test main()."""

    def test_prints_formatted_file(self, tmp_path, capsys):
        """Test that formatted text goes to stdout."""
        source = tmp_path / "a.ts"
        source.write_text("function f(){return 1}")

        assert main([str(source)]) == 0

        captured = capsys.readouterr()
        assert captured.out == "function f() {\n  return 1;\n}\n"
        assert source.read_text() == "function f(){return 1}"

    def test_write_rewrites_file(self, tmp_path, capsys):
        """Test that --write rewrites the file and prints nothing."""
        source = tmp_path / "a.ts"
        source.write_text("function f(){return 1}")

        assert main(["--write", str(source)]) == 0

        assert source.read_text() == "function f() {\n  return 1;\n}\n"
        assert capsys.readouterr().out == ""

    def test_write_leaves_formatted_file_alone(self, tmp_path):
        """Test that an already formatted file is not rewritten."""
        source = tmp_path / "a.ts"
        source.write_text("function f() {}\n")
        before = source.stat().st_mtime_ns

        assert main(["-w", str(source)]) == 0

        assert source.read_text() == "function f() {}\n"
        assert source.stat().st_mtime_ns == before

    def test_default_input(self, tmp_path, monkeypatch, capsys):
        """Test that index.ts is formatted when no file is given."""
        monkeypatch.chdir(tmp_path)
        (tmp_path / "index.ts").write_text("function main(){\nconst x=1\n}")

        assert main([]) == 0

        assert capsys.readouterr().out == "function main() {\n  const x = 1;\n}\n"

    def test_parse_error(self, tmp_path, capsys):
        """Test that a syntax error is reported and sets the exit status."""
        source = tmp_path / "bad.ts"
        source.write_text("function broken( {")

        assert main([str(source)]) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        records = _stderr_records(captured.err)
        assert any("Failed to parse" in record["message"] for record in records)
        assert source.read_text() == "function broken( {"

    def test_missing_file(self, tmp_path, capsys):
        """Test that an unreadable file is reported."""
        assert main([str(tmp_path / "missing.ts")]) == 1

        records = _stderr_records(capsys.readouterr().err)
        assert any("Failed to access" in record["message"] for record in records)

    def test_failure_does_not_stop_other_files(self, tmp_path, capsys):
        """Test that the remaining files are still formatted."""
        bad = tmp_path / "bad.ts"
        bad.write_text("const = ;")
        good = tmp_path / "good.js"
        good.write_text("function g(a){return a*2}")

        assert main([str(bad), str(good)]) == 1

        assert capsys.readouterr().out == "function g(a) {\n  return a * 2;\n}\n"

    def test_render_phase_logs_language(self, tmp_path, capsys):
        """Test that render-phase records carry the file name and language."""
        source = tmp_path / "a.ts"
        source.write_text("function f(){return 1}")

        assert main(["--log-level", "info", str(source)]) == 0

        records = _stderr_records(capsys.readouterr().err)
        render = [r for r in records if r.get("phase") == "render"]
        assert [r["context"]["status"] for r in render] == ["started", "completed"]
        assert all(r["language"] == "typescript" for r in render)
        assert all(r["file_name"] == str(source) for r in render)
