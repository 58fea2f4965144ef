"""
Command-line entry point.

Formats TypeScript/JavaScript files and prints the result, or rewrites the
files in place with --write.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from parsers.base import ParseError
from parsers.manager import ParserManager, create_default_manager
from tinyfmt.config import settings
from tinyfmt.format import format_tree
from tinyfmt.utils.logging import LogContext, get_logger, log_error_with_context, setup_logging
from tinyfmt.utils.metrics import FormatRunMetrics, emit_metric, track_phase

logger = get_logger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tiny-ts-fmt",
        description="Re-render functions, blocks and statements of TypeScript/JavaScript files.",
    )
    parser.add_argument(
        "files",
        nargs="*",
        metavar="FILE",
        help=f"files to format (default: {settings.default_input})",
    )
    parser.add_argument(
        "-w", "--write",
        action="store_true",
        help="rewrite files in place instead of printing them",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="log level for stderr diagnostics",
    )
    return parser


def format_file(
    path: Path,
    manager: ParserManager,
    metrics: Optional[FormatRunMetrics] = None,
    write: bool = False,
) -> str:
    """
    Format one file.

    Args:
        path: File to format
        manager: Parser manager used to parse the file
        metrics: Run metrics (optional)
        write: Rewrite the file in place when its content changes

    Returns:
        Formatted file text, newline-terminated

    Raises:
        ParseError: If the file is not syntactically valid
        OSError: If the file cannot be read or written
    """
    file_name = str(path)
    source_text = path.read_text(encoding="utf-8")

    with track_phase(metrics, "parse", file_name, logger):
        tree = manager.parse(source_text, file_name)

    file_logger = logger.with_context(language=tree.language)

    with track_phase(metrics, "render", file_name, file_logger):
        formatted = format_tree(tree)

    output = formatted + "\n"
    changed = output != source_text
    if write and changed:
        path.write_text(output, encoding="utf-8")
        file_logger.info(f"Rewrote {file_name}", extra={"file_name": file_name})

    if metrics:
        metrics.record_file(file_name, changed)

    return output


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the formatter over the given files.

    Args:
        argv: Command-line arguments (sys.argv[1:] if None)

    Returns:
        Process exit status
    """
    args = build_arg_parser().parse_args(argv)
    setup_logging(args.log_level)

    files = args.files or [settings.default_input]
    manager = create_default_manager()
    metrics = FormatRunMetrics()
    metrics.start()

    for name in files:
        path = Path(name)

        with LogContext(logger, file_name=name):
            try:
                formatted = format_file(path, manager, metrics, write=args.write)
            except ParseError as e:
                metrics.record_failure(name, e)
                log_error_with_context(logger, f"Failed to parse {name}: {e}", e)
                continue
            except OSError as e:
                metrics.record_failure(name, e)
                log_error_with_context(logger, f"Failed to access {name}: {e}", e)
                continue

        if not args.write:
            sys.stdout.write(formatted)

    metrics.complete()
    summary = metrics.get_metrics_summary()
    emit_metric("files_failed", summary["files_failed"], status=summary["status"])

    return 1 if metrics.failures else 0


if __name__ == "__main__":
    sys.exit(main())
