"""CLI entrypoint for tarloc."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .aggregator import ON_ENTRY_ERROR_SKIP
from .archive import TarlocError
from .config import ConfigError, load_config
from .languages import discover_languages
from .logging import configure_logging
from .pipeline import Pipeline


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tarloc",
        description=(
            "Count blank, code, and comment lines per language for the files in a tar "
            "archive and print one JSON summary per language."
        ),
    )
    parser.add_argument(
        "tar_filename",
        nargs="?",
        default=None,
        help="Path to the tar archive (reads standard input when omitted).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        default=False,
        help="Only log warnings and errors.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to .tarloc.yml or the directory holding it (defaults to the current directory).",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write logs to this file.",
    )
    parser.add_argument(
        "--skip-unreadable",
        action="store_true",
        help="Skip entries whose path or content cannot be read instead of aborting.",
    )
    parser.add_argument(
        "--doc-strings-as-comments",
        action="store_true",
        default=None,
        help="Count documentation strings as comment lines.",
    )
    parser.add_argument(
        "--list-languages",
        action="store_true",
        help="Print the recognized language names and exit.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for tarloc."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(
        verbose=bool(args.verbose), quiet=bool(args.quiet), log_file=args.log_file
    )

    if args.list_languages:
        for name in sorted(definition.name for definition in discover_languages()):
            print(name)
        return

    try:
        config = load_config(args.config)
        pipeline = Pipeline.from_config(
            config,
            on_entry_error=ON_ENTRY_ERROR_SKIP if args.skip_unreadable else None,
            treat_doc_strings_as_comments=args.doc_strings_as_comments,
        )
    except ConfigError as exc:
        parser.exit(1, f"tarloc: invalid configuration: {exc}\n")

    try:
        pipeline.run_path(args.tar_filename, sys.stdout)
    except TarlocError as exc:
        parser.exit(1, f"tarloc failed: {exc}\nRun with --verbose for more details.\n")


if __name__ == "__main__":
    main(sys.argv[1:])
