"""Entry point for ``python -m chatvault``.

Provides a CLI that segments a transcript file into speaker-attributed
messages.  Uses stdlib :mod:`argparse` for argument parsing.

Subcommands:
    parse   -- Default. Segment a transcript and print the segments.
    compare -- Run both segmentation strategies and report how they differ.
    import  -- Build the chat-import JSON payload for a transcript.

Exit codes:
    0 -- Command completed successfully.
    1 -- An error occurred (file not found, unreadable, config error,
         nothing to import).
    2 -- Argument parsing error (handled by argparse).
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from chatvault.compare import compare_strategies
from chatvault.config import ConfigError, Settings, load_settings
from chatvault.exceptions import EmptyTranscriptError
from chatvault.importer import build_chat_import
from chatvault.log import get_logger, setup_logging
from chatvault.models.segment import PROVIDERS, STRATEGIES
from chatvault.output import print_comparison, print_segmentation
from chatvault.segmenter import segment_transcript_file

logger = get_logger(__name__)

_SUBCOMMANDS = {"parse", "compare", "import"}


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "transcript_file",
        type=str,
        help="Path to the transcript text file.",
    )
    parser.add_argument(
        "--provider",
        choices=PROVIDERS,
        default=None,
        help="Chat product the transcript came from (default: CHATVAULT_PROVIDER or 'other').",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Enable debug-level logging.",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI argument parser with subcommands.

    Returns:
        Configured :class:`argparse.ArgumentParser` with ``parse``,
        ``compare`` and ``import`` subcommands.
    """
    parser = argparse.ArgumentParser(
        prog="chatvault",
        description="Split pasted LLM chat transcripts into user and assistant messages.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # --- "parse" subcommand (default) ---------------------------------
    parse_parser = subparsers.add_parser(
        "parse",
        help="Segment a transcript and print the segments.",
    )
    _add_common_arguments(parse_parser)
    parse_parser.add_argument(
        "--strategy",
        choices=STRATEGIES,
        default="auto",
        help="Segmentation strategy (default: auto).",
    )
    parse_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Print the segments as JSON.",
    )

    # --- "compare" subcommand -----------------------------------------
    compare_parser = subparsers.add_parser(
        "compare",
        help="Compare the prefix parser and the marker segmenter.",
    )
    _add_common_arguments(compare_parser)

    # --- "import" subcommand ------------------------------------------
    import_parser = subparsers.add_parser(
        "import",
        help="Print the chat-import JSON payload for a transcript.",
    )
    _add_common_arguments(import_parser)
    import_parser.add_argument(
        "--strategy",
        choices=STRATEGIES,
        default="auto",
        help="Segmentation strategy (default: auto).",
    )
    import_parser.add_argument(
        "--title",
        type=str,
        default=None,
        help="Chat title (default: first words of the first message).",
    )
    import_parser.add_argument(
        "--tag",
        dest="tags",
        action="append",
        default=[],
        help="Tag to attach to the chat. May be repeated.",
    )

    return parser


def _resolve_command(
    parser: argparse.ArgumentParser,
    argv: list[str],
) -> argparse.Namespace:
    """Parse *argv*, routing to ``parse`` when no subcommand is given.

    ``python -m chatvault chat.txt`` is therefore the same as
    ``python -m chatvault parse chat.txt``.
    """
    if not argv:
        argv = ["parse"]
    elif argv[0] in {"-h", "--help"}:
        pass
    elif argv[0] not in _SUBCOMMANDS:
        argv = ["parse", *argv]

    return parser.parse_args(argv)


def _check_transcript_file(path: Path) -> str | None:
    """Return an error message if *path* cannot be read, else ``None``."""
    if not path.exists():
        return f"File not found: {path}"
    if not path.is_file():
        return f"Not a file: {path}"
    try:
        with open(path, encoding="utf-8") as f:
            f.read(1)
    except PermissionError:
        return f"Permission denied: {path}"
    except UnicodeDecodeError:
        return f"Not a UTF-8 text file: {path}"
    return None


def _handle_parse(args: argparse.Namespace, settings: Settings) -> int:
    result = segment_transcript_file(
        Path(args.transcript_file),
        provider=args.provider or settings.default_provider,
        strategy=args.strategy,
    )
    print_segmentation(result, as_json=args.json)
    return 0


def _handle_compare(args: argparse.Namespace, settings: Settings) -> int:
    text = Path(args.transcript_file).read_text(encoding="utf-8")
    comparison = compare_strategies(text, args.provider or settings.default_provider)
    print_comparison(comparison)
    return 0


def _handle_import(args: argparse.Namespace, settings: Settings) -> int:
    path = Path(args.transcript_file)
    try:
        chat = build_chat_import(
            path.read_text(encoding="utf-8"),
            provider=args.provider or settings.default_provider,
            title=args.title,
            tags=args.tags,
            strategy=args.strategy,
            summary_max_length=settings.summary_max_length,
            source=str(path),
        )
    except EmptyTranscriptError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    sys.stdout.write(chat.model_dump_json(indent=2) + "\n")
    return 0


_HANDLERS = {
    "parse": _handle_parse,
    "compare": _handle_compare,
    "import": _handle_import,
}


def main(argv: list[str] | None = None) -> int:
    """Run the chatvault CLI.

    Args:
        argv: Command-line arguments.  Defaults to ``sys.argv[1:]``
            when ``None`` (the normal case).

    Returns:
        Exit code: ``0`` on success, ``1`` on error.
    """
    parser = build_parser()
    args = _resolve_command(parser, argv if argv is not None else sys.argv[1:])

    try:
        settings = load_settings()
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    setup_logging("DEBUG" if args.verbose else settings.log_level)

    error = _check_transcript_file(Path(args.transcript_file))
    if error is not None:
        print(f"Error: {error}", file=sys.stderr)
        return 1

    logger.debug("Running %s on %s", args.command, args.transcript_file)
    return _HANDLERS[args.command](args, settings)


if __name__ == "__main__":
    raise SystemExit(main())
