"""
Command line interface for fetching YouTube transcripts.

Prints a transcript (or the list of available transcripts) to stdout.
"""

from __future__ import annotations

import argparse
import logging
import sys

from .api import TranscriptApi
from .config import config
from .errors import TranscriptError
from .formatters import OutputFormat, get_formatter
from .utils import extract_video_id, parse_language_codes

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="yt-transcript",
        description="Fetch the transcript of a YouTube video",
    )
    parser.add_argument("-video", "--video", required=True, help="YouTube video ID or URL")
    parser.add_argument(
        "-languages",
        "--languages",
        default=config.DEFAULT_LANGUAGES,
        help="Language codes separated by commas (e.g., 'en,ru,fr')",
    )
    parser.add_argument(
        "-format",
        "--format",
        default=config.DEFAULT_FORMAT,
        help="Output format (text, json, srt)",
    )
    parser.add_argument(
        "-list",
        "--list",
        action="store_true",
        help="List available transcripts instead of fetching one",
    )
    parser.add_argument("-verbose", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def setup_logging(verbose: bool = False) -> None:
    """Send log output to stderr so stdout only carries the transcript."""
    level = logging.DEBUG if verbose else getattr(logging, config.LOG_LEVEL.upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def resolve_video_id(value: str) -> str:
    """Accept a watch URL or a bare ID; unknown shapes are passed through as-is."""
    try:
        return extract_video_id(value)
    except ValueError as e:
        logger.debug(f"{e}, using input as video ID")
        return value.strip()


def run(argv: list[str] | None = None, api: TranscriptApi | None = None) -> int:
    """
    Run the CLI.

    Args:
        argv: Command line arguments, defaults to sys.argv[1:].
        api: API instance to use, mainly for tests.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    video_id = resolve_video_id(args.video)
    if not video_id:
        parser.error("video ID must be specified using the -video flag")

    if api is None:
        api = TranscriptApi()

    try:
        if args.list:
            print(api.list_transcripts(video_id))
            return 0

        languages = parse_language_codes(args.languages) or config.get_default_languages()
        transcript = api.get_transcript(video_id, languages)
    except TranscriptError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    formatter = get_formatter(OutputFormat.from_name(args.format))
    output = formatter.format_transcript(transcript)
    # Text and SRT output already end with a newline; JSON does not.
    if output and not output.endswith("\n"):
        output += "\n"
    sys.stdout.write(output)
    return 0


def main() -> None:
    """Main CLI entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
