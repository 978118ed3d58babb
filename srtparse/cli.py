"""Command-line entry point: parse an SRT file and print its entries."""

from argparse import ArgumentParser
import json
import logging
import sys

from srtparse.core.config import get_settings
from srtparse.core.exceptions import SRTFileError, SRTParseError
from srtparse.core.logging import setup_logging
from srtparse.schemas import SubtitleEntrySchema
from srtparse.services.srt_formatter import describe_error, format_entries
from srtparse.services.srt_parser import parse_srt
from srtparse.services.srt_reader import read_srt_file

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_PARSE_ERROR = 1
EXIT_FILE_ERROR = 2


def create_arg_parser() -> ArgumentParser:
    parser = ArgumentParser(description="Parse an SRT subtitle file and print its entries")
    parser.add_argument("input", help="Path to the .srt file")
    parser.add_argument("--json", action="store_true", help="Print entries as JSON")
    parser.add_argument(
        "--best-effort",
        action="store_true",
        help="Print the entries parsed before the first error, then report the error",
    )
    parser.add_argument("--encoding", default=None, help="Encoding of cue text (default: utf-8)")
    parser.add_argument("--log-level", default=None, help="Log level (default: from settings)")
    return parser


def _print_entries(entries, as_json: bool) -> None:
    if as_json:
        payload = [SubtitleEntrySchema.from_entry(entry).model_dump() for entry in entries]
        sys.stdout.write(json.dumps(payload, ensure_ascii=False, indent=2) + "\n")
    else:
        sys.stdout.write(format_entries(entries))


def main(argv: list[str] | None = None) -> int:
    """Run the CLI.

    Returns:
        Process exit code: 0 on success, 1 on a parse error, 2 on a file error
    """
    args = create_arg_parser().parse_args(argv)
    settings = get_settings()
    # Logs go to stderr so stdout carries only parsed output
    setup_logging(settings, level=args.log_level, stream=sys.stderr)

    try:
        buffer = read_srt_file(
            args.input,
            allowed_extensions=settings.allowed_extensions,
            max_file_size=settings.max_file_size,
        )
    except SRTFileError as e:
        logger.error("%s", e)
        return EXIT_FILE_ERROR

    try:
        entries = parse_srt(buffer, encoding=args.encoding or settings.default_encoding)
    except LookupError as e:
        logger.error("%s", e)
        return EXIT_PARSE_ERROR
    except SRTParseError as e:
        if args.best_effort:
            _print_entries(e.entries, args.json)
        logger.error("Failed to parse %s: %s", args.input, describe_error(e))
        return EXIT_PARSE_ERROR

    logger.info("Parsed %d entries from %s", len(entries), args.input)
    _print_entries(entries, args.json)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
