import argparse
import logging
import sys

from number_stream import input_source, integer_numbers
from number_words import (
    MagnitudeOverflowError,
    number_chunks,
    number_to_words,
)


def print_spelling(value, words):
    chunks = " ".join(f"{chunk.digits}:{chunk.magnitude}" for chunk in number_chunks(value))
    print(f"Number: {value}")
    print(f"Chunks: {chunks}")
    print(f"Words: {words}")
    print(f"Length: {len(words)}")


def _shorten(text, width=24):
    if len(text) <= width:
        return text
    return f"{text[:8]}...{text[-8:]} ({len(text)} digits)"


def report_overflow(exc):
    print(f"ERROR: {_shorten(str(exc.value))}: {exc}", file=sys.stderr)


def run(numbers, verbose=False):
    for value in numbers:
        try:
            words = number_to_words(value)
        except MagnitudeOverflowError as exc:
            report_overflow(exc)
            continue
        if verbose:
            print_spelling(value, words)
        else:
            print(words)


def main(argv=None, stdin=None):
    parser = cmdline_parser()
    # Everything that is not a known flag is a number token, kept in order.
    args, tokens = parser.parse_known_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if stdin is None:
        stdin = sys.stdin
    numbers = integer_numbers(input_source(stdin, tokens), on_overflow=report_overflow)
    run(numbers, verbose=args.verbose)
    return 0


def cmdline_parser():
    epilog = (
        "Input:\n"
        "  When standard input is piped, each non-blank line is one number and\n"
        "  command-line numbers are ignored.\n"
        "  Numbers must be below 10^54; other tokens are skipped.\n"
    )
    parser = argparse.ArgumentParser(
        usage="%(prog)s [-h] [--verbose] [numbers ...]",
        description="Print the English name of each integer.",
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
        allow_abbrev=False,
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print the chunks and length for each number and log skipped tokens.",
    )
    return parser


if __name__ == "__main__":
    sys.exit(main())
