import logging
import re

from number_words import MAX_DIGITS, MagnitudeOverflowError

logger = logging.getLogger(__name__)

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def raw_numbers(stream=None, args=None):
    """Yield trimmed, non-blank tokens from ``stream`` lines or from ``args``.

    Iterating a text stream buffers until a newline, so a line that arrives
    over several reads is still a single token.
    """
    source = stream if stream is not None else (args or ())
    for item in source:
        item = item.strip()
        if item:
            yield item


def input_source(stdin, args):
    if stdin is not None and not stdin.isatty():
        logger.debug("Reading numbers from piped input.")
        return raw_numbers(stream=stdin)
    logger.debug("Reading numbers from %d command-line arguments.", len(args))
    return raw_numbers(args=args)


def parse_integer(token):
    """Return the non-negative integer spelled by ``token``, or None.

    Digit strings too long to name raise MagnitudeOverflowError without
    being converted.
    """
    token = token.strip()
    if not _INTEGER_PATTERN.fullmatch(token):
        return None
    digits = token.lstrip("+-").lstrip("0") or "0"
    if token.startswith("-") and digits != "0":
        return None
    if len(digits) > MAX_DIGITS:
        raise MagnitudeOverflowError(digits)
    return int(digits)


def integer_numbers(tokens, on_overflow=None):
    """Yield the integers in ``tokens``, dropping tokens that do not parse.

    Overflowing tokens are passed to ``on_overflow`` and dropped; without a
    handler the error propagates.
    """
    for token in tokens:
        try:
            value = parse_integer(token)
        except MagnitudeOverflowError as exc:
            if on_overflow is None:
                raise
            on_overflow(exc)
            continue
        if value is None:
            logger.debug("Skipping token that is not a non-negative integer: %r", token)
            continue
        yield value
