import collections

ONES = (
    "zero",
    "one",
    "two",
    "three",
    "four",
    "five",
    "six",
    "seven",
    "eight",
    "nine",
    "ten",
    "eleven",
    "twelve",
    "thirteen",
    "fourteen",
    "fifteen",
    "sixteen",
    "seventeen",
    "eighteen",
    "nineteen",
    "twenty",
)
# Indexed by the tens digit.
TENS = (
    "",
    "",
    "twenty",
    "thirty",
    "forty",
    "fifty",
    "sixty",
    "seventy",
    "eighty",
    "ninety",
)
MAGNITUDE_LABELS = (
    "",
    "thousand",
    "million",
    "billion",
    "trillion",
    "quadrillion",
    "quintillion",
    "sextillion",
    "septillion",
    "octillion",
    "nonillion",
    "decillion",
    "undecillion",
    "duodecillion",
    "tredecillion",
    "quattuordecillion",
    "quindecillion",
    "sexdecillion",
)

Chunk = collections.namedtuple("Chunk", ["digits", "magnitude"])

MAX_DIGITS = len(MAGNITUDE_LABELS) * 3


class MagnitudeOverflowError(ValueError):
    """Raised for numbers of 10^MAX_DIGITS or more.

    ``value`` is the offending int, or its digit text when the number was
    never converted.
    """

    def __init__(self, value):
        super().__init__(f"magnitude overflow, numbers must be below 10^{MAX_DIGITS}")
        self.value = value


def number_chunks(value):
    """Split ``value`` into base-1000 chunks, most significant first.

    Each chunk keeps its decimal text as it appears inside the number, so
    inner chunks may carry leading zeros ("007").
    """
    if abs(value) >= 10**MAX_DIGITS:
        raise MagnitudeOverflowError(value)
    digits = str(abs(value))
    head = len(digits) % 3 or 3
    groups = [digits[:head]]
    groups.extend(digits[start:start + 3] for start in range(head, len(digits), 3))
    return [
        Chunk(group, len(groups) - 1 - position)
        for position, group in enumerate(groups)
    ]


def format_under_1000(text):
    if text == "":
        return ONES[0]
    if len(text) > 3 or not text.isdigit() or not text.isascii():
        raise ValueError(f"Not a chunk of at most three digits: {text!r}")
    if len(text) > 1 and text[0] == "0":
        raise ValueError(f"Chunk text must not start with zero: {text!r}")
    if len(text) == 1:
        return ONES[int(text)]
    if len(text) == 2:
        value = int(text)
        if value <= 20:
            return ONES[value]
        if text[1] == "0":
            return TENS[int(text[0])]
        return f"{TENS[int(text[0])]} {ONES[int(text[1])]}"

    words = [ONES[int(text[0])], "hundred"]
    tens_digit, ones_digit = text[1], text[2]
    if tens_digit == "1":
        words.append(ONES[int(text[1:])])
    else:
        if tens_digit != "0":
            words.append(TENS[int(tens_digit)])
        if ones_digit != "0":
            words.append(ONES[int(ones_digit)])
    return " ".join(words)


def spelled_chunks(value):
    if value == 0:
        return [(ONES[0], MAGNITUDE_LABELS[0])]
    pairs = []
    for chunk in number_chunks(value):
        digits = chunk.digits.lstrip("0")
        if not digits:
            continue
        pairs.append((format_under_1000(digits), MAGNITUDE_LABELS[chunk.magnitude]))
    return pairs


def render_spelled(pairs):
    return ", ".join(f"{words} {label}" if label else words for words, label in pairs)


def number_to_words(value):
    return render_spelled(spelled_chunks(value))

