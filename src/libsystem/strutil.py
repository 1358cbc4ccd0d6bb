"""String helpers shared by the config parser and its converters."""

from __future__ import annotations

import re

from .errors import InvalidFormatError

WHITESPACE = " \t\n\r"
NEWLINE = "\n\r"
COMMENTS = "#;"
QUOTES = "\"'"

_NUMBER_RE = re.compile(r"[0-9]*")
_BYTES_RE = re.compile(r"([0-9]+)([BKMG]?)")
_PERCENT_RE = re.compile(r"([0-9]*)%")
# A word runs until unquoted whitespace; an unterminated quote swallows the rest.
_WORD_RE = re.compile(r"""(?:[^ \t\n\r"']|"[^"]*(?:"|$)|'[^']*(?:'|$))+""")

_BYTE_UNITS = {"": 0, "B": 0, "K": 10, "M": 20, "G": 30}


def strip(value: str) -> str:
    return value.strip(WHITESPACE)


def truncate_nl(value: str) -> str:
    """Cut ``value`` at its first carriage return or newline."""

    for index, char in enumerate(value):
        if char in NEWLINE:
            return value[:index]
    return value


def is_number(value: str) -> bool:
    """True when ``value`` holds only ASCII decimal digits (the empty string included)."""

    return _NUMBER_RE.fullmatch(value) is not None


def to_int(digits: str, value: str) -> int:
    """Convert a validated digit run, reporting oversized numbers as malformed."""

    try:
        return int(digits)
    except ValueError as exc:
        raise InvalidFormatError(f"number {value[:32]!r}... is too long") from exc


def parse_boolean(value: str) -> bool | None:
    """Interpret a boolean word, returning ``None`` when it is not recognized."""

    if value == "1" or value[:1] in ("y", "Y", "t", "T") or value.lower() == "on":
        return True
    if value == "0" or value[:1] in ("n", "N", "f", "F") or value.lower() == "off":
        return False
    return None


def parse_bytes(value: str) -> int:
    """Parse ``<digits>[B|K|M|G]`` into a byte count using binary multiples."""

    if not value:
        return 0
    match = _BYTES_RE.fullmatch(value)
    if match is None:
        raise InvalidFormatError(f"invalid byte size {value!r}")
    number, unit = match.groups()
    return to_int(number, value) << _BYTE_UNITS[unit]


def parse_percent(value: str) -> int:
    """Parse ``<digits>%`` into an integer between 0 and 100."""

    if not value:
        return 0
    match = _PERCENT_RE.fullmatch(value)
    if match is None:
        raise InvalidFormatError(f"invalid percentage {value!r}")
    digits = match.group(1)
    percent = to_int(digits, value) if digits else 0
    if percent > 100:
        raise InvalidFormatError(f"percentage {value!r} exceeds 100%")
    return percent


def split_words(value: str) -> list[str]:
    """Split on whitespace, keeping quoted runs (quotes included) in one word."""

    return _WORD_RE.findall(value)
