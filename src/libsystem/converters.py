"""Ready-made value converters for configuration tables.

Every converter follows the table callback signature::

    converter(filename, line, section, lvalue, type_tag, rvalue, target)

and stores its result through ``target.set``. Malformed values raise
:class:`~libsystem.errors.InvalidFormatError`.
"""

from __future__ import annotations

import logging
from typing import Any

from . import strutil
from .errors import InvalidFormatError
from .targets import Target

logger = logging.getLogger(__name__)


def parse_int(
    filename: str, line: int, section: str, lvalue: str, type_tag: int, rvalue: str, target: Target
) -> None:
    """Store an unsigned decimal integer; an empty value stores 0."""

    if not strutil.is_number(rvalue):
        raise InvalidFormatError(f"{lvalue}: {rvalue!r} is not a number")
    target.set(strutil.to_int(rvalue, rvalue) if rvalue else 0)


def parse_bool(
    filename: str, line: int, section: str, lvalue: str, type_tag: int, rvalue: str, target: Target
) -> None:
    """Store a boolean word.

    Unrecognized words leave the target untouched instead of failing, unlike
    :func:`parse_int`.
    """

    value = strutil.parse_boolean(rvalue)
    if value is None:
        logger.debug(
            "config_bool_ignored",
            extra={"path": filename, "line": line, "key": lvalue, "value": rvalue},
        )
        return
    target.set(value)


def parse_string(
    filename: str, line: int, section: str, lvalue: str, type_tag: int, rvalue: str, target: Target
) -> None:
    # An empty value unsets the target.
    target.set(rvalue or None)


def parse_bytes(
    filename: str, line: int, section: str, lvalue: str, type_tag: int, rvalue: str, target: Target
) -> None:
    """Store a byte count written as ``<digits>[B|K|M|G]``."""

    target.set(strutil.parse_bytes(rvalue))


def parse_percent(
    filename: str, line: int, section: str, lvalue: str, type_tag: int, rvalue: str, target: Target
) -> None:
    """Store a percentage written as ``<digits>%`` (0..100)."""

    target.set(strutil.parse_percent(rvalue))


def parse_strv(
    filename: str, line: int, section: str, lvalue: str, type_tag: int, rvalue: str, target: Target
) -> None:
    """Append the whitespace separated words of ``rvalue`` to the stored list.

    Repeating the key accumulates words across lines.
    """

    if not rvalue:
        return
    words = strutil.split_words(rvalue)
    current: Any = target.get()
    target.set([*(current or []), *words])


def parse_float(
    filename: str, line: int, section: str, lvalue: str, type_tag: int, rvalue: str, target: Target
) -> None:
    if not rvalue:
        target.set(0.0)
        return
    try:
        value = float(rvalue)
    except ValueError as exc:
        raise InvalidFormatError(f"{lvalue}: {rvalue!r} is not a number") from exc
    target.set(value)
