"""Table-driven parser for INI-style configuration files.

A caller describes the keys it understands with a table of
:class:`ConfigTableEntry` items. :func:`parse` scans a file line by line,
tracks the open ``[section]`` and hands each ``key = value`` assignment to the
callback registered for ``(section, key)``. Unknown keys are ignored.
"""

from __future__ import annotations

from contextlib import closing
from dataclasses import dataclass, field
import logging
import os
from typing import Any, Callable, Iterator, Protocol, Sequence

from .errors import ConfigError, ConfigIOError, MalformedHeaderError, SectionLimitError
from .strutil import COMMENTS, strip, truncate_nl
from .targets import Target

# Legacy capacity of the section table; pass ``max_sections=None`` to lift it.
MAX_SECTIONS = 64

logger = logging.getLogger(__name__)


class ConfigCallback(Protocol):
    def __call__(
        self,
        filename: str,
        line: int,
        section: str,
        lvalue: str,
        type_tag: int,
        rvalue: str,
        target: Any,
    ) -> None:
        ...


ConfigParseFunc = Callable[[str, Any], Any]


@dataclass(frozen=True)
class ConfigTableEntry:
    """Binding of a ``(section, key)`` pair to a callback and its destination.

    ``section=None`` matches any open section. An entry with an empty ``key``
    terminates the table.
    """

    section: str | None
    key: str
    callback: ConfigCallback | None = None
    type_tag: int = 0
    target: Target | None = None


@dataclass(frozen=True)
class Assignment:
    """One ``key = value`` line found inside an open section."""

    filename: str
    line: int
    section: str
    lvalue: str
    rvalue: str


@dataclass
class ParseState:
    """Scanner state for a single file."""

    max_sections: int | None = MAX_SECTIONS
    current_section: str | None = None
    seen_sections: dict[str, str] = field(default_factory=dict)
    line_number: int = 0

    def open_section(self, name: str, filename: str) -> str:
        # Re-opening a section reuses the stored name.
        existing = self.seen_sections.get(name)
        if existing is not None:
            self.current_section = existing
            return existing
        if self.max_sections is not None and len(self.seen_sections) >= self.max_sections:
            raise SectionLimitError(
                f"more than {self.max_sections} sections",
                filename=filename,
                line=self.line_number,
            )
        self.seen_sections[name] = name
        self.current_section = name
        return name


def lookup(table: Sequence[ConfigTableEntry], section: str, lvalue: str) -> ConfigTableEntry | None:
    """Return the first entry matching ``(section, lvalue)`` exactly."""

    for entry in table:
        if not entry.key:
            break
        if entry.key != lvalue:
            continue
        if entry.section is not None and entry.section != section:
            continue
        return entry
    return None


def scan(filename: str | os.PathLike[str], *, max_sections: int | None = MAX_SECTIONS) -> Iterator[Assignment]:
    """Yield the assignments of ``filename`` in file order.

    Errors are raised lazily when the offending line is reached, so assignments
    before a malformed header have already been yielded.
    """

    path = os.fspath(filename)
    state = ParseState(max_sections=max_sections)
    try:
        # Undecodable bytes pass through as lone surrogates instead of failing the read.
        handle = open(path, "r", encoding="utf-8", errors="surrogateescape", newline="\n")
    except OSError as exc:
        raise ConfigIOError(f"cannot open: {exc.strerror or exc}", filename=path) from exc

    with handle:
        while True:
            try:
                raw = handle.readline()
            except OSError as exc:
                raise ConfigIOError(f"read failed: {exc}", filename=path, line=state.line_number + 1) from exc
            if not raw:
                break

            state.line_number += 1
            text = truncate_nl(raw)

            if not text or text[0] in COMMENTS:
                continue

            if text[0] == "[":
                if len(text) < 2 or text[-1] != "]":
                    raise MalformedHeaderError(
                        f"section header {text!r} is missing ']'",
                        filename=path,
                        line=state.line_number,
                    )
                state.open_section(text[1:-1], path)
                continue

            if state.current_section is None:
                continue

            lvalue, sep, rvalue = text.partition("=")
            if not sep:
                continue

            yield Assignment(
                filename=path,
                line=state.line_number,
                section=state.current_section,
                lvalue=strip(lvalue),
                rvalue=strip(rvalue),
            )

    logger.debug(
        "config_scanned",
        extra={"path": path, "lines": state.line_number, "sections": len(state.seen_sections)},
    )


def parse(
    filename: str | os.PathLike[str],
    table: Sequence[ConfigTableEntry],
    *,
    max_sections: int | None = MAX_SECTIONS,
) -> None:
    """Parse ``filename`` and dispatch every known assignment through ``table``.

    Raises:
        ConfigIOError: The file cannot be opened or read.
        MalformedHeaderError: A ``[section`` line lacks its closing bracket.
        SectionLimitError: More than ``max_sections`` distinct sections.
        ConfigError: Whatever a callback raised; parsing stops at that line.
    """

    with closing(scan(filename, max_sections=max_sections)) as assignments:
        for assignment in assignments:
            _dispatch(table, assignment)


def _dispatch(table: Sequence[ConfigTableEntry], assignment: Assignment) -> None:
    entry = lookup(table, assignment.section, assignment.lvalue)
    if entry is None or entry.callback is None:
        return
    try:
        entry.callback(
            assignment.filename,
            assignment.line,
            assignment.section,
            assignment.lvalue,
            entry.type_tag,
            assignment.rvalue,
            entry.target,
        )
    except ConfigError as exc:
        # Converters do not know where they were called from.
        if exc.filename is None:
            exc.filename = assignment.filename
        if exc.line is None:
            exc.line = assignment.line
        raise


def parse_directory(
    directory: str | os.PathLike[str],
    per_file_callback: ConfigParseFunc,
    userdata: Any = None,
) -> None:
    """Run ``per_file_callback(path, userdata)`` for each regular file in ``directory``.

    Files are visited in directory order, subdirectories are skipped. A failing
    file is logged and does not stop the batch; only an unreadable directory is
    an error.
    """

    dirpath = os.fspath(directory)
    try:
        entries = os.scandir(dirpath)
    except OSError as exc:
        raise ConfigIOError(f"cannot open directory: {exc.strerror or exc}", filename=dirpath) from exc

    with entries:
        for entry in entries:
            try:
                if not entry.is_file(follow_symlinks=False):
                    continue
            except OSError:
                continue

            path = os.path.join(dirpath, entry.name)
            try:
                result = per_file_callback(path, userdata)
            except Exception as exc:  # noqa: BLE001
                logger.warning("config_file_failed", extra={"path": path, "error": str(exc)})
                continue
            # Callbacks may also report failure as a negative status code.
            if type(result) is int and result < 0:
                logger.warning("config_file_failed", extra={"path": path, "error": result})
