"""Command line tool that dumps the assignments of INI-style config files."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
import json
import os
import sys
from typing import TextIO

from pydantic import ValidationError

from .config import LibsystemSettings, ParserConfig
from .config_parser import Assignment, parse_directory, scan
from .errors import ConfigError
from .logging_utils import configure_logging


@dataclass
class DumpJob:
    """Userdata threaded through :func:`parse_directory`."""

    out: TextIO
    max_sections: int | None
    failures: list[str] = field(default_factory=list)


def _render(assignment: Assignment) -> str:
    return json.dumps(
        {
            "filename": assignment.filename,
            "line": assignment.line,
            "section": assignment.section,
            "key": assignment.lvalue,
            "value": assignment.rvalue,
        }
    )


def dump_file(path: str, job: DumpJob) -> None:
    try:
        for assignment in scan(path, max_sections=job.max_sections):
            print(_render(assignment), file=job.out)
    except ConfigError:
        job.failures.append(path)
        raise


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="libsystem-config",
        description="Print every key/value assignment of an INI-style configuration file as JSON lines",
    )
    parser.add_argument("path", help="Configuration file, or a directory whose regular files are dumped")
    parser.add_argument("--settings", help="Path to TOML settings file")
    parser.add_argument("--max-sections", type=int, help="Override the per-file section limit")
    parser.add_argument("--unbounded", action="store_true", help="Do not limit the number of sections")
    args = parser.parse_args(argv)

    settings = LibsystemSettings.from_toml(args.settings) if args.settings else LibsystemSettings()
    configure_logging(settings.logging)

    max_sections = settings.parser.max_sections
    if args.max_sections is not None:
        try:
            max_sections = ParserConfig(max_sections=args.max_sections).max_sections
        except ValidationError:
            parser.error(f"--max-sections must be at least 1, got {args.max_sections}")
    if args.unbounded:
        max_sections = None

    job = DumpJob(out=sys.stdout, max_sections=max_sections)
    try:
        if os.path.isdir(args.path):
            parse_directory(args.path, dump_file, job)
        else:
            dump_file(args.path, job)
    except ConfigError as exc:
        print(f"libsystem-config: {exc}", file=sys.stderr)
        return 1

    return 1 if job.failures else 0


if __name__ == "__main__":
    sys.exit(main())
