"""Platform utility helpers: a table-driven INI configuration parser and its converters."""

from .config import LibsystemSettings, LoggingConfig, ParserConfig
from .config_parser import (
    MAX_SECTIONS,
    Assignment,
    ConfigCallback,
    ConfigParseFunc,
    ConfigTableEntry,
    ParseState,
    lookup,
    parse,
    parse_directory,
    scan,
)
from .converters import (
    parse_bool,
    parse_bytes,
    parse_float,
    parse_int,
    parse_percent,
    parse_string,
    parse_strv,
)
from .errors import (
    ConfigError,
    ConfigIOError,
    ErrorKind,
    InvalidFormatError,
    MalformedHeaderError,
    SectionLimitError,
)
from .logging_utils import JsonFormatter, configure_logging
from .targets import AttrTarget, ItemTarget, Slot, Target

__all__ = [
    "MAX_SECTIONS",
    "Assignment",
    "ConfigCallback",
    "ConfigParseFunc",
    "ConfigTableEntry",
    "ParseState",
    "lookup",
    "parse",
    "parse_directory",
    "scan",
    "parse_bool",
    "parse_bytes",
    "parse_float",
    "parse_int",
    "parse_percent",
    "parse_string",
    "parse_strv",
    "ConfigError",
    "ConfigIOError",
    "ErrorKind",
    "InvalidFormatError",
    "MalformedHeaderError",
    "SectionLimitError",
    "LibsystemSettings",
    "LoggingConfig",
    "ParserConfig",
    "JsonFormatter",
    "configure_logging",
    "AttrTarget",
    "ItemTarget",
    "Slot",
    "Target",
]
