"""Logging settings read from the optional ``log`` section."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from QueryParser.config.common import expect_bool, expect_str, get_section

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """Logging settings; each field falls back to its default when omitted.

    Attributes:
        level: Console log level name, uppercase.
        to_file: Mirror every record at DEBUG level to a per-action log file.
        dir: Base directory of the log files.
    """

    level: str = "INFO"
    to_file: bool = False
    dir: str = "log"


def load_runtime(raw: Mapping[str, Any]) -> RuntimeConfig:
    """Build `RuntimeConfig` from ``log``, keeping defaults for missing keys.

    Raises:
        TypeError: If ``log`` or one of its fields has the wrong type.
    """
    section = get_section(raw, "log", required=False)
    defaults = RuntimeConfig()
    return RuntimeConfig(
        level=expect_str(section.get("level", defaults.level), "log.level").strip().upper(),
        to_file=expect_bool(section.get("to_file", defaults.to_file), "log.to_file"),
        dir=expect_str(section.get("dir", defaults.dir), "log.dir"),
    )


def check_runtime(config: RuntimeConfig) -> None:
    """Reject unknown level names and a blank log directory when file logging is on."""
    if config.level not in _LOG_LEVELS:
        raise ValueError(f"log.level must be one of {', '.join(_LOG_LEVELS)}; got {config.level!r}")
    if config.to_file and not config.dir.strip():
        raise ValueError("log.dir must not be empty when log.to_file is true")
