"""Output renderers for command results.

Provides the OutputWriter protocol and console/JSON implementations, and a
factory that instantiates writers based on configuration.
"""

from __future__ import annotations

from QueryParser.config import AppConfig
from QueryParser.renderers.base import MultiOutputWriter, OutputWriter
from QueryParser.renderers.console import ConsoleOutputWriter, render_text
from QueryParser.renderers.json import JsonFileWriter, load_query_results, render_json


def create_output_writer(config: AppConfig) -> OutputWriter:
    """Create output writer based on config.

    Args:
        config: Application configuration.

    Returns:
        Writer fanning out to every configured format.

    Raises:
        ValueError: If no known format is configured.
    """
    writers: list[OutputWriter] = []
    if "console" in config.output.formats:
        writers.append(ConsoleOutputWriter())
    if "json" in config.output.formats:
        writers.append(JsonFileWriter(config.output.base_dir))

    if not writers:
        raise ValueError("No output writers configured")
    return MultiOutputWriter(writers)


__all__ = [
    "OutputWriter",
    "ConsoleOutputWriter",
    "JsonFileWriter",
    "MultiOutputWriter",
    "load_query_results",
    "render_json",
    "render_text",
    "create_output_writer",
]
