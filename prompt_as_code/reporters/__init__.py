from pathlib import Path
from typing import TextIO

from prompt_as_code.reporters.base import BaseReporter
from prompt_as_code.reporters.console import ConsoleReporter
from prompt_as_code.reporters.json_report import JsonReporter
from prompt_as_code.reporters.markdown import MarkdownReporter

__all__ = [
    "BaseReporter",
    "ConsoleReporter",
    "JsonReporter",
    "MarkdownReporter",
    "REPORTER_REGISTRY",
    "get_reporter",
]

# Registry of available output formats
REPORTER_REGISTRY = {
    "console": ConsoleReporter,
    "json": JsonReporter,
    "markdown": MarkdownReporter,
}


def get_reporter(
    name: str,
    stream: TextIO | None = None,
    output_path: str | Path | None = None,
) -> BaseReporter:
    """Get a reporter by output format name."""
    if name not in REPORTER_REGISTRY:
        raise ValueError(f"Unknown output format: {name}. Available: {list(REPORTER_REGISTRY.keys())}")
    if name == "json":
        return JsonReporter(stream=stream, output_path=output_path)
    return REPORTER_REGISTRY[name](stream=stream)
