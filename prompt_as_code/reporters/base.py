import sys
from abc import ABC, abstractmethod
from typing import TextIO

from prompt_as_code.schemas import TestResult


class BaseReporter(ABC):
    """Renders a finished run's results."""

    name: str = "base"

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream

    @abstractmethod
    def render(self, results: list[TestResult]) -> str:
        """Return the rendered document for the given results."""
        pass

    def report(self, results: list[TestResult]) -> None:
        stream = self.stream or sys.stdout
        stream.write(self.render(results))
        stream.write("\n")
        stream.flush()

    def __repr__(self):
        return f"<{self.__class__.__name__}(name={self.name})>"
