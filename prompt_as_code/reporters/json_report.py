import json
from datetime import datetime
from pathlib import Path
from typing import TextIO

from prompt_as_code.reporters.base import BaseReporter
from prompt_as_code.schemas import RunReport, TestResult


class JsonReporter(BaseReporter):
    """
    Machine-readable report for CI pipelines.

    Writes {summary, results, timestamp} to the stream, or to output_path when
    one is given so that stdout can stay free for logs.
    """

    name = "json"

    def __init__(self, stream: TextIO | None = None, output_path: str | Path | None = None):
        super().__init__(stream)
        self.output_path = Path(output_path) if output_path else None

    def build(self, results: list[TestResult], completed_at: datetime | None = None) -> dict:
        return RunReport.build(results, completed_at).to_dict()

    def render(self, results: list[TestResult]) -> str:
        return json.dumps(self.build(results), indent=2, ensure_ascii=False)

    def report(self, results: list[TestResult]) -> None:
        if self.output_path is None:
            super().report(results)
            return

        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        self.output_path.write_text(self.render(results) + "\n", encoding="utf-8")
