from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, ClassVar
from pydantic import BaseModel, ConfigDict, Field


class AssertionOutcome(BaseModel):
    """Evaluated result for one literal assertion string."""
    model_config = ConfigDict(frozen=True)

    assertion: str
    passed: bool
    found_in_response: bool


class AssertionsChecked(BaseModel):
    model_config = ConfigDict(frozen=True)

    should_contain: list[AssertionOutcome] = Field(default_factory=list)
    should_not_contain: list[AssertionOutcome] = Field(default_factory=list)

    def failed(self) -> list[AssertionOutcome]:
        """Failed outcomes, should_contain first."""
        return [
            outcome
            for outcome in (*self.should_contain, *self.should_not_contain)
            if not outcome.passed
        ]


class TestResult(BaseModel):
    """Outcome of running one test case against one prompt."""
    __test__: ClassVar[bool] = False
    model_config = ConfigDict(frozen=True)

    prompt_name: str
    test_case_name: str
    model_used: str
    passed: bool
    response: str
    assertions_checked: AssertionsChecked = Field(default_factory=AssertionsChecked)
    execution_time_ms: int
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        # error is only present on failed invocations
        return self.model_dump(mode="json", exclude_none=True)


def _percentage(passed: int, total: int) -> float | int:
    """Pass rate to one decimal place, ties rounded up (6.25 -> 6.3); 0 for an empty run."""
    if not total:
        return 0
    rate = Decimal(passed * 100) / Decimal(total)
    return float(rate.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


class RunSummary(BaseModel):
    total_tests: int
    passed: int
    failed: int
    pass_rate: float | int
    total_execution_time_ms: int

    @classmethod
    def from_results(cls, results: list[TestResult]) -> "RunSummary":
        total = len(results)
        passed = sum(1 for r in results if r.passed)
        return cls(
            total_tests=total,
            passed=passed,
            failed=total - passed,
            pass_rate=_percentage(passed, total),
            total_execution_time_ms=sum(r.execution_time_ms for r in results),
        )


class RunReport(BaseModel):
    """Machine-readable document for a finished run."""
    summary: RunSummary
    results: list[TestResult]
    timestamp: str

    @classmethod
    def build(cls, results: list[TestResult], completed_at: datetime | None = None) -> "RunReport":
        completed_at = completed_at or datetime.now(timezone.utc)
        return cls(
            summary=RunSummary.from_results(results),
            results=results,
            timestamp=completed_at.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "summary": self.summary.model_dump(),
            "results": [r.to_dict() for r in self.results],
            "timestamp": self.timestamp,
        }
