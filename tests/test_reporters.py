"""Tests for result reporters."""

import io
import json
import pytest
from datetime import datetime, timezone

from prompt_as_code.reporters import ConsoleReporter, JsonReporter, MarkdownReporter, get_reporter
from prompt_as_code.schemas import AssertionOutcome, AssertionsChecked, RunSummary, TestResult


@pytest.fixture
def result_factory():
    """Factory for creating test results."""
    def _create(
        prompt_name: str = "capital",
        test_case_name: str = "france",
        passed: bool = True,
        response: str = "Paris",
        missing: list[str] | None = None,
        error: str | None = None,
        execution_time_ms: int = 120,
    ) -> TestResult:
        should_contain = [
            AssertionOutcome(assertion=term, passed=False, found_in_response=False)
            for term in (missing or [])
        ]
        return TestResult(
            prompt_name=prompt_name,
            test_case_name=test_case_name,
            model_used="gpt-4o-mini",
            passed=passed,
            response=response,
            assertions_checked=AssertionsChecked(should_contain=should_contain),
            execution_time_ms=execution_time_ms,
            error=error,
        )
    return _create


class TestRunSummary:
    """Tests for RunSummary.from_results()."""

    def test_pass_rate_rounded_to_one_decimal(self, result_factory):
        results = [result_factory(), result_factory(), result_factory(passed=False)]

        summary = RunSummary.from_results(results)

        assert summary.total_tests == 3
        assert summary.passed == 2
        assert summary.failed == 1
        assert summary.pass_rate == 66.7
        assert summary.total_execution_time_ms == 360

    def test_ties_round_up(self, result_factory):
        """Test 1/16 (6.25%) reports 6.3 and 5/16 (31.25%) reports 31.3."""
        one_of_16 = [result_factory()] + [result_factory(passed=False)] * 15
        five_of_16 = [result_factory()] * 5 + [result_factory(passed=False)] * 11

        assert RunSummary.from_results(one_of_16).pass_rate == 6.3
        assert RunSummary.from_results(five_of_16).pass_rate == 31.3

    def test_no_results_zero_rate(self):
        summary = RunSummary.from_results([])

        assert summary.total_tests == 0
        assert summary.pass_rate == 0


class TestConsoleReporter:
    """Tests for ConsoleReporter."""

    def test_pass_and_fail_lines(self, result_factory):
        stream = io.StringIO()
        results = [
            result_factory(),
            result_factory(test_case_name="japan", passed=False, response="Kyoto", missing=["tokyo"]),
        ]

        ConsoleReporter(stream=stream).report(results)

        output = stream.getvalue()
        assert "✅ PASS capital → france (120ms)" in output
        assert "❌ FAIL capital → japan (120ms)" in output
        assert "Model: gpt-4o-mini" in output
        assert "❌ tokyo" in output
        assert "Summary: 1/2 tests passed (50.0%)" in output

    def test_error_shown(self, result_factory):
        stream = io.StringIO()

        ConsoleReporter(stream=stream).report([
            result_factory(passed=False, response="", error="OpenAI API error: rate limit exceeded"),
        ])

        assert "Error: OpenAI API error: rate limit exceeded" in stream.getvalue()

    def test_all_passed_banner(self, result_factory):
        output = ConsoleReporter().render([result_factory()])

        assert "Summary: 1/1 tests passed (100.0%)" in output
        assert "All tests passed" in output

    def test_rounded_tie_shown(self, result_factory):
        output = ConsoleReporter().render([result_factory()] + [result_factory(passed=False)] * 15)

        assert "Summary: 1/16 tests passed (6.3%)" in output

    def test_empty_run_shows_zero(self):
        output = ConsoleReporter().render([])

        assert "Summary: 0/0 tests passed (0%)" in output


class TestJsonReporter:
    """Tests for JsonReporter."""

    def test_document_shape(self, result_factory):
        completed_at = datetime(2024, 5, 1, 12, 30, 15, 123000, tzinfo=timezone.utc)

        document = JsonReporter().build([result_factory()], completed_at)

        assert set(document) == {"summary", "results", "timestamp"}
        assert document["timestamp"] == "2024-05-01T12:30:15.123Z"
        assert document["summary"] == {
            "total_tests": 1,
            "passed": 1,
            "failed": 0,
            "pass_rate": 100.0,
            "total_execution_time_ms": 120,
        }
        result = document["results"][0]
        assert result["prompt_name"] == "capital"
        assert result["assertions_checked"] == {"should_contain": [], "should_not_contain": []}

    def test_error_omitted_on_success(self, result_factory):
        document = JsonReporter().build([
            result_factory(),
            result_factory(passed=False, response="", error="boom"),
        ])

        assert "error" not in document["results"][0]
        assert document["results"][1]["error"] == "boom"

    def test_report_to_stream_is_valid_json(self, result_factory):
        stream = io.StringIO()

        JsonReporter(stream=stream).report([result_factory()])

        assert json.loads(stream.getvalue())["summary"]["total_tests"] == 1

    def test_report_to_file(self, result_factory, tmp_path):
        """Test output_path receives the document and the stream stays empty."""
        stream = io.StringIO()
        target = tmp_path / "out" / "results.json"

        JsonReporter(stream=stream, output_path=target).report([result_factory()])

        assert stream.getvalue() == ""
        assert json.loads(target.read_text())["results"][0]["test_case_name"] == "france"

    def test_empty_results(self):
        document = JsonReporter().build([])

        assert document["results"] == []
        assert document["summary"]["pass_rate"] == 0


class TestMarkdownReporter:
    """Tests for MarkdownReporter."""

    def test_failed_digest(self, result_factory):
        output = MarkdownReporter().render([
            result_factory(),
            result_factory(test_case_name="japan", passed=False, missing=["tokyo"]),
            result_factory(test_case_name="peru", passed=False, response="", error="timeout"),
        ])

        assert "**Status:** ❌ FAILED" in output
        assert "**Tests:** 1/3 passed (33.3%)" in output
        assert "- **capital → japan**" in output
        assert '  - Failed: "tokyo"' in output
        assert "  - Error: timeout" in output
        assert "capital → france" not in output

    def test_passing_digest(self, result_factory):
        output = MarkdownReporter().render([result_factory()])

        assert "**Status:** ✅ PASSED" in output
        assert "**Tests:** 1/1 passed (100%)" in output
        assert "Failed Tests" not in output


class TestGetReporter:
    """Tests for get_reporter()."""

    def test_known_formats(self, tmp_path):
        assert isinstance(get_reporter("console"), ConsoleReporter)
        assert isinstance(get_reporter("markdown"), MarkdownReporter)
        reporter = get_reporter("json", output_path=tmp_path / "r.json")
        assert isinstance(reporter, JsonReporter)
        assert reporter.output_path == tmp_path / "r.json"

    def test_unknown_format(self):
        with pytest.raises(ValueError, match="Unknown output format"):
            get_reporter("xml")
