from prompt_as_code.reporters.base import BaseReporter
from prompt_as_code.schemas import RunSummary, TestResult


class ConsoleReporter(BaseReporter):
    """Human-readable per-case listing followed by a summary line."""

    name = "console"

    def render(self, results: list[TestResult]) -> str:
        lines = ["", "=== Prompt Test Results ===", ""]

        for result in results:
            status = "✅ PASS" if result.passed else "❌ FAIL"
            lines.append(f"{status} {result.prompt_name} → {result.test_case_name} ({result.execution_time_ms}ms)")
            lines.append(f"  Model: {result.model_used}")

            if not result.passed:
                for outcome in result.assertions_checked.failed():
                    lines.append(f"    ❌ {outcome.assertion}")
            if result.error:
                lines.append(f"    Error: {result.error}")
            lines.append("")

        summary = RunSummary.from_results(results)
        rate = f"{summary.pass_rate:.1f}" if summary.total_tests else "0"
        lines.append(f"Summary: {summary.passed}/{summary.total_tests} tests passed ({rate}%)")
        if summary.failed == 0:
            lines.append("🎉 All tests passed!")
        else:
            lines.append(f"⚠️  {summary.failed} test(s) failed")

        return "\n".join(lines)
