from prompt_as_code.reporters.base import BaseReporter
from prompt_as_code.schemas import RunSummary, TestResult


class MarkdownReporter(BaseReporter):
    """Pull-request comment digest: status, counts and failed tests."""

    name = "markdown"

    def render(self, results: list[TestResult]) -> str:
        summary = RunSummary.from_results(results)
        status = "❌ FAILED" if summary.failed else "✅ PASSED"

        lines = [
            "## 🧪 Prompt Test Results",
            "",
            f"**Status:** {status}",
            f"**Tests:** {summary.passed}/{summary.total_tests} passed ({summary.pass_rate:g}%)",
            f"**Execution Time:** {summary.total_execution_time_ms}ms",
        ]

        failed = [r for r in results if not r.passed]
        if failed:
            lines += ["", "### ❌ Failed Tests", ""]
            for result in failed:
                lines.append(f"- **{result.prompt_name} → {result.test_case_name}**")
                if result.error:
                    lines.append(f"  - Error: {result.error}")
                else:
                    for outcome in result.assertions_checked.failed():
                        lines.append(f'  - Failed: "{outcome.assertion}"')

        lines += ["", "---", "*Automated by prompt-as-code harness*"]
        return "\n".join(lines)
