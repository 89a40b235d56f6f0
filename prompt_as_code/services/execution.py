import logging
import time
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Sequence

from prompt_as_code.config import DEFAULT_MAX_TOKENS, DEFAULT_MODEL, DEFAULT_TEMPERATURE, Settings
from prompt_as_code.evaluators import all_passed, evaluate
from prompt_as_code.schemas import (
    AssertionsChecked,
    Diagnostic,
    DiagnosticCode,
    GenerationParams,
    PromptDefinition,
    TestCase,
    TestResult,
)
from prompt_as_code.services.matching import ExecutablePair
from prompt_as_code.services.templating import render

logger = logging.getLogger(__name__)

# invoke(rendered_text, params) -> response text
ModelInvoker = Callable[[str, GenerationParams], Awaitable[str]]


@dataclass(frozen=True)
class GenerationDefaults:
    """Fallbacks for parameters a prompt file leaves unset."""
    model: str = DEFAULT_MODEL
    temperature: float = DEFAULT_TEMPERATURE
    max_tokens: int = DEFAULT_MAX_TOKENS

    @classmethod
    def from_settings(cls, settings: Settings) -> "GenerationDefaults":
        return cls(
            model=settings.default_model,
            temperature=settings.default_temperature,
            max_tokens=settings.default_max_tokens,
        )


@dataclass
class EngineResult:
    results: list[TestResult] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)


def resolve_params(
    prompt: PromptDefinition,
    defaults: GenerationDefaults,
    model_override: str | None = None,
) -> GenerationParams:
    """Model precedence is override > prompt > default; unset values fall back to defaults."""
    return GenerationParams(
        model=model_override or prompt.model or defaults.model,
        temperature=prompt.temperature if prompt.temperature is not None else defaults.temperature,
        max_tokens=prompt.max_tokens if prompt.max_tokens is not None else defaults.max_tokens,
    )


def _error_message(error: Exception) -> str:
    return str(error) or type(error).__name__


async def run_single_case(
    prompt: PromptDefinition,
    test_case: TestCase,
    invoke: ModelInvoker,
    params: GenerationParams,
) -> tuple[TestResult, list[Diagnostic]]:
    """Render, invoke and evaluate one test case. Never raises for a failed invocation."""
    diagnostics: list[Diagnostic] = []
    start = time.perf_counter()

    try:
        rendered = render(prompt.template, test_case.input)
        if rendered.unresolved:
            diagnostics.append(
                Diagnostic.warning(
                    DiagnosticCode.UNRESOLVED_PLACEHOLDERS,
                    f"Unsubstituted placeholders found: {', '.join(rendered.unresolved)}",
                    source=f"{prompt.name}/{test_case.name}",
                )
            )

        response = await invoke(rendered.text, params)
        checked = evaluate(response, test_case.assertions)
        result = TestResult(
            prompt_name=prompt.name,
            test_case_name=test_case.name,
            model_used=params.model,
            passed=all_passed(checked),
            response=response,
            assertions_checked=checked,
            execution_time_ms=int((time.perf_counter() - start) * 1000),
        )
    except Exception as e:
        result = TestResult(
            prompt_name=prompt.name,
            test_case_name=test_case.name,
            model_used=params.model,
            passed=False,
            response="",
            assertions_checked=AssertionsChecked(),
            execution_time_ms=int((time.perf_counter() - start) * 1000),
            error=_error_message(e),
        )

    return result, diagnostics


async def run_all(
    pairs: Sequence[ExecutablePair],
    invoke: ModelInvoker,
    model_override: str | None = None,
    defaults: GenerationDefaults | None = None,
) -> EngineResult:
    """
    Execute every test case of every matched pair, one at a time.

    Results are appended in pair order, then case order. A failing case is
    recorded with its error and the run moves on; nothing is retried.

    Args:
        pairs: Matched prompt/sample pairs
        invoke: Async model invocation capability
        model_override: Model name taking precedence over prompt files
        defaults: Generation fallbacks (module defaults if not provided)

    Returns:
        EngineResult with ordered results and collected diagnostics
    """
    defaults = defaults or GenerationDefaults()
    outcome = EngineResult()

    for pair in pairs:
        prompt = pair.prompt
        params = resolve_params(prompt, defaults, model_override)
        logger.info(f"Executing prompt: {prompt.name} ({len(pair.samples.test_cases)} case(s), model {params.model})")

        for test_case in pair.samples.test_cases:
            result, diagnostics = await run_single_case(prompt, test_case, invoke, params)
            outcome.diagnostics.extend(diagnostics)
            outcome.results.append(result)

            if result.error:
                logger.info(f"  FAIL {test_case.name} - Error: {result.error}")
            else:
                status = "PASS" if result.passed else "FAIL"
                logger.info(f"  {status} {test_case.name} ({result.execution_time_ms}ms)")

    return outcome
