import logging
import time
from dataclasses import dataclass, field
from pathlib import Path

from prompt_as_code.reporters.base import BaseReporter
from prompt_as_code.schemas import Diagnostic, DiagnosticCode, DiagnosticLevel, TestResult
from prompt_as_code.services.execution import GenerationDefaults, ModelInvoker, run_all
from prompt_as_code.services.loader import load_prompts, load_samples
from prompt_as_code.services.matching import match

logger = logging.getLogger(__name__)


@dataclass
class RunnerConfig:
    prompt_dir: str | Path
    samples_dir: str | Path
    model_override: str | None = None
    name_filter: str | None = None
    defaults: GenerationDefaults = field(default_factory=GenerationDefaults)


@dataclass
class RunOutcome:
    results: list[TestResult] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)
    pairs_matched: int = 0
    duration_ms: int = 0

    @property
    def has_failures(self) -> bool:
        return any(not r.passed for r in self.results)


def _log_diagnostics(diagnostics: list[Diagnostic]) -> None:
    for diagnostic in diagnostics:
        level = logging.WARNING if diagnostic.level == DiagnosticLevel.WARNING else logging.INFO
        logger.log(level, diagnostic.message)


class PromptRunner:
    """
    Runs every matched prompt against its samples and hands the results to
    a reporter.

    Discovery errors (missing directories, no usable prompt files) propagate
    as DiscoveryError before any test case executes.
    """

    def __init__(self, config: RunnerConfig, invoke: ModelInvoker, reporter: BaseReporter | None = None):
        self.config = config
        self.invoke = invoke
        self.reporter = reporter

    async def run(self) -> RunOutcome:
        start = time.perf_counter()
        outcome = RunOutcome()
        logger.info("Starting prompt execution...")

        prompts = load_prompts(self.config.prompt_dir)
        samples = load_samples(self.config.samples_dir)
        outcome.diagnostics += prompts.diagnostics + samples.diagnostics
        _log_diagnostics(prompts.diagnostics + samples.diagnostics)
        logger.info(f"Loaded {len(prompts.prompts)} prompt(s) and {len(samples.samples)} sample collection(s)")

        matched = match(prompts.prompts, samples.samples, self.config.name_filter)
        outcome.diagnostics += matched.diagnostics
        _log_diagnostics(matched.diagnostics)
        outcome.pairs_matched = len(matched.pairs)

        if not matched.pairs:
            no_pairs = Diagnostic.warning(DiagnosticCode.NO_MATCHED_PAIRS, "No matching prompt-sample pairs found")
            outcome.diagnostics.append(no_pairs)
            _log_diagnostics([no_pairs])
            outcome.duration_ms = int((time.perf_counter() - start) * 1000)
            return outcome

        logger.info(f"Found {len(matched.pairs)} test(s) to execute")

        executed = await run_all(
            matched.pairs,
            self.invoke,
            model_override=self.config.model_override,
            defaults=self.config.defaults,
        )
        outcome.results = executed.results
        outcome.diagnostics += executed.diagnostics
        _log_diagnostics(executed.diagnostics)

        if self.reporter is not None:
            self.reporter.report(outcome.results)

        outcome.duration_ms = int((time.perf_counter() - start) * 1000)
        logger.info(f"Total execution time: {outcome.duration_ms}ms")
        return outcome
