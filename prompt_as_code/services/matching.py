from dataclasses import dataclass, field
from typing import Mapping, Sequence

from prompt_as_code.schemas import Diagnostic, DiagnosticCode, PromptDefinition, SampleCollection


@dataclass(frozen=True)
class ExecutablePair:
    """A prompt joined with its same-named sample collection for one run."""
    prompt: PromptDefinition
    samples: SampleCollection


@dataclass
class MatchResult:
    pairs: list[ExecutablePair] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)


def match(
    prompts: Sequence[PromptDefinition],
    samples_by_name: Mapping[str, SampleCollection],
    name_filter: str | None = None,
) -> MatchResult:
    """
    Pair prompts with their sample collections by exact name.

    Prompts keep their load order. With a filter, only the prompt whose name
    equals it exactly is considered. A prompt without samples is skipped and
    reported, as is a sample collection without a prompt.
    """
    result = MatchResult()

    for prompt in prompts:
        if name_filter and prompt.name != name_filter:
            continue

        samples = samples_by_name.get(prompt.name)
        if samples is None:
            result.diagnostics.append(
                Diagnostic.warning(
                    DiagnosticCode.SAMPLES_MISSING,
                    f"No samples found for prompt: {prompt.name}",
                    source=prompt.name,
                )
            )
            continue

        result.pairs.append(ExecutablePair(prompt=prompt, samples=samples))

    # Samples no prompt claims, whatever the filter
    prompt_names = {prompt.name for prompt in prompts}
    for name in samples_by_name:
        if name not in prompt_names:
            result.diagnostics.append(
                Diagnostic.warning(
                    DiagnosticCode.SAMPLES_UNUSED,
                    f"No prompt found for samples: {name}",
                    source=name,
                )
            )

    return result
