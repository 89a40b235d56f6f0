"""Discovery of prompt (YAML) and sample (JSON) files."""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

import yaml
from pydantic import ValidationError

from prompt_as_code.exceptions import DiscoveryError
from prompt_as_code.schemas import Diagnostic, DiagnosticCode, PromptDefinition, SampleCollection

logger = logging.getLogger(__name__)

PROMPT_SUFFIXES = (".yaml", ".yml")
SAMPLE_SUFFIX = ".json"
SAMPLE_FILE_MARKER = "_samples"


@dataclass
class PromptLoadResult:
    prompts: list[PromptDefinition] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)


@dataclass
class SampleLoadResult:
    samples: dict[str, SampleCollection] = field(default_factory=dict)
    diagnostics: list[Diagnostic] = field(default_factory=list)


def _require_dir(path: Path, kind: str) -> None:
    if not path.is_dir():
        raise DiscoveryError(f"{kind} directory not found: {path}")


def _describe(error: Exception) -> str:
    if isinstance(error, ValidationError):
        return "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'file'}: {err['msg']}" for err in error.errors()
        )
    return str(error)


def derive_prompt_name(file_path: Path) -> str:
    """summarize_samples.json -> summarize"""
    return file_path.stem.replace(SAMPLE_FILE_MARKER, "", 1)


def load_prompts(prompt_dir: str | Path) -> PromptLoadResult:
    """
    Load every YAML prompt definition in a directory.

    Files are read in sorted order. Unparseable files and definitions missing
    a name or template are skipped with a warning diagnostic.

    Raises:
        DiscoveryError: if the directory is missing, holds no YAML files, or
            none of its files yields a valid prompt
    """
    prompt_dir = Path(prompt_dir)
    _require_dir(prompt_dir, "Prompts")

    files = sorted(p for p in prompt_dir.iterdir() if p.is_file() and p.suffix in PROMPT_SUFFIXES)
    if not files:
        raise DiscoveryError(f"No YAML files found in: {prompt_dir}")

    result = PromptLoadResult()
    for file_path in files:
        try:
            data = yaml.safe_load(file_path.read_text(encoding="utf-8"))
            if not isinstance(data, dict) or not data.get("name") or not data.get("template"):
                result.diagnostics.append(
                    Diagnostic.warning(
                        DiagnosticCode.PROMPT_INVALID,
                        f"Skipping invalid prompt file: {file_path.name} (missing name or template)",
                        source=file_path.name,
                    )
                )
                continue
            prompt = PromptDefinition.model_validate(data)
        except (OSError, UnicodeDecodeError, yaml.YAMLError, ValidationError) as e:
            result.diagnostics.append(
                Diagnostic.warning(
                    DiagnosticCode.PROMPT_INVALID,
                    f"Failed to load prompt file {file_path.name}: {_describe(e)}",
                    source=file_path.name,
                )
            )
            continue

        result.prompts.append(prompt)
        logger.debug(f"Loaded prompt: {prompt.name} ({file_path.name})")

    if not result.prompts:
        raise DiscoveryError(f"No valid prompt definitions found in: {prompt_dir}")

    return result


def load_samples(samples_dir: str | Path) -> SampleLoadResult:
    """
    Load every JSON sample file in a directory, keyed by prompt name.

    A file may hold a bare list of test cases or an object with test_cases
    and an optional prompt_name. Without prompt_name the key is derived from
    the file name. Malformed files are skipped with a warning diagnostic.

    Raises:
        DiscoveryError: if the directory is missing
    """
    samples_dir = Path(samples_dir)
    _require_dir(samples_dir, "Samples")

    result = SampleLoadResult()
    files = sorted(p for p in samples_dir.iterdir() if p.is_file() and p.suffix == SAMPLE_SUFFIX)

    for file_path in files:
        try:
            data = json.loads(file_path.read_text(encoding="utf-8"))
            collection = SampleCollection.from_source(data)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as e:
            result.diagnostics.append(
                Diagnostic.warning(
                    DiagnosticCode.SAMPLES_INVALID,
                    f"Failed to load sample file {file_path.name}: {_describe(e)}",
                    source=file_path.name,
                )
            )
            continue

        prompt_name = collection.prompt_name or derive_prompt_name(file_path)
        if prompt_name in result.samples:
            result.diagnostics.append(
                Diagnostic.warning(
                    DiagnosticCode.SAMPLES_DUPLICATE,
                    f"Samples for {prompt_name} in {file_path.name} replace an earlier file",
                    source=file_path.name,
                )
            )

        if not collection.test_cases:
            result.diagnostics.append(
                Diagnostic.info(
                    DiagnosticCode.SAMPLES_EMPTY,
                    f"Sample file {file_path.name} has no test cases",
                    source=file_path.name,
                )
            )

        result.samples[prompt_name] = collection
        logger.debug(f"Loaded {len(collection.test_cases)} sample(s) for: {prompt_name} ({file_path.name})")

    return result
