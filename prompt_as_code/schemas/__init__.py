from prompt_as_code.schemas.common import Diagnostic, DiagnosticCode, DiagnosticLevel
from prompt_as_code.schemas.prompt import GenerationParams, PromptDefinition
from prompt_as_code.schemas.sample import Assertions, SampleCollection, TestCase
from prompt_as_code.schemas.result import (
    AssertionOutcome,
    AssertionsChecked,
    RunReport,
    RunSummary,
    TestResult,
)

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticLevel",
    "GenerationParams",
    "PromptDefinition",
    "Assertions",
    "SampleCollection",
    "TestCase",
    "AssertionOutcome",
    "AssertionsChecked",
    "RunReport",
    "RunSummary",
    "TestResult",
]
