from enum import Enum
from pydantic import BaseModel, ConfigDict


class DiagnosticLevel(str, Enum):
    INFO = "info"
    WARNING = "warning"


class DiagnosticCode(str, Enum):
    PROMPT_INVALID = "prompt_invalid"
    SAMPLES_INVALID = "samples_invalid"
    SAMPLES_DUPLICATE = "samples_duplicate"
    SAMPLES_MISSING = "samples_missing"
    SAMPLES_UNUSED = "samples_unused"
    SAMPLES_EMPTY = "samples_empty"
    UNRESOLVED_PLACEHOLDERS = "unresolved_placeholders"
    NO_MATCHED_PAIRS = "no_matched_pairs"


class Diagnostic(BaseModel):
    """A non-fatal note collected while loading, matching or executing."""
    model_config = ConfigDict(frozen=True)

    level: DiagnosticLevel
    code: DiagnosticCode
    message: str
    source: str | None = None

    @classmethod
    def warning(cls, code: DiagnosticCode, message: str, source: str | None = None) -> "Diagnostic":
        return cls(level=DiagnosticLevel.WARNING, code=code, message=message, source=source)

    @classmethod
    def info(cls, code: DiagnosticCode, message: str, source: str | None = None) -> "Diagnostic":
        return cls(level=DiagnosticLevel.INFO, code=code, message=message, source=source)
