from prompt_as_code.services.execution import EngineResult, GenerationDefaults, ModelInvoker, run_all
from prompt_as_code.services.matching import ExecutablePair, MatchResult, match
from prompt_as_code.services.templating import RenderedTemplate, render

__all__ = [
    "EngineResult",
    "GenerationDefaults",
    "ModelInvoker",
    "run_all",
    "ExecutablePair",
    "MatchResult",
    "match",
    "RenderedTemplate",
    "render",
]
