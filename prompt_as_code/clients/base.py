from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any
import time


@dataclass
class LLMResponse:
    """Standardized response from any LLM provider."""
    content: str
    input_tokens: int
    output_tokens: int
    latency_ms: int
    model: str
    raw_response: Any = None  # Store provider-specific response if needed


class BaseLLMClient(ABC):
    """Abstract base class for LLM API clients."""

    provider: str = "LLM"

    def __init__(self, model_id: str):
        self.model_id = model_id

    @abstractmethod
    async def generate(
        self,
        prompt: str,
        temperature: float,
        max_tokens: int,
        **kwargs
    ) -> LLMResponse:
        """
        Generate a single response from the LLM.

        Args:
            prompt: The rendered prompt, sent as one user message
            temperature: Sampling temperature
            max_tokens: Maximum tokens to generate

        Returns:
            LLMResponse with content, token counts and latency

        Raises:
            LLMClientError: on any transport, API or authentication failure
        """
        pass

    def __repr__(self):
        return f"<{self.__class__.__name__}(model_id={self.model_id})>"


class _TimeMeasure:
    """Helper class for measuring execution time."""
    def __init__(self):
        self.start_time = None
        self.elapsed_ms = 0

    def __enter__(self):
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, *args):
        self.elapsed_ms = int((time.perf_counter() - self.start_time) * 1000)
