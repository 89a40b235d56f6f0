import anthropic
from prompt_as_code.clients.base import BaseLLMClient, LLMResponse, _TimeMeasure
from prompt_as_code.config import get_settings
from prompt_as_code.exceptions import LLMClientError


class ClaudeClient(BaseLLMClient):
    """Anthropic Claude API client."""

    provider = "Anthropic"

    def __init__(self, model_id: str = "claude-sonnet-4-20250514", api_key: str | None = None):
        super().__init__(model_id)
        self.client = anthropic.AsyncAnthropic(
            api_key=api_key or get_settings().anthropic_api_key,
            max_retries=0,
        )

    async def generate(
        self,
        prompt: str,
        temperature: float,
        max_tokens: int,
        **kwargs
    ) -> LLMResponse:
        """Generate a response using Claude."""
        timer = _TimeMeasure()

        try:
            with timer:
                response = await self.client.messages.create(
                    model=self.model_id,
                    max_tokens=max_tokens,
                    temperature=temperature,
                    messages=[{"role": "user", "content": prompt}],
                )
        except anthropic.AnthropicError as e:
            raise LLMClientError(self.provider, str(e)) from e

        # Concatenate text blocks; tool-use blocks are not expected here
        content = "".join(
            block.text for block in response.content if getattr(block, "type", None) == "text"
        )

        return LLMResponse(
            content=content,
            input_tokens=response.usage.input_tokens,
            output_tokens=response.usage.output_tokens,
            latency_ms=timer.elapsed_ms,
            model=self.model_id,
            raw_response=response,
        )
