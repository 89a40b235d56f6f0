import openai
from openai import AsyncOpenAI
from prompt_as_code.clients.base import BaseLLMClient, LLMResponse, _TimeMeasure
from prompt_as_code.config import get_settings
from prompt_as_code.exceptions import LLMClientError


class OpenAIClient(BaseLLMClient):
    """OpenAI chat completions client."""

    provider = "OpenAI"

    def __init__(self, model_id: str = "gpt-3.5-turbo", api_key: str | None = None):
        super().__init__(model_id)
        # max_retries=0: a failed call is reported once, never re-attempted
        self.client = AsyncOpenAI(api_key=api_key or get_settings().openai_api_key, max_retries=0)

    async def generate(
        self,
        prompt: str,
        temperature: float,
        max_tokens: int,
        **kwargs
    ) -> LLMResponse:
        """Generate a response with a single user message."""
        timer = _TimeMeasure()

        try:
            with timer:
                response = await self.client.chat.completions.create(
                    model=self.model_id,
                    messages=[{"role": "user", "content": prompt}],
                    temperature=temperature,
                    max_tokens=max_tokens,
                )
        except openai.OpenAIError as e:
            raise LLMClientError(self.provider, str(e)) from e

        content = response.choices[0].message.content if response.choices else None
        usage = response.usage

        return LLMResponse(
            content=content or "",
            input_tokens=usage.prompt_tokens if usage else 0,
            output_tokens=usage.completion_tokens if usage else 0,
            latency_ms=timer.elapsed_ms,
            model=self.model_id,
            raw_response=response,
        )
