import httpx
from prompt_as_code.clients.base import BaseLLMClient, LLMResponse, _TimeMeasure
from prompt_as_code.config import get_settings
from prompt_as_code.exceptions import LLMClientError


class OllamaClient(BaseLLMClient):
    """Ollama API client for local models (e.g., Llama 3.1)."""

    provider = "Ollama"

    def __init__(self, model_id: str = "llama3.1", base_url: str | None = None):
        super().__init__(model_id)
        settings = get_settings()
        self.base_url = (base_url or settings.ollama_base_url).rstrip("/")
        self.timeout = settings.ollama_timeout

    async def generate(
        self,
        prompt: str,
        temperature: float,
        max_tokens: int,
        **kwargs
    ) -> LLMResponse:
        """Generate a non-streaming completion from the local Ollama server."""
        timer = _TimeMeasure()

        payload = {
            "model": self.model_id,
            "prompt": prompt,
            "stream": False,
            "options": {
                "temperature": temperature,
                "num_predict": max_tokens,
            }
        }

        try:
            with timer:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.post(f"{self.base_url}/api/generate", json=payload)
                    response.raise_for_status()
                    data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            raise LLMClientError(self.provider, str(e)) from e

        return LLMResponse(
            content=data.get("response", ""),
            # Ollama provides eval_count (output) and prompt_eval_count (input)
            input_tokens=data.get("prompt_eval_count", 0),
            output_tokens=data.get("eval_count", 0),
            latency_ms=timer.elapsed_ms,
            model=self.model_id,
            raw_response=data,
        )
