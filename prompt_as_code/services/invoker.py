from typing import Callable

from prompt_as_code.clients.base import BaseLLMClient
from prompt_as_code.clients.claude import ClaudeClient
from prompt_as_code.clients.openai import OpenAIClient
from prompt_as_code.clients.ollama import OllamaClient
from prompt_as_code.config import Settings, get_settings
from prompt_as_code.exceptions import ConfigurationError
from prompt_as_code.schemas import GenerationParams

LOCAL_MODEL_FAMILIES = ("llama", "mistral", "mixtral", "phi", "qwen", "gemma")


def provider_for_model(model_id: str) -> str:
    """Map a model name to its provider: anthropic, ollama or openai (the default)."""
    model = model_id.lower()
    if "claude" in model:
        return "anthropic"
    if "gpt" in model or model.startswith(("o1", "o3", "o4")):
        return "openai"
    if any(local in model for local in LOCAL_MODEL_FAMILIES):
        return "ollama"
    # Default to OpenAI for unknown models
    return "openai"


def get_client_for_model(
    model_id: str,
    settings: Settings | None = None,
    openai_api_key: str | None = None,
) -> BaseLLMClient:
    """Factory function to get the appropriate client for a model."""
    settings = settings or get_settings()
    provider = provider_for_model(model_id)

    if provider == "anthropic":
        return ClaudeClient(model_id=model_id, api_key=settings.anthropic_api_key)
    if provider == "ollama":
        return OllamaClient(model_id=model_id, base_url=settings.ollama_base_url)
    return OpenAIClient(model_id=model_id, api_key=openai_api_key or settings.openai_api_key)


def require_api_key(model_id: str, settings: Settings, openai_api_key: str | None = None) -> None:
    """Fail fast when the provider behind a model needs a key that is not configured."""
    provider = provider_for_model(model_id)
    if provider == "openai" and not (openai_api_key or settings.openai_api_key):
        raise ConfigurationError(
            "OpenAI API key required. Set OPENAI_API_KEY env var or use --api-key flag"
        )
    if provider == "anthropic" and not settings.anthropic_api_key:
        raise ConfigurationError("Anthropic API key required. Set ANTHROPIC_API_KEY env var")


class ClientInvoker:
    """
    Adapts LLM clients to the engine's invoke(text, params) capability.

    One client is created per model name and reused for the rest of the run.
    """

    def __init__(self, client_factory: Callable[[str], BaseLLMClient] | None = None):
        self._client_factory = client_factory or get_client_for_model
        self._clients: dict[str, BaseLLMClient] = {}

    def client_for(self, model_id: str) -> BaseLLMClient:
        if model_id not in self._clients:
            self._clients[model_id] = self._client_factory(model_id)
        return self._clients[model_id]

    async def __call__(self, text: str, params: GenerationParams) -> str:
        client = self.client_for(params.model)
        response = await client.generate(
            prompt=text,
            temperature=params.temperature,
            max_tokens=params.max_tokens,
        )
        return response.content
