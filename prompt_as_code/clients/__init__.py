from prompt_as_code.clients.base import BaseLLMClient, LLMResponse
from prompt_as_code.clients.claude import ClaudeClient
from prompt_as_code.clients.openai import OpenAIClient
from prompt_as_code.clients.ollama import OllamaClient

__all__ = ["BaseLLMClient", "LLMResponse", "ClaudeClient", "OpenAIClient", "OllamaClient"]
