import json
import pytest
from unittest.mock import AsyncMock

from prompt_as_code.clients.base import LLMResponse
from prompt_as_code.schemas import PromptDefinition, SampleCollection, TestCase
from prompt_as_code.services.matching import ExecutablePair


@pytest.fixture
def mock_llm_response():
    """Factory for creating mock LLM responses."""
    def _create(
        content: str = "Test response",
        input_tokens: int = 100,
        output_tokens: int = 50,
        latency_ms: int = 500,
        model: str = "test-model",
    ) -> LLMResponse:
        return LLMResponse(
            content=content,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
            latency_ms=latency_ms,
            model=model,
        )
    return _create


@pytest.fixture
def mock_client(mock_llm_response):
    """A mock LLM client returning a fixed response."""
    client = AsyncMock()
    client.generate = AsyncMock(return_value=mock_llm_response())
    client.model_id = "gpt-4o"
    return client


@pytest.fixture
def prompt_factory():
    """Factory for creating prompt definitions."""
    def _create(
        name: str = "summarize",
        template: str = "Summarize: {{text}}",
        model: str | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> PromptDefinition:
        return PromptDefinition(
            name=name,
            template=template,
            model=model,
            temperature=temperature,
            max_tokens=max_tokens,
        )
    return _create


@pytest.fixture
def case_factory():
    """Factory for creating test cases."""
    def _create(
        name: str = "case_1",
        input: dict | None = None,
        should_contain: list[str] | None = None,
        should_not_contain: list[str] | None = None,
    ) -> TestCase:
        return TestCase(
            name=name,
            input=input if input is not None else {"text": "hello"},
            assertions={
                "should_contain": should_contain or [],
                "should_not_contain": should_not_contain or [],
            },
        )
    return _create


@pytest.fixture
def pair_factory(prompt_factory, case_factory):
    """Factory for prompt/sample pairs, cases given by name."""
    def _create(prompt_name: str = "summarize", case_names: list[str] | None = None, **prompt_kwargs) -> ExecutablePair:
        cases = [case_factory(name=n) for n in (case_names if case_names is not None else ["case_1"])]
        return ExecutablePair(
            prompt=prompt_factory(name=prompt_name, **prompt_kwargs),
            samples=SampleCollection(test_cases=cases),
        )
    return _create


@pytest.fixture
def echo_invoker():
    """Invocation capability that records calls and echoes the rendered text."""
    invoker = AsyncMock(side_effect=lambda text, params: text)
    return invoker


@pytest.fixture
def harness_dirs(tmp_path):
    """Prompt and sample directories with one matching prompt/sample pair."""
    prompt_dir = tmp_path / "prompts"
    samples_dir = tmp_path / "samples"
    prompt_dir.mkdir()
    samples_dir.mkdir()

    (prompt_dir / "capital.yaml").write_text(
        "name: capital\n"
        "version: 1.0\n"
        "description: Capital city lookup\n"
        "model: gpt-4o-mini\n"
        "template: \"What is the capital of {{country}}?\"\n"
    )
    (samples_dir / "capital_samples.json").write_text(json.dumps([
        {
            "name": "france",
            "input": {"country": "France"},
            "assertions": {"should_contain": ["paris"], "should_not_contain": ["London"]},
        },
        {
            "name": "japan",
            "input": {"country": "Japan"},
            "assertions": {"should_contain": ["tokyo"]},
        },
    ]))
    return prompt_dir, samples_dir
