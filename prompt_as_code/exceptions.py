"""Exception hierarchy for the prompt harness."""


class HarnessError(Exception):
    """Base class for harness errors that should stop a run."""


class DiscoveryError(HarnessError):
    """Prompt or sample sources could not be discovered."""


class ConfigurationError(HarnessError):
    """The harness is missing configuration it needs to run (e.g. an API key)."""


class LLMClientError(HarnessError):
    """A model provider call failed.

    Raised by the clients and recorded on the failing test case by the
    execution engine; it never aborts a run on its own.
    """

    def __init__(self, provider: str, message: str):
        self.provider = provider
        super().__init__(f"{provider} API error: {message}")
