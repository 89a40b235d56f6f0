from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

# Generation defaults, used when neither the CLI nor the prompt file sets them
DEFAULT_MODEL = "gpt-3.5-turbo"
DEFAULT_TEMPERATURE = 0.1
DEFAULT_MAX_TOKENS = 500


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # LLM API Keys
    openai_api_key: str = ""
    anthropic_api_key: str = ""

    # Ollama (optional, for local models)
    ollama_base_url: str = "http://localhost:11434"
    ollama_timeout: float = 120.0

    default_model: str = DEFAULT_MODEL
    default_temperature: float = DEFAULT_TEMPERATURE
    default_max_tokens: int = DEFAULT_MAX_TOKENS

    # Discovery locations
    prompt_dir: str = "./prompts/v1"
    samples_dir: str = "./samples"

    # App settings
    log_level: str = "INFO"
    # Switches the default log level to DEBUG
    debug: bool = False


@lru_cache
def get_settings() -> Settings:
    return Settings()
