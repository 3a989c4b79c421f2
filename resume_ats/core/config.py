import logging

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    LL_MODEL: str = Field(
        default="llama3",
        validation_alias=AliasChoices("LL_MODEL", "OLLAMA_MODEL"),
    )
    LLM_BASE_URL: str = Field(
        default="http://localhost:11434",
        validation_alias=AliasChoices("LLM_BASE_URL", "OLLAMA_URL"),
    )
    # Low temperature keeps the JSON output stable between runs.
    LLM_TEMPERATURE: float = 0.2
    LLM_NUM_CTX: int = 2048
    LLM_TIMEOUT_MS: int = 60000
    LOG_LEVEL: str = "INFO"


settings = Settings()


def setup_logging(level: str | None = None) -> None:
    """Configure the root logger for scripts and local runs."""
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
