from pydantic import BaseModel, Field, field_validator

from ...core import Settings, settings as default_settings

_GENERATE_PATH = "/api/generate"


class InferenceConfig(BaseModel):
    """Explicit configuration for a single inference endpoint."""

    endpoint: str = "http://localhost:11434"
    model: str = "llama3"
    temperature: float = 0.2
    context_window: int = Field(default=2048, gt=0)
    timeout_ms: int = Field(default=60000, gt=0)

    @field_validator("endpoint")
    @classmethod
    def _strip_generate_path(cls, value: str) -> str:
        # Accept both the server root and the full generate URL.
        value = value.rstrip("/")
        if value.endswith(_GENERATE_PATH):
            value = value[: -len(_GENERATE_PATH)]
        return value

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "InferenceConfig":
        settings = settings or default_settings
        return cls(
            endpoint=settings.LLM_BASE_URL,
            model=settings.LL_MODEL,
            temperature=settings.LLM_TEMPERATURE,
            context_window=settings.LLM_NUM_CTX,
            timeout_ms=settings.LLM_TIMEOUT_MS,
        )
