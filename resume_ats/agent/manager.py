from typing import Any

from .providers.base import Provider
from .strategies.wrapper import JSONWrapper
from ..schemas.pydantic import InferenceConfig, ResumeAnalysisReport


class AgentManager:
    def __init__(self,
                 strategy: str | None = None,
                 config: InferenceConfig | None = None,
                 provider: Provider | None = None,
                 ) -> None:
        match strategy:
            case "json" | None:
                self.strategy = JSONWrapper()
            case _:
                raise ValueError(f"Unknown strategy: {strategy}")
        self.config = config or InferenceConfig.from_settings()
        self._provider = provider

    def _get_provider(self) -> Provider:
        if self._provider is None:
            from .providers.ollama import OllamaProvider
            self._provider = OllamaProvider(config=self.config)
        return self._provider

    async def aclose(self) -> None:
        """Close the provider if this manager owns one with open connections."""
        aclose = getattr(self._provider, "aclose", None)
        if aclose is not None:
            await aclose()

    async def run(self, prompt: str, **kwargs: Any) -> ResumeAnalysisReport:
        """
        Run the agent with the given prompt and generation arguments.
        """
        provider = self._get_provider()
        return await self.strategy(prompt, provider, **kwargs)
