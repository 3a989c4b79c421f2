from abc import ABC, abstractmethod
from typing import Any

from ..providers.base import Provider


class Strategy(ABC):
    @abstractmethod
    async def __call__(self, prompt: str, provider: Provider, **generation_args: Any) -> Any:
        """
        Run the prompt through the provider and turn the completion into a result.
        """
