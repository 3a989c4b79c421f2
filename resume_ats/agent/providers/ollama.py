import asyncio
import logging
import httpx
import ollama
from ollama import ResponseError as OllamaResponseError

from typing import Any, Dict, List

from ..exceptions import (
    EndpointError,
    EndpointUnreachableError,
    InferenceTimeoutError,
    ProviderError,
)
from .base import Provider
from ...schemas.pydantic import InferenceConfig

logger = logging.getLogger(__name__)


class OllamaProvider(Provider):
    """Ollama LLM provider for single-shot, non-streaming generation.

    One request per call, bounded by ``config.timeout_ms``. On expiry (or when
    the caller is cancelled) the in-flight request is cancelled, which returns
    its connection to the pool. No retries happen here.
    """

    def __init__(self, config: InferenceConfig | None = None):
        self.config = config or InferenceConfig()
        self._client = ollama.AsyncClient(
            host=self.config.endpoint,
            timeout=self.config.timeout_seconds,
        )

    async def aclose(self) -> None:
        """Release the underlying HTTP connection pool."""
        await self._client.close()

    async def __aenter__(self) -> "OllamaProvider":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    @property
    def options(self) -> Dict[str, Any]:
        return {
            "temperature": self.config.temperature,
            "num_ctx": self.config.context_window,
        }

    async def _generate(self, prompt: str) -> str:
        response = await self._client.generate(
            model=self.config.model,
            prompt=prompt,
            stream=False,
            options=self.options,
        )
        return response["response"]

    async def __call__(self, prompt: str, **generation_args: Any) -> str:
        if generation_args:
            logger.warning(f"OllamaProvider ignoring generation_args {generation_args}")

        logger.info(
            f"[Ollama] Sending request to {self.config.endpoint} with model {self.config.model}..."
        )
        try:
            text = await asyncio.wait_for(
                self._generate(prompt), timeout=self.config.timeout_seconds
            )
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            logger.error(f"Ollama request timed out after {self.config.timeout_ms} ms")
            raise InferenceTimeoutError(self.config.timeout_ms, self.config.model) from e
        except OllamaResponseError as e:
            logger.error(f"Ollama generation error: status={e.status_code}, message={e.error}")
            raise EndpointError(e.status_code, e.error) from e
        except (ConnectionError, httpx.TransportError) as e:
            logger.error(f"Ollama connection error: {e}")
            raise EndpointUnreachableError(self.config.endpoint, str(e)) from e

        if not isinstance(text, str):
            raise EndpointError(200, f"unexpected 'response' field: {text!r}")
        logger.debug(f"[Ollama] Raw response: {text[:200]}...")
        return text.strip()

    async def installed_models(self) -> List[str]:
        """List all installed models."""
        try:
            listing = await asyncio.wait_for(
                self._client.list(), timeout=self.config.timeout_seconds
            )
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            raise InferenceTimeoutError(self.config.timeout_ms, self.config.model) from e
        except OllamaResponseError as e:
            raise EndpointError(e.status_code, e.error) from e
        except (ConnectionError, httpx.TransportError) as e:
            raise EndpointUnreachableError(self.config.endpoint, str(e)) from e
        return [model_class.model for model_class in listing.models]

    async def healthcheck(self) -> None:
        """
        Verify the configured model is installed on the endpoint.

        Accepts both exact and tag-less matches (e.g. "llama3" vs "llama3:latest").

        Raises:
            ProviderError: If the endpoint cannot be queried or the model is missing
        """
        model_name = self.config.model
        installed = await self.installed_models()
        if model_name in installed or any(m.startswith(f"{model_name}:") for m in installed):
            logger.info(f"Ollama model '{model_name}' is installed")
            return
        error_msg = (
            f"Ollama model '{model_name}' is unavailable. "
            f"Available models: {installed}. "
            f"Please run 'ollama pull {model_name}'."
        )
        logger.error(error_msg)
        raise ProviderError(error_msg)
