"""
Tests for the Ollama generation provider.

These tests verify:
1. The request carries model, prompt, stream=False and the sampling options
2. Ollama ResponseError is wrapped as EndpointError with the status code
3. Connection failures become EndpointUnreachableError
4. A slow endpoint is cut off with InferenceTimeoutError
5. Healthcheck functionality
"""

import asyncio

import httpx
import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from resume_ats.schemas.pydantic import InferenceConfig


class TestOllamaProvider:
    """Tests for OllamaProvider."""

    @pytest.fixture
    def config(self):
        return InferenceConfig(
            endpoint="http://ollama.test:11434/api/generate",
            model="llama3",
            temperature=0.2,
            context_window=2048,
            timeout_ms=500,
        )

    @pytest.fixture
    def mock_ollama_client(self):
        """Create a mock async Ollama client."""
        client = MagicMock()
        client.generate = AsyncMock(return_value={"response": '  {"overall_score": 70}  '})
        mock_model = MagicMock()
        mock_model.model = "llama3:latest"
        client.list = AsyncMock(return_value=MagicMock(models=[mock_model]))
        return client

    @pytest.fixture
    def provider_with_mock_client(self, config, mock_ollama_client):
        """Create an OllamaProvider with a mocked client."""
        with patch(
            "resume_ats.agent.providers.ollama.ollama.AsyncClient",
            return_value=mock_ollama_client,
        ) as client_cls:
            from resume_ats.agent.providers.ollama import OllamaProvider
            provider = OllamaProvider(config=config)
            return provider, mock_ollama_client, client_cls

    def test_client_uses_server_root_and_timeout(self, provider_with_mock_client):
        """The generate path is stripped and the timeout handed to the HTTP client."""
        _, _, client_cls = provider_with_mock_client

        client_cls.assert_called_once_with(host="http://ollama.test:11434", timeout=0.5)

    @pytest.mark.asyncio
    async def test_generate_sends_non_streaming_request(self, provider_with_mock_client):
        """Test the request body and that the completion comes back stripped."""
        provider, mock_client, _ = provider_with_mock_client

        result = await provider("analyze this")

        assert result == '{"overall_score": 70}'
        mock_client.generate.assert_awaited_once_with(
            model="llama3",
            prompt="analyze this",
            stream=False,
            options={"temperature": 0.2, "num_ctx": 2048},
        )

    @pytest.mark.asyncio
    async def test_response_error_becomes_endpoint_error(self, provider_with_mock_client):
        """Test that Ollama ResponseError is wrapped as EndpointError."""
        provider, mock_client, _ = provider_with_mock_client

        from ollama import ResponseError
        from resume_ats.agent.exceptions import EndpointError

        mock_client.generate.side_effect = ResponseError("model runner crashed", status_code=500)

        with pytest.raises(EndpointError) as exc_info:
            await provider("prompt")

        assert exc_info.value.status_code == 500
        assert "model runner crashed" in exc_info.value.body
        assert "500" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_connection_error_becomes_unreachable(self, provider_with_mock_client):
        """Test that a refused connection raises EndpointUnreachableError."""
        provider, mock_client, _ = provider_with_mock_client

        from resume_ats.agent.exceptions import EndpointUnreachableError

        mock_client.generate.side_effect = ConnectionError("Failed to connect to Ollama")

        with pytest.raises(EndpointUnreachableError) as exc_info:
            await provider("prompt")

        assert exc_info.value.endpoint == "http://ollama.test:11434"

    @pytest.mark.asyncio
    async def test_httpx_connect_error_becomes_unreachable(self, provider_with_mock_client):
        provider, mock_client, _ = provider_with_mock_client

        from resume_ats.agent.exceptions import EndpointUnreachableError

        mock_client.generate.side_effect = httpx.ConnectError("connection refused")

        with pytest.raises(EndpointUnreachableError):
            await provider("prompt")

    @pytest.mark.asyncio
    async def test_slow_endpoint_times_out(self, provider_with_mock_client):
        """Test that a call exceeding timeout_ms is cancelled and reported."""
        provider, mock_client, _ = provider_with_mock_client

        from resume_ats.agent.exceptions import InferenceTimeoutError

        cancelled = asyncio.Event()

        async def slow_generate(**kwargs):
            try:
                await asyncio.sleep(10)
            except asyncio.CancelledError:
                cancelled.set()
                raise
            return {"response": "{}"}

        mock_client.generate.side_effect = slow_generate

        with pytest.raises(InferenceTimeoutError) as exc_info:
            await provider("prompt")

        assert exc_info.value.timeout_ms == 500
        assert cancelled.is_set()

    @pytest.mark.asyncio
    async def test_caller_cancellation_aborts_request(self, provider_with_mock_client):
        """Cancelling the caller cancels the in-flight generate call."""
        provider, mock_client, _ = provider_with_mock_client

        started = asyncio.Event()
        cancelled = asyncio.Event()

        async def hanging_generate(**kwargs):
            started.set()
            try:
                await asyncio.sleep(10)
            except asyncio.CancelledError:
                cancelled.set()
                raise
            return {"response": "{}"}

        mock_client.generate.side_effect = hanging_generate

        task = asyncio.create_task(provider("prompt"))
        await started.wait()
        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task

        assert cancelled.is_set()
        assert mock_client.generate.await_count == 1

    @pytest.mark.asyncio
    async def test_aclose_closes_client(self, provider_with_mock_client):
        provider, mock_client, _ = provider_with_mock_client
        mock_client.close = AsyncMock()

        async with provider:
            pass

        mock_client.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_httpx_timeout_becomes_inference_timeout(self, provider_with_mock_client):
        provider, mock_client, _ = provider_with_mock_client

        from resume_ats.agent.exceptions import InferenceTimeoutError

        mock_client.generate.side_effect = httpx.ReadTimeout("read timed out")

        with pytest.raises(InferenceTimeoutError):
            await provider("prompt")

    @pytest.mark.asyncio
    async def test_no_retry_on_failure(self, provider_with_mock_client):
        """A failed call is attempted exactly once."""
        provider, mock_client, _ = provider_with_mock_client

        from ollama import ResponseError
        from resume_ats.agent.exceptions import EndpointError

        mock_client.generate.side_effect = ResponseError("busy", status_code=503)

        with pytest.raises(EndpointError):
            await provider("prompt")

        assert mock_client.generate.await_count == 1

    @pytest.mark.asyncio
    async def test_healthcheck_success(self, provider_with_mock_client):
        """Test healthcheck passes when the model is installed under a tag."""
        provider, _, _ = provider_with_mock_client

        # Should not raise
        await provider.healthcheck()

    @pytest.mark.asyncio
    async def test_healthcheck_fails_when_model_not_found(self, provider_with_mock_client):
        """Test healthcheck fails when model is not available."""
        provider, mock_client, _ = provider_with_mock_client

        from resume_ats.agent.exceptions import ProviderError

        mock_client.list.return_value = MagicMock(models=[])

        with pytest.raises(ProviderError) as exc_info:
            await provider.healthcheck()

        assert "ollama pull llama3" in str(exc_info.value)
