from typing import Optional


class ProviderError(RuntimeError):
    """Raised when the underlying LLM provider fails"""


class InferenceTimeoutError(ProviderError):
    """Raised when the model does not answer within the configured deadline."""

    def __init__(self, timeout_ms: int, model: Optional[str] = None):
        self.timeout_ms = timeout_ms
        self.model = model
        super().__init__(f"Inference timed out after {timeout_ms} ms (model={model})")


class EndpointUnreachableError(ProviderError):
    """Raised when no connection to the inference endpoint can be made."""

    def __init__(self, endpoint: str, original_error: Optional[str] = None):
        self.endpoint = endpoint
        self.original_error = original_error
        message = f"Inference endpoint unreachable: {endpoint}"
        if original_error:
            message += f" ({original_error})"
        super().__init__(message)


class EndpointError(ProviderError):
    """Raised when the endpoint answers with a non-success status.

    ``status_code`` and ``body`` are kept for diagnostics.
    """

    def __init__(self, status_code: int, body: str = ""):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Inference endpoint returned status {status_code}: {body}")


class StrategyError(RuntimeError):
    """Raised when a Strategy cannot parse/return expected output"""


class NoJsonFoundError(StrategyError):
    def __init__(self, message: str = "No JSON object found in AI response."):
        super().__init__(message)


class MalformedJsonError(StrategyError):
    """The candidate JSON block did not parse.

    The parser message lives on ``detail`` and stays out of ``str(exc)``.
    """

    def __init__(self, detail: str = ""):
        self.detail = detail
        super().__init__("AI returned invalid JSON.")


class SchemaViolationError(StrategyError):
    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"AI response failed validation at '{field}': {reason}")
