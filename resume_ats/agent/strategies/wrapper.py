import json
import logging

from typing import Any

from pydantic import ValidationError

from ..exceptions import MalformedJsonError, NoJsonFoundError, SchemaViolationError
from ..providers.base import Provider
from .base import Strategy
from ...schemas.pydantic import ResumeAnalysisReport

logger = logging.getLogger(__name__)


def extract_json_block(raw: str) -> str:
    """Return the text between the first '{' and the last '}' inclusive.

    Assumes the model emitted a single top-level object, possibly wrapped in
    prose or code fences.
    """
    start = raw.find("{")
    end = raw.rfind("}")
    if start == -1 or end == -1 or end < start:
        raise NoJsonFoundError()
    return raw[start : end + 1]


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not JSON and cannot be written back out.
    raise ValueError(f"non-standard JSON constant {name!r}")


def validate_report(payload: Any) -> ResumeAnalysisReport:
    """Check a decoded payload against the report shape.

    Raises:
        SchemaViolationError: naming the first missing or mistyped field
    """
    if not isinstance(payload, dict):
        raise SchemaViolationError("<root>", f"expected a JSON object, got {type(payload).__name__}")
    try:
        return ResumeAnalysisReport.model_validate(payload)
    except ValidationError as e:
        first = e.errors()[0]
        loc = first["loc"]
        field = str(loc[0]) if loc else "<root>"
        path = ".".join(str(part) for part in loc)
        raise SchemaViolationError(field, f"{path}: {first['msg']}") from e


class JSONWrapper(Strategy):
    """Turns a raw completion into a validated ``ResumeAnalysisReport``."""

    def interpret(self, raw: str) -> ResumeAnalysisReport:
        block = extract_json_block(raw)
        try:
            payload = json.loads(block, parse_constant=_reject_constant)
        except ValueError as e:
            logger.error(f"[JSONWrapper] JSON parse error: {e}. Raw text: {block[:500]}")
            raise MalformedJsonError(str(e)) from e

        report = validate_report(payload)
        if not report.score_in_range:
            logger.warning(
                f"[JSONWrapper] overall_score {report.overall_score} outside 0-100; passing through"
            )
        return report

    async def __call__(
        self, prompt: str, provider: Provider, **generation_args: Any
    ) -> ResumeAnalysisReport:
        response = await provider(prompt, **generation_args)
        return self.interpret(response)
