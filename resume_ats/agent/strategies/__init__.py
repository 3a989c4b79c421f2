from .base import Strategy
from .wrapper import JSONWrapper, extract_json_block, validate_report

__all__ = ["Strategy", "JSONWrapper", "extract_json_block", "validate_report"]
