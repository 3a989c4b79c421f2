from .exceptions import (
    AnalysisInputError,
    UnsupportedFormatError,
    ExtractionFailedError,
    InvalidInputError,
    MissingResumeTextError,
    MissingJdTextError,
    is_client_error,
)
from .text_extractor import extract, extract_async
from .analysis_service import AnalysisService

__all__ = [
    "AnalysisService",
    "extract",
    "extract_async",
    "AnalysisInputError",
    "UnsupportedFormatError",
    "ExtractionFailedError",
    "InvalidInputError",
    "MissingResumeTextError",
    "MissingJdTextError",
    "is_client_error",
]
