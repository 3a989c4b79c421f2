from typing import Optional


class AnalysisInputError(ValueError):
    """Base class for problems with the documents or text supplied by a caller.

    These are client faults; everything raised from ``resume_ats.agent`` is a
    server fault.
    """


class UnsupportedFormatError(AnalysisInputError):
    def __init__(self, format: str, filename: Optional[str] = None):
        self.format = format
        self.filename = filename
        super().__init__(f"Unsupported file type: {format or '<none>'} (file: {filename})")


class ExtractionFailedError(AnalysisInputError):
    """Raised when a document cannot be decoded into text."""

    def __init__(
        self,
        filename: Optional[str] = None,
        format: Optional[str] = None,
        original_error: Optional[str] = None,
        message: Optional[str] = None,
    ):
        self.filename = filename
        self.format = format
        self.original_error = original_error
        if message is None:
            message = f"Failed to extract text from file {filename} ({format})"
            if original_error:
                message += f": {original_error}"
        super().__init__(message)


class InvalidInputError(AnalysisInputError):
    """Raised when text handed to the prompt builder is empty."""


class MissingResumeTextError(InvalidInputError):
    def __init__(self, message: str = "Resume text or file is required."):
        super().__init__(message)


class MissingJdTextError(InvalidInputError):
    def __init__(self, message: str = "Job description text or file is required."):
        super().__init__(message)


def is_client_error(exc: BaseException) -> bool:
    """True when ``exc`` was caused by the caller's input rather than the backend."""
    return isinstance(exc, AnalysisInputError)
