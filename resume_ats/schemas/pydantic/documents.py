import os
from enum import Enum

from pydantic import BaseModel, ConfigDict


class DocumentFormat(str, Enum):
    PDF = "pdf"
    DOCX = "docx"
    PLAIN_TEXT = "plain-text"


class TextSource(str, Enum):
    RESUME = "resume"
    JOB_DESCRIPTION = "job-description"


_EXTENSION_FORMATS = {
    ".pdf": DocumentFormat.PDF,
    ".docx": DocumentFormat.DOCX,
    ".txt": DocumentFormat.PLAIN_TEXT,
}


class DocumentInput(BaseModel):
    """Raw uploaded document. ``format`` is kept as a plain string so that
    unknown tags reach the extractor and fail there."""

    model_config = ConfigDict(frozen=True)

    data: bytes
    format: str
    filename: str = "<memory>"

    @classmethod
    def from_upload(cls, filename: str, data: bytes) -> "DocumentInput":
        """Build a document, inferring the format tag from the file extension."""
        ext = os.path.splitext(filename)[1].lower()
        fmt = _EXTENSION_FORMATS.get(ext)
        return cls(data=data, format=fmt.value if fmt else ext, filename=filename)


class ExtractedText(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    source: TextSource

    @property
    def is_blank(self) -> bool:
        return not self.text.strip()
