"""
Text extraction for uploaded resumes and job descriptions.

Supported format tags:
- pdf: page text in document order via pypdf, no layout reconstruction
- docx: body paragraphs (including those inside body tables) via python-docx;
  headers, footers and embedded objects are skipped
- plain-text: the buffer decoded as UTF-8, verbatim

Parsing is CPU-bound and synchronous; ``extract_async`` pushes it onto a
worker thread so the event loop is not blocked.
"""

import io
import logging

from docx import Document
from fastapi.concurrency import run_in_threadpool
from pypdf import PdfReader

from .exceptions import ExtractionFailedError, UnsupportedFormatError
from ..schemas.pydantic import DocumentFormat, DocumentInput, ExtractedText, TextSource

logger = logging.getLogger(__name__)


def _read_pdf(data: bytes) -> str:
    reader = PdfReader(io.BytesIO(data))
    return "\n".join(page.extract_text() or "" for page in reader.pages)


def _read_docx(data: bytes) -> str:
    doc = Document(io.BytesIO(data))
    paragraphs = [para.text for para in doc.paragraphs]
    for table in doc.tables:
        for row in table.rows:
            for cell in row.cells:
                paragraphs.extend(para.text for para in cell.paragraphs)
    return "\n".join(paragraphs)


def _read_plain_text(data: bytes) -> str:
    return data.decode("utf-8")


_READERS = {
    DocumentFormat.PDF.value: _read_pdf,
    DocumentFormat.DOCX.value: _read_docx,
    DocumentFormat.PLAIN_TEXT.value: _read_plain_text,
}


def extract(doc: DocumentInput, source: TextSource = TextSource.RESUME) -> ExtractedText:
    """Decode a document into plain text.

    Raises:
        UnsupportedFormatError: the format tag is not pdf, docx or plain-text
        ExtractionFailedError: the buffer is empty or cannot be decoded
    """
    reader = _READERS.get(doc.format)
    if reader is None:
        raise UnsupportedFormatError(doc.format, doc.filename)

    if not doc.data:
        raise ExtractionFailedError(
            filename=doc.filename,
            format=doc.format,
            message=f"No file buffer provided for {doc.filename}.",
        )

    try:
        text = reader(doc.data)
    except Exception as e:
        logger.error(f"[Parser] Error processing file {doc.filename} ({doc.format}): {e}")
        raise ExtractionFailedError(
            filename=doc.filename, format=doc.format, original_error=str(e)
        ) from e

    logger.info(
        f"[Parser] Extracted {len(text)} chars from {doc.format} "
        f"({len(doc.data)} bytes): {doc.filename}"
    )
    return ExtractedText(text=text, source=source)


async def extract_async(
    doc: DocumentInput, source: TextSource = TextSource.RESUME
) -> ExtractedText:
    return await run_in_threadpool(extract, doc, source)
