from .documents import DocumentFormat, DocumentInput, ExtractedText, TextSource
from .inference import InferenceConfig
from .resume_analysis import ResumeAnalysisReport

__all__ = [
    "DocumentFormat",
    "DocumentInput",
    "ExtractedText",
    "TextSource",
    "InferenceConfig",
    "ResumeAnalysisReport",
]
