import logging

from typing import Optional, Union

from .exceptions import MissingJdTextError, MissingResumeTextError
from .text_extractor import extract_async
from ..agent import AgentManager
from ..prompt import resume_analysis as analysis_prompt
from ..schemas.pydantic import (
    DocumentInput,
    InferenceConfig,
    ResumeAnalysisReport,
    TextSource,
)

logger = logging.getLogger(__name__)

AnalysisInput = Union[DocumentInput, str]


class AnalysisService:
    """
    Runs one resume/JD comparison end to end:
    extract -> validate -> build prompt -> infer -> interpret.

    Holds no per-request state, so one instance can serve concurrent calls.
    The first failure propagates unchanged; nothing is retried.
    """

    def __init__(
        self,
        config: Optional[InferenceConfig] = None,
        agent: Optional[AgentManager] = None,
    ):
        self.agent = agent or AgentManager(strategy="json", config=config)

    async def aclose(self) -> None:
        await self.agent.aclose()

    async def __aenter__(self) -> "AnalysisService":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def _resolve_text(self, value: Optional[AnalysisInput], source: TextSource) -> str:
        if value is None:
            return ""
        if isinstance(value, DocumentInput):
            extracted = await extract_async(value, source)
            return extracted.text
        return value

    async def analyze(
        self, resume: Optional[AnalysisInput], jd: Optional[AnalysisInput]
    ) -> ResumeAnalysisReport:
        """
        Compare a resume against a job description.

        Each side may be a ``DocumentInput`` to extract from or already
        extracted text.

        Raises:
            MissingResumeTextError / MissingJdTextError: a side is empty, raised
                before the model is contacted
            AnalysisInputError subclasses: extraction failures
            ProviderError / StrategyError subclasses: inference or parsing failures
        """
        resume_text = await self._resolve_text(resume, TextSource.RESUME)
        jd_text = await self._resolve_text(jd, TextSource.JOB_DESCRIPTION)

        if not resume_text.strip():
            raise MissingResumeTextError()
        if not jd_text.strip():
            raise MissingJdTextError()

        prompt = analysis_prompt.build_prompt(resume_text, jd_text)
        report = await self.agent.run(prompt)
        logger.info(f"Analysis complete: overall_score={report.overall_score}")
        return report

    async def analyze_request(
        self,
        resume_file: Optional[DocumentInput] = None,
        jd_file: Optional[DocumentInput] = None,
        resume_text: Optional[str] = None,
        jd_text: Optional[str] = None,
    ) -> ResumeAnalysisReport:
        """
        Entry point for the upload form: an attached file wins over the text
        field for the same side.
        """
        logger.info(
            f"[Analyze Request] Resume File: {resume_file.filename if resume_file else 'None'}, "
            f"JD File: {jd_file.filename if jd_file else 'None'}"
        )
        return await self.analyze(
            resume_file if resume_file is not None else (resume_text or ""),
            jd_file if jd_file is not None else (jd_text or ""),
        )
