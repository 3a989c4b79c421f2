from typing import List, Union

from pydantic import BaseModel, ConfigDict


class ResumeAnalysisReport(BaseModel):
    """Compatibility report produced by the model for one resume/JD pair.

    Validated in strict mode so that a string score or a list of numbers is
    rejected instead of coerced. ``overall_score`` is asked for as an integer
    but any JSON number is accepted (e.g. ``77.5``); it is neither rounded nor
    clamped, and callers can check ``score_in_range`` for out-of-range values.
    """

    model_config = ConfigDict(strict=True, frozen=True)

    overall_score: Union[int, float]
    keyword_matches: List[str]
    missing_keywords: List[str]
    formatting_tips: List[str]
    improvement_suggestions: List[str]
    highlighted_resume: str

    @property
    def score_in_range(self) -> bool:
        return 0 <= self.overall_score <= 100
