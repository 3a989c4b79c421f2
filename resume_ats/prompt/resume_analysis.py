from ..services.exceptions import InvalidInputError

# Each side is cut to this many characters before it is embedded. The cut is a
# plain prefix slice, so anything past the limit never reaches the model.
MAX_INPUT_CHARS = 12000

SCHEMA = """{
  "overall_score": <integer between 0-100>,
  "keyword_matches": ["<list of matching technical keywords>"],
  "missing_keywords": ["<list of important keywords found in JD but missing in Resume>"],
  "formatting_tips": ["<specific advice on formatting>"],
  "improvement_suggestions": ["<actionable advice to improve the resume>"],
  "highlighted_resume": "<Resume text with <mark class='match'>matched_keyword</mark> and <mark class='missing'>missing_keyword_suggestion</mark> inserted>"
}"""

PROMPT = """
You are an expert ATS (Applicant Tracking System) resume analyzer.
Your task is to compare the Resume against the Job Description (JD).

Resume Content:
\"\"\"
{1}
\"\"\"

Job Description:
\"\"\"
{2}
\"\"\"

Analyze them and return a JSON object with the following structure:
{0}

IMPORTANT:
1. Return ONLY the valid JSON object, with no text before or after it.
2. Do NOT include markdown formatting like ```json.
3. Use exactly these six keys. Do not add keys.
4. Make sure the JSON is valid and parseable.
"""


def truncate(text: str, limit: int = MAX_INPUT_CHARS) -> str:
    return text[:limit]


def build_prompt(resume_text: str, jd_text: str) -> str:
    """Render the analysis prompt for one resume/JD pair.

    Raises:
        InvalidInputError: if either text is empty after trimming.
    """
    if not resume_text or not resume_text.strip():
        raise InvalidInputError("Resume text is empty; nothing to analyze.")
    if not jd_text or not jd_text.strip():
        raise InvalidInputError("Job description text is empty; nothing to analyze.")
    return PROMPT.format(SCHEMA, truncate(resume_text), truncate(jd_text))
