from .resume_analysis import MAX_INPUT_CHARS, PROMPT, SCHEMA, build_prompt

__all__ = ["MAX_INPUT_CHARS", "PROMPT", "SCHEMA", "build_prompt"]
