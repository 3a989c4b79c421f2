#!/usr/bin/env python3
"""
Run a single resume / job-description analysis from the command line.

Usage:
    python scripts/analyze.py --resume resume.pdf --jd job.txt
    python scripts/analyze.py --resume-text "Python developer ..." --jd-text "Looking for ..."
"""

import argparse
import asyncio
import os
import sys

# Add package to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from resume_ats.agent.exceptions import ProviderError, StrategyError  # noqa: E402
from resume_ats.core import settings, setup_logging  # noqa: E402
from resume_ats.schemas.pydantic import DocumentInput, InferenceConfig  # noqa: E402
from resume_ats.services import AnalysisInputError, AnalysisService  # noqa: E402


def _load(path):
    if not path:
        return None
    with open(path, "rb") as f:
        return DocumentInput.from_upload(os.path.basename(path), f.read())


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Score a resume against a job description.")
    parser.add_argument("--resume", help="Resume file (.pdf, .docx, .txt)")
    parser.add_argument("--jd", help="Job description file (.pdf, .docx, .txt)")
    parser.add_argument("--resume-text", help="Resume as plain text")
    parser.add_argument("--jd-text", help="Job description as plain text")
    parser.add_argument("--model", default=settings.LL_MODEL)
    parser.add_argument("--endpoint", default=settings.LLM_BASE_URL)
    parser.add_argument("--timeout-ms", type=int, default=settings.LLM_TIMEOUT_MS)
    parser.add_argument("--log-level", default=settings.LOG_LEVEL)
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.log_level)

    config = InferenceConfig(
        endpoint=args.endpoint,
        model=args.model,
        temperature=settings.LLM_TEMPERATURE,
        context_window=settings.LLM_NUM_CTX,
        timeout_ms=args.timeout_ms,
    )

    async def _run():
        async with AnalysisService(config=config) as service:
            return await service.analyze_request(
                resume_file=_load(args.resume),
                jd_file=_load(args.jd),
                resume_text=args.resume_text,
                jd_text=args.jd_text,
            )

    try:
        report = asyncio.run(_run())
    except AnalysisInputError as e:
        print(f"Input error: {e}", file=sys.stderr)
        return 2
    except (ProviderError, StrategyError) as e:
        print(f"Analysis failed: {e}", file=sys.stderr)
        return 1

    print(report.model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
