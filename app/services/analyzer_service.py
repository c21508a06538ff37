from __future__ import annotations

import asyncio
import hashlib
import json
import logging
import random
import time

from app.builder import ResumeData, resume_data_to_text
from app.core.config import settings
from app.scoring import AnalysisError, AnalysisResult, analyze

logger = logging.getLogger("app.analyzer")

ANALYSIS_FAILED_MESSAGE = "Failed to analyze resume"


def _short_hash(value: str) -> str:
    return hashlib.sha256(value.encode("utf-8", errors="ignore")).hexdigest()[:12]


def _rng_for(seed: int | None) -> random.Random | None:
    if seed is None:
        return None
    return random.Random(seed)


def _default_delay_seconds() -> float:
    return settings.analysis_delay_ms / 1000


async def analyze_resume_text(
    text: str,
    *,
    seed: int | None = None,
    delay_seconds: float | None = None,
) -> AnalysisResult:
    """Run the scorer behind an async boundary.

    ``delay_seconds`` (default from ANALYSIS_DELAY_MS) is an artificial pause
    before scoring. Failures are logged and re-raised as ``AnalysisError``; the
    caller decides whether to resubmit.
    """
    started_at = time.perf_counter()
    delay = _default_delay_seconds() if delay_seconds is None else max(0.0, delay_seconds)
    try:
        if delay > 0:
            await asyncio.sleep(delay)
        result = analyze(text, rng=_rng_for(seed))
    except Exception as exc:
        logger.exception(
            json.dumps(
                {
                    "event": "analysis_failed",
                    "error": str(exc),
                    "text_len": len(text or ""),
                    "duration_ms": int((time.perf_counter() - started_at) * 1000),
                }
            )
        )
        raise AnalysisError(ANALYSIS_FAILED_MESSAGE) from exc

    logger.info(
        json.dumps(
            {
                "event": "analysis_complete",
                "text_len": len(text or ""),
                "text_hash": _short_hash(text or ""),
                "seeded": seed is not None,
                "ats_score": result.ats_score,
                "found_keywords": len(result.keywords.found),
                "duration_ms": int((time.perf_counter() - started_at) * 1000),
            }
        )
    )
    return result


async def build_and_analyze(
    data: ResumeData,
    *,
    seed: int | None = None,
    delay_seconds: float | None = None,
) -> tuple[str, AnalysisResult]:
    text = resume_data_to_text(data)
    result = await analyze_resume_text(text, seed=seed, delay_seconds=delay_seconds)
    return text, result
