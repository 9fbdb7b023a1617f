from __future__ import annotations

from typing import Any

from app.schemas.explain import (
    ExplainReason,
    ExplainResult,
    InterviewQuestions,
    SkillBreakdown,
)

from .config import DEFAULT_EXPLAIN_CONFIG, ExplainConfig
from .evidence import locate_evidence
from .ranking import rank_keywords
from .scoring import overlap_score
from .text import split_sentences
from .tokenize import tokenize

_MATCH_PROMPT = "Walk me through your hands-on experience with {keyword}."
_GAP_PROMPT = "How would you ramp up quickly on {keyword} if needed?"


def _as_text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def partition_keywords(jd_keywords: list[str], resume_keywords: list[str]) -> tuple[list[str], list[str]]:
    resume_set = set(resume_keywords)
    matched = [keyword for keyword in jd_keywords if keyword in resume_set]
    gaps = [keyword for keyword in jd_keywords if keyword not in resume_set]
    return matched, gaps


def build_summary(
    matched: list[str],
    gaps: list[str],
    jd_keyword_count: int,
    config: ExplainConfig = DEFAULT_EXPLAIN_CONFIG,
) -> str:
    if jd_keyword_count == 0:
        return "No keywords could be extracted from the job description, so no match was scored."

    parts = [f"Matched {len(matched)} of {jd_keyword_count} top job description keywords."]
    if matched:
        parts.append(f"Top matches: {', '.join(matched[:config.summary_match_limit])}.")
    else:
        parts.append("No job description keywords were found in the resume.")
    if gaps:
        parts.append(f"Gaps: {', '.join(gaps[:config.summary_gap_limit])}.")
    else:
        parts.append("No keyword gaps detected.")
    return " ".join(parts)


def build_occupational_questions(
    matched: list[str],
    gaps: list[str],
    config: ExplainConfig = DEFAULT_EXPLAIN_CONFIG,
) -> list[str]:
    questions = [_MATCH_PROMPT.format(keyword=kw) for kw in matched[:config.occupational_match_prompts]]
    questions.extend(_GAP_PROMPT.format(keyword=kw) for kw in gaps[:config.occupational_gap_prompts])
    return questions[:config.max_occupational_questions]


def explain(
    resume_text: str,
    job_description_text: str,
    config: ExplainConfig | None = None,
) -> ExplainResult:
    """Score how well a resume covers a job description and say why.

    Deterministic: the same inputs and config always give the same result.
    Missing or non-string text is treated as empty and yields an empty,
    zero-score result instead of raising.
    """
    config = config or DEFAULT_EXPLAIN_CONFIG
    resume_raw = _as_text(resume_text)
    jd_raw = _as_text(job_description_text)

    jd_keywords = rank_keywords(tokenize(jd_raw, config), config.jd_keyword_limit)
    resume_keywords = rank_keywords(tokenize(resume_raw, config), config.resume_keyword_limit)

    score = overlap_score(jd_keywords, resume_keywords)
    matched, gaps = partition_keywords(jd_keywords, resume_keywords)

    sentences = list(split_sentences(resume_raw))
    reasons = [
        ExplainReason(
            requirement=f"Keyword match: {keyword}",
            evidence=locate_evidence(
                keyword,
                sentences,
                cap=config.evidence_per_keyword,
                max_chars=config.evidence_max_chars,
            ),
        )
        for keyword in matched[:config.max_reasons]
    ]

    return ExplainResult(
        score=score,
        summary=build_summary(matched, gaps, len(jd_keywords), config),
        reasons=reasons,
        skills=SkillBreakdown(matched=list(matched), gaps=list(gaps), transferable=[]),
        strengths=list(matched),
        gaps=list(gaps),
        interview_questions=InterviewQuestions(
            behavioral=list(config.behavioral_questions),
            occupational=build_occupational_questions(matched, gaps, config),
        ),
    )
