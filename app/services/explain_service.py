from __future__ import annotations

import hashlib
import json
import logging
import time
import uuid
from functools import lru_cache

from app.core.config.explain import get_explain_value
from app.core.identity import IdentityContext
from app.explain import DEFAULT_EXPLAIN_CONFIG, ExplainConfig, explain
from app.history.db import get_run, list_runs, record_explain_run
from app.schemas.explain import (
    ExplainRequest,
    ExplainResponse,
    ExplainResult,
    ExplainRunDetail,
    ExplainRunSummary,
)

logger = logging.getLogger(__name__)


def _short_hash(value: str | None) -> str | None:
    if not value:
        return None
    return hashlib.sha256(value.encode("utf-8")).hexdigest()[:12]


def _int_value(path: str, default: int) -> int:
    raw = get_explain_value(path, default)
    try:
        return int(raw)
    except (TypeError, ValueError):
        return default


def _bool_value(path: str, default: bool) -> bool:
    raw = get_explain_value(path, default)
    if isinstance(raw, str):
        return raw.strip().lower() in {"1", "true", "yes", "on"}
    return bool(raw)


@lru_cache(maxsize=1)
def get_active_explain_config() -> ExplainConfig:
    """Engine defaults with overrides from config/explain.yaml applied."""
    base = DEFAULT_EXPLAIN_CONFIG
    config = ExplainConfig(
        jd_keyword_limit=_int_value("keywords.job_description_limit", base.jd_keyword_limit),
        resume_keyword_limit=_int_value("keywords.resume_limit", base.resume_keyword_limit),
        drop_numeric_tokens=_bool_value("keywords.drop_numeric_tokens", base.drop_numeric_tokens),
        max_reasons=_int_value("reasons.max_reasons", base.max_reasons),
        evidence_per_keyword=_int_value("reasons.evidence_per_keyword", base.evidence_per_keyword),
        evidence_max_chars=_int_value("reasons.evidence_max_chars", base.evidence_max_chars),
        summary_match_limit=_int_value("summary.match_limit", base.summary_match_limit),
        summary_gap_limit=_int_value("summary.gap_limit", base.summary_gap_limit),
        occupational_match_prompts=_int_value("questions.match_prompts", base.occupational_match_prompts),
        occupational_gap_prompts=_int_value("questions.gap_prompts", base.occupational_gap_prompts),
        max_occupational_questions=_int_value("questions.max_occupational", base.max_occupational_questions),
    )
    version = get_explain_value("stopwords.version")
    return config.with_stopwords(
        extra=get_explain_value("stopwords.extra", None) or (),
        remove=get_explain_value("stopwords.remove", None) or (),
        version=str(version) if version else None,
    )


def run_explain(payload: ExplainRequest, identity: IdentityContext) -> ExplainResponse:
    started_at = time.perf_counter()
    config = get_active_explain_config()
    result = explain(payload.resume_text, payload.job_description_text, config)
    run_id = uuid.uuid4().hex

    logger.info(
        json.dumps(
            {
                "event": "explain_request",
                "run_id": run_id,
                "org_hash": _short_hash(identity.org_key),
                "score": result.score,
                "matched": len(result.skills.matched),
                "gaps": len(result.skills.gaps),
                "resume_len": len(payload.resume_text),
                "jd_len": len(payload.job_description_text),
                "stopwords_version": config.stopwords_version,
                "duration_ms": int((time.perf_counter() - started_at) * 1000),
            }
        )
    )
    return ExplainResponse(run_id=run_id, **result.model_dump())


def persist_run_best_effort(
    *,
    run_id: str,
    payload: ExplainRequest,
    result: ExplainResult,
    identity: IdentityContext,
) -> bool:
    try:
        return record_explain_run(
            run_id=run_id,
            org_key=identity.org_key,
            user_id=identity.user_id,
            resume_text=payload.resume_text,
            job_description_text=payload.job_description_text,
            score=result.score,
            summary=result.summary,
            result=result.to_wire(),
            stopwords_version=get_active_explain_config().stopwords_version,
            job_id=payload.job_id,
            candidate_id=payload.candidate_id,
            application_id=payload.application_id,
        )
    except Exception as exc:  # noqa: BLE001 - history must not affect the scoring response
        logger.warning(
            json.dumps(
                {
                    "event": "explain_run_persist_failed",
                    "run_id": run_id,
                    "error": str(exc),
                }
            )
        )
        return False


def list_recent_runs(identity: IdentityContext, limit: int = 20) -> list[ExplainRunSummary]:
    return [ExplainRunSummary.model_validate(row) for row in list_runs(org_key=identity.org_key, limit=limit)]


def get_run_detail(run_id: str, identity: IdentityContext) -> ExplainRunDetail | None:
    record = get_run(run_id, org_key=identity.org_key)
    if record is None:
        return None
    return ExplainRunDetail.model_validate(record)
