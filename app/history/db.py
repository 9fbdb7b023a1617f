from __future__ import annotations

import json
import sqlite3
from contextlib import closing
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any

from app.core.config import settings


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _get_db_path() -> Path:
    return Path(settings.run_history_db_path)


def _ensure_schema(conn: sqlite3.Connection) -> None:
    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS explain_runs (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            run_id TEXT NOT NULL UNIQUE,
            created_at TEXT NOT NULL,
            org_key TEXT,
            user_id TEXT,
            job_id TEXT,
            candidate_id TEXT,
            application_id TEXT,
            resume_text TEXT NOT NULL,
            job_description_text TEXT NOT NULL,
            score INTEGER NOT NULL,
            summary TEXT NOT NULL,
            result_json TEXT NOT NULL,
            stopwords_version TEXT NOT NULL
        )
        """
    )
    conn.execute(
        """
        CREATE INDEX IF NOT EXISTS idx_explain_runs_org_created
        ON explain_runs (org_key, created_at)
        """
    )


def _connect() -> sqlite3.Connection:
    db_path = _get_db_path()
    db_path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(db_path)
    _ensure_schema(conn)
    return conn


def init_db() -> None:
    if not settings.run_history_enabled:
        return
    with closing(_connect()) as conn:
        conn.commit()
    purge_old_records()


def record_explain_run(
    *,
    run_id: str,
    org_key: str | None,
    user_id: str | None,
    resume_text: str,
    job_description_text: str,
    score: int,
    summary: str,
    result: dict[str, Any],
    stopwords_version: str,
    job_id: str | None = None,
    candidate_id: str | None = None,
    application_id: str | None = None,
) -> bool:
    if not settings.run_history_enabled:
        return False
    result_json = json.dumps(result, ensure_ascii=False)
    with closing(_connect()) as conn:
        conn.execute(
            """
            INSERT INTO explain_runs (
                run_id, created_at, org_key, user_id, job_id, candidate_id, application_id,
                resume_text, job_description_text, score, summary, result_json, stopwords_version
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                run_id,
                _utc_now(),
                org_key,
                user_id,
                job_id,
                candidate_id,
                application_id,
                resume_text,
                job_description_text,
                score,
                summary,
                result_json,
                stopwords_version,
            ),
        )
        conn.commit()
    return True


def purge_old_records() -> int:
    if not settings.run_history_enabled:
        return 0

    retention = max(1, int(settings.run_history_retention_days))
    with closing(_connect()) as conn:
        cur = conn.execute(
            "DELETE FROM explain_runs WHERE created_at < ?",
            (_cutoff_iso(retention),),
        )
        conn.commit()
        return int(cur.rowcount or 0)


def _cutoff_iso(retention_days: int) -> str:
    return (datetime.now(timezone.utc) - timedelta(days=retention_days)).isoformat()


def _row_to_dict(cursor: sqlite3.Cursor, row: tuple) -> dict[str, Any]:
    return {col[0]: row[idx] for idx, col in enumerate(cursor.description)}


def list_runs(*, org_key: str | None, limit: int = 20) -> list[dict[str, Any]]:
    if not settings.run_history_enabled:
        return []
    with closing(_connect()) as conn:
        cur = conn.execute(
            """
            SELECT run_id, created_at, score, summary, job_id, candidate_id, application_id
            FROM explain_runs
            WHERE org_key IS ?
            ORDER BY id DESC
            LIMIT ?
            """,
            (org_key, limit),
        )
        rows = cur.fetchall()
        return [_row_to_dict(cur, row) for row in rows]


def get_run(run_id: str, *, org_key: str | None) -> dict[str, Any] | None:
    if not settings.run_history_enabled:
        return None
    with closing(_connect()) as conn:
        cur = conn.execute(
            """
            SELECT run_id, created_at, org_key, user_id, job_id, candidate_id, application_id,
                   score, summary, result_json, stopwords_version
            FROM explain_runs
            WHERE run_id = ? AND org_key IS ?
            """,
            (run_id, org_key),
        )
        row = cur.fetchone()
        if not row:
            return None
        record = _row_to_dict(cur, row)

    record["result"] = json.loads(record.pop("result_json") or "{}")
    return record
