import contextlib
from contextlib import asynccontextmanager
import asyncio
import json
import logging

from app.history.db import init_db, purge_old_records
from app.services.explain_service import get_active_explain_config

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    init_db()
    # Fail fast on a broken config/explain.yaml instead of on the first request.
    get_active_explain_config()

    stop_event = asyncio.Event()

    async def periodic_purge() -> None:
        while not stop_event.is_set():
            try:
                deleted = purge_old_records()
                if deleted:
                    logger.info(json.dumps({"event": "run_history_retention_purge", "deleted": deleted}))
            except Exception as exc:  # pragma: no cover - defensive guard
                logger.warning("run_history_retention_purge_failed: %s", exc)
            try:
                await asyncio.wait_for(stop_event.wait(), timeout=3600)
            except asyncio.TimeoutError:
                continue

    purge_task = asyncio.create_task(periodic_purge())
    yield
    stop_event.set()
    if not purge_task.done():
        purge_task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await purge_task
