from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Query, Request, status

from app.core.identity import IdentityContext, get_identity
from app.core.rate_limit import rate_limit
from app.core.security import require_api_key, require_configured_api_key
from app.schemas.explain import ExplainRequest, ExplainResponse, ExplainRunDetail, ExplainRunSummary
from app.services.explain_service import (
    get_run_detail,
    list_recent_runs,
    persist_run_best_effort,
    run_explain,
)

router = APIRouter()


@router.post("/explain", response_model=ExplainResponse)
@rate_limit()
async def explain_match(
    request: Request,
    payload: ExplainRequest,
    background_tasks: BackgroundTasks,
    identity: IdentityContext = Depends(get_identity),
    _: None = Depends(require_api_key),
):
    response = run_explain(payload, identity)
    # Runs after the response is sent; failures are logged inside.
    background_tasks.add_task(
        persist_run_best_effort,
        run_id=response.run_id,
        payload=payload,
        result=response,
        identity=identity,
    )
    return response


@router.get("/explain/runs", response_model=list[ExplainRunSummary])
def recent_runs(
    limit: int = Query(default=20, ge=1, le=200),
    identity: IdentityContext = Depends(get_identity),
    _: None = Depends(require_configured_api_key),
):
    return list_recent_runs(identity, limit=limit)


@router.get("/explain/runs/{run_id}", response_model=ExplainRunDetail)
def run_detail(
    run_id: str,
    identity: IdentityContext = Depends(get_identity),
    _: None = Depends(require_configured_api_key),
):
    record = get_run_detail(run_id, identity)
    if record is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Explain run not found.")
    return record
