from fastapi import APIRouter

from app.services.explain_service import get_active_explain_config

router = APIRouter()

@router.get("/health", summary="Health Check", description="Check the health status of the explain service.")
async def health_check():
    return {"status": "healthy", "stopwordsVersion": get_active_explain_config().stopwords_version}
