from fastapi import APIRouter, Request

router = APIRouter(prefix="/system", tags=["System"])

API_VERSION = "1.0.0"


@router.get("/health")
def system_health(request: Request):
    settings = request.app.state.settings
    return {
        "status": "ok",
        "api_version": API_VERSION,
        "service": "Resume Analyzer API",
        "model": settings.gemini_model,
    }
