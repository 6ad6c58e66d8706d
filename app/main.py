import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles

# ✅ Import All API Routes
from app.api.routes import analyze, system

# ✅ Import Core Services
from app.core.config import Settings
from app.core.errors import AnalyzerError, GENERIC_UPSTREAM_MESSAGE, MissingFileError
from app.core.logging_config import setup_logging, sanitize_log_data
from app.core.upload_limit import UploadSizeLimitMiddleware
from app.llm.gemini_provider import GeminiProvider
from app.services.resume_analyzer import ResumeAnalyzer

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent / "static"


def create_app(settings: Optional[Settings] = None, analyzer: Optional[ResumeAnalyzer] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Settings are read from the environment when not given; a missing
    GEMINI_API_KEY raises ConfigError so the process never starts serving.
    """
    if settings is None:
        settings = Settings.from_env()
        setup_logging(settings.log_level, settings.log_dir)

    logger.info(f"Starting Resume Analyzer with settings: {sanitize_log_data(settings.as_dict())}")

    if analyzer is None:
        provider = GeminiProvider(api_key=settings.gemini_api_key)
        analyzer = ResumeAnalyzer(provider, model=settings.gemini_model)

    # ============================================
    # ✅ FASTAPI APP INIT
    # ============================================

    app = FastAPI(title="Resume Analyzer")
    app.state.settings = settings
    app.state.analyzer = analyzer

    app.add_middleware(UploadSizeLimitMiddleware, max_upload_bytes=settings.max_upload_bytes)

    # ✅ CORS — only the configured frontend, any origin when unset (outermost)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type"],
    )

    # ============================================
    # ✅ ERROR ENVELOPE
    # ============================================

    @app.exception_handler(AnalyzerError)
    async def analyzer_error_handler(request: Request, exc: AnalyzerError):
        if exc.is_client_error:
            logger.info(f"{request.url.path} rejected ({exc.status_code}): {exc.message}")
            message = exc.public_message
        else:
            logger.error(f"{request.url.path} failed ({exc.status_code}): {type(exc).__name__}: {exc.message}")
            message = exc.public_message if settings.expose_error_details else GENERIC_UPSTREAM_MESSAGE
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "error": message},
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        # A "resume" field that is not a file upload counts as no file at all
        if any(tuple(error.get("loc", ()))[-1:] == ("resume",) for error in errors):
            message = MissingFileError().public_message
        elif errors:
            message = errors[0].get("msg", "Invalid request")
        else:
            message = "Invalid request"
        logger.info(f"{request.url.path} rejected (400): {message}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"success": False, "error": message},
        )

    # ============================================
    # ✅ REGISTER ALL ROUTERS
    # ============================================

    app.include_router(analyze.router)
    app.include_router(system.router)
    app.mount("/static", StaticFiles(directory=STATIC_DIR, html=True), name="static")

    # ============================================
    # ✅ LIVENESS ROOT ENDPOINT
    # ============================================

    @app.get("/", response_class=PlainTextResponse)
    def root():
        return "Resume Analyzer API running"

    return app


app = create_app()
