"""
Resume analysis endpoint.

POST /api/analyze-resume
Form-data:
  - resume: (file, PDF)
  - jobDescription: (text, optional)
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from starlette.concurrency import run_in_threadpool

from app.core.config import Settings
from app.core.errors import (
    AnalyzerError,
    InsufficientTextError,
    MissingFileError,
    UnsupportedFileTypeError,
    UploadTooLargeError,
    UpstreamError,
)
from app.schemas.analysis import AnalyzeResumeResponse, ErrorResponse
from app.services.resume_analyzer import ResumeAnalyzer
from app.services.resume_parser import extract_text_from_pdf

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Resume Analysis"])

PDF_CONTENT_TYPE = "application/pdf"


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_resume_analyzer(request: Request) -> ResumeAnalyzer:
    return request.app.state.analyzer


@router.post(
    "/analyze-resume",
    response_model=AnalyzeResumeResponse,
    responses={
        400: {"model": ErrorResponse},
        413: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
)
async def analyze_resume(
    resume: Optional[UploadFile] = File(None),
    jobDescription: Optional[str] = Form(None),
    settings: Settings = Depends(get_settings),
    analyzer: ResumeAnalyzer = Depends(get_resume_analyzer),
):
    if resume is None:
        raise MissingFileError()

    if resume.content_type != PDF_CONTENT_TYPE:
        logger.info(f"Rejected upload {resume.filename!r} with content type {resume.content_type!r}")
        raise UnsupportedFileTypeError(resume.content_type)

    data = await resume.read()
    if len(data) > settings.max_upload_bytes:
        raise UploadTooLargeError(settings.max_upload_bytes)

    job_description = jobDescription.strip() if jobDescription else None

    try:
        resume_text = await run_in_threadpool(extract_text_from_pdf, data)
        if not resume_text or len(resume_text.strip()) < settings.min_resume_chars:
            raise InsufficientTextError()

        result = await run_in_threadpool(analyzer.analyze, resume_text, job_description or None)
    except AnalyzerError:
        raise
    except Exception as e:
        logger.error(f"Unexpected error analyzing resume: {type(e).__name__}: {e}", exc_info=True)
        raise UpstreamError(str(e)) from e

    logger.info(f"Resume analyzed: seniority={result.seniority_level} ats_score={result.ats_score}")
    return AnalyzeResumeResponse(success=True, data=result)
