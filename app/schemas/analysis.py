"""
Pydantic schemas for resume analysis.
"""
from typing import Annotated, Optional, List, Literal, Union

from pydantic import BaseModel, Field


SeniorityLevel = Literal["junior", "mid", "senior", "lead", "unknown"]

# Integer scores stay integers on the way back to the client
AtsScore = Union[
    Annotated[int, Field(ge=0, le=100)],
    Annotated[float, Field(ge=0, le=100)],
]


class AnalysisResult(BaseModel):
    """Structured evaluation produced by the language model."""
    overall_summary: str = Field(..., description="Short summary, max 2 sentences")
    seniority_level: SeniorityLevel = Field(..., description="Estimated experience tier")
    key_skills: List[str] = Field(..., min_length=1, max_length=10, description="Skills found in the resume")
    missing_skills: List[str] = Field(..., max_length=10, description="Skills the job asks for but the resume lacks")
    strengths: List[str] = Field(..., max_length=10)
    weaknesses: List[str] = Field(..., max_length=10)
    ats_score: AtsScore = Field(..., description="ATS pass likelihood 0-100")
    suggestions: List[str] = Field(..., max_length=10)


class AnalyzeResumeInput(BaseModel):
    """Input to the prompt/response adapter."""
    resume_text: str = Field(..., min_length=1, description="Resume")
    job_description: Optional[str] = Field(None, description="Job Description")


class AnalyzeResumeResponse(BaseModel):
    success: bool = True
    data: AnalysisResult


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
