"""
Resume analysis service.

Builds the recruiter prompt, asks the LLM for a schema-shaped JSON answer and
validates that answer locally before it is returned to callers.
"""
import json
import logging
from typing import Optional

from pydantic import ValidationError

from app.core.errors import MalformedAIResponseError
from app.llm.gemini_provider import DEFAULT_MODEL
from app.llm.provider import LLMProvider
from app.schemas.analysis import AnalysisResult, AnalyzeResumeInput

logger = logging.getLogger(__name__)

JOB_DESCRIPTION_PLACEHOLDER = "(not provided)"

SYSTEM_TEMPLATE = """
You are an expert technical recruiter and ATS specialist.
Analyze the resume and optional job description.

STRICT RULES:
- Output ONLY valid JSON
- Do NOT include markdown, explanations, or comments
- Do NOT include trailing commas
- Keep overall_summary to MAX 2 sentences
- Limit all array fields to MAX 6 items

Required JSON format:
{
    "overall_summary": string,
    "seniority_level": "junior" | "mid" | "senior" | "lead" | "unknown",
    "key_skills": string[],
    "missing_skills": string[],
    "strengths": string[],
    "weaknesses": string[],
    "ats_score": number,
    "suggestions": string[]
}
"""


def build_resume_prompt(resume_text: str, job_description: Optional[str] = None) -> str:
    """Combine the fixed rules with the literal resume and job description."""
    if job_description is None or not job_description.strip():
        job_description = JOB_DESCRIPTION_PLACEHOLDER

    human_template = f"""Analyze the following resume and job description (optional) and produce ONLY the JSON output:
RESUME:
-----------------
{resume_text}

JOB DESCRIPTION (optional):
-----------------
{job_description}
"""
    return SYSTEM_TEMPLATE + human_template


def parse_analysis(raw: Optional[str]) -> AnalysisResult:
    """
    Parse and validate the raw JSON text returned by the LLM.

    Raises:
        MalformedAIResponseError: if the text is missing, not JSON, or off-schema
    """
    if not raw:
        raise MalformedAIResponseError("empty response")

    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.warning(f"AI response is not valid JSON: {raw[:100]}")
        raise MalformedAIResponseError(f"invalid JSON: {e}") from e

    try:
        return AnalysisResult.model_validate(payload)
    except ValidationError as e:
        logger.warning(f"AI response failed schema validation: {e.error_count()} error(s)")
        raise MalformedAIResponseError(str(e)) from e


class ResumeAnalyzer:
    """Prompt/response adapter between the HTTP layer and the LLM provider."""

    def __init__(self, provider: LLMProvider, model: str = DEFAULT_MODEL):
        # The provider owns the API key
        self.provider = provider
        self.model = model

    def analyze_raw(self, resume_text: str, job_description: Optional[str] = None) -> Optional[str]:
        """
        Submit the prompt and return the LLM's JSON text verbatim.

        Returns:
            The first candidate's first text part, or None if absent

        Raises:
            pydantic.ValidationError: if resume_text is empty
            AIServiceError: if the LLM call fails
        """
        request = AnalyzeResumeInput(
            resume_text=resume_text,
            job_description=job_description,
        )
        prompt = build_resume_prompt(request.resume_text, request.job_description)
        logger.info(
            f"Analyzing resume: {len(request.resume_text)} chars, "
            f"job description {'provided' if request.job_description else 'absent'}"
        )

        response = self.provider.generate_json(
            prompt=prompt,
            response_schema=AnalysisResult.model_json_schema(),
            model=self.model,
        )
        return response.content

    def analyze(self, resume_text: str, job_description: Optional[str] = None) -> AnalysisResult:
        """Analyze a resume and return a validated AnalysisResult."""
        raw = self.analyze_raw(resume_text, job_description)
        return parse_analysis(raw)
