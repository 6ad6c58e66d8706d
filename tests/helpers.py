"""
Test doubles and sample data shared across test modules.
"""
import json

import fitz  # pymupdf

from app.llm.provider import LLMProvider, LLMResponse


RESUME_TEXT = """Jane Doe - Senior Backend Engineer
Experience: 7 years building Python services with FastAPI and PostgreSQL.
Led migration of a monolith to AWS Lambda and reduced costs by 30 percent.
Skills: Python, FastAPI, PostgreSQL, Docker, AWS, Terraform."""

VALID_ANALYSIS = {
    "overall_summary": "Experienced backend engineer with strong Python and AWS background.",
    "seniority_level": "senior",
    "key_skills": ["Python", "FastAPI", "PostgreSQL", "AWS"],
    "missing_skills": ["Kubernetes"],
    "strengths": ["Quantified impact", "Cloud migration experience"],
    "weaknesses": ["No mention of mentoring"],
    "ats_score": 82,
    "suggestions": ["Add a Kubernetes project", "Move skills section to the top"],
}


class FakeProvider(LLMProvider):
    """LLMProvider double that records prompts and returns a canned reply."""

    def __init__(self, content=None, error=None):
        self.content = json.dumps(VALID_ANALYSIS) if content is None else content
        self.error = error
        self.calls = []

    def generate_json(self, prompt, response_schema, model, temperature=None, **kwargs):
        self.calls.append({"prompt": prompt, "schema": response_schema, "model": model})
        if self.error is not None:
            raise self.error
        return LLMResponse(content=self.content, model=model)


def make_pdf(text: str) -> bytes:
    """Build a single-page PDF containing the given lines of text."""
    doc = fitz.open()
    page = doc.new_page()
    y = 72
    for line in text.splitlines():
        page.insert_text((72, y), line, fontsize=10)
        y += 14
    data = doc.tobytes()
    doc.close()
    return data
