"""
Shared fixtures for the Resume Analyzer test suite.
"""
import os

# app.main builds the application at import time; give it a key and keep
# log files out of the working tree.
os.environ.setdefault("GEMINI_API_KEY", "test-gemini-key")
os.environ.setdefault("LOG_DIR", "")

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app
from app.services.resume_analyzer import ResumeAnalyzer
from helpers import FakeProvider, RESUME_TEXT, make_pdf


@pytest.fixture
def settings():
    return Settings(gemini_api_key="test-gemini-key", log_dir=None)


@pytest.fixture
def provider():
    return FakeProvider()


@pytest.fixture
def analyzer(provider, settings):
    return ResumeAnalyzer(provider, model=settings.gemini_model)


@pytest.fixture
def app(settings, analyzer):
    return create_app(settings=settings, analyzer=analyzer)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def resume_pdf():
    return make_pdf(RESUME_TEXT)
