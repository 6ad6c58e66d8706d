"""
Google Gemini provider implementation.
"""
import logging
from typing import Optional, Dict, Any

from google import genai
from google.genai import errors, types

from app.core.errors import AIServiceError, ConfigError
from app.llm.provider import LLMProvider, LLMResponse

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.5-flash"


class GeminiProvider(LLMProvider):
    """Gemini provider using the official google-genai SDK."""

    def __init__(self, api_key: str, client: Optional[Any] = None):
        """Initialize Gemini client."""
        if not api_key:
            raise ConfigError("GEMINI_API_KEY not configured")
        self.api_key = api_key
        self.client = client or genai.Client(api_key=api_key)
        logger.info("Gemini provider initialized")

    def generate_json(
        self,
        prompt: str,
        response_schema: Dict[str, Any],
        model: str = DEFAULT_MODEL,
        temperature: Optional[float] = None,
        **kwargs
    ) -> LLMResponse:
        """Generate a JSON completion."""
        config = types.GenerateContentConfig(
            response_mime_type="application/json",
            response_json_schema=response_schema,
            temperature=temperature,
            **kwargs
        )
        try:
            response = self.client.models.generate_content(
                model=model,
                contents=prompt,
                config=config,
            )
        except errors.APIError as e:
            logger.error(f"Gemini API error: {e}", exc_info=True)
            raise AIServiceError(e.message or str(e)) from e
        except Exception as e:
            logger.error(f"Gemini error: {type(e).__name__}: {e}", exc_info=True)
            raise AIServiceError(str(e) or type(e).__name__) from e

        usage = getattr(response, "usage_metadata", None)
        tokens_in = (getattr(usage, "prompt_token_count", None) or 0) if usage else 0
        tokens_out = (getattr(usage, "candidates_token_count", None) or 0) if usage else 0
        logger.info(f"Gemini call completed: model={model} tokens_in={tokens_in} tokens_out={tokens_out}")

        finish_reason = None
        candidates = getattr(response, "candidates", None) or []
        if candidates:
            finish_reason = getattr(candidates[0], "finish_reason", None)

        return LLMResponse(
            content=first_candidate_text(response),
            tokens_in=tokens_in,
            tokens_out=tokens_out,
            model=model,
            metadata={"finish_reason": str(finish_reason) if finish_reason else None},
        )


def first_candidate_text(response: Any) -> Optional[str]:
    """Return the first candidate's first text part, or None if absent."""
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return None
    content = getattr(candidates[0], "content", None)
    parts = getattr(content, "parts", None) or []
    if not parts:
        return None
    return getattr(parts[0], "text", None)
