"""
LLM Provider interface for abstracting LLM implementations.
"""
from abc import ABC, abstractmethod
from typing import Optional, Dict, Any
from dataclasses import dataclass


@dataclass
class LLMResponse:
    """Standardized LLM response."""
    content: Optional[str]
    tokens_in: int = 0
    tokens_out: int = 0
    model: str = ""
    metadata: Dict[str, Any] = None

    def __post_init__(self):
        if self.metadata is None:
            self.metadata = {}


class LLMProvider(ABC):
    """Abstract base class for LLM providers."""

    @abstractmethod
    def generate_json(
        self,
        prompt: str,
        response_schema: Dict[str, Any],
        model: str,
        temperature: Optional[float] = None,
        **kwargs
    ) -> LLMResponse:
        """
        Generate a JSON completion constrained by a schema.

        Args:
            prompt: Full instruction text
            response_schema: JSON schema the reply should follow
            model: Model identifier
            temperature: Sampling temperature, provider default when None
            **kwargs: Additional provider-specific parameters

        Returns:
            LLMResponse whose content is the raw JSON text, or None if the
            provider returned no text

        Raises:
            AIServiceError: if the provider call fails
        """
        pass
