"""LLM Service - thin wrapper around the text-generation provider.

Interface Contract:
- ``call(prompt)`` returns the raw response text
- any provider failure is raised as ``LLMServiceError``
- callers go through ``LLMService.get_instance()`` so tests can swap it
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

import google.generativeai as genai

from careerpath.core.config import settings


class LLMServiceError(Exception):
    """Raised when an LLM call fails."""
    pass


class BaseLLMService(ABC):
    """Abstract base class for LLM services."""

    @abstractmethod
    def call(self, prompt: str) -> str:
        """Send a prompt and return the response text.

        Raises:
            LLMServiceError: If the call fails
        """


class GeminiService(BaseLLMService):
    """Google Gemini implementation."""

    def __init__(
        self,
        model: str = settings.GEMINI_MODEL,
        *,
        api_key: Optional[str] = settings.GEMINI_API_KEY,
        max_output_tokens: int = settings.AI_MAX_TOKENS,
        temperature: float = settings.AI_TEMPERATURE,
    ):
        self.model = model
        self.api_key = api_key
        self.max_output_tokens = max_output_tokens
        self.temperature = temperature
        self._configured = False

    def _configure(self) -> None:
        if self._configured:
            return
        if not self.api_key:
            raise LLMServiceError("GEMINI_API_KEY is not set")
        genai.configure(api_key=self.api_key)
        self._configured = True

    def call(self, prompt: str) -> str:
        self._configure()
        try:
            model = genai.GenerativeModel(self.model)
            response = model.generate_content(
                prompt,
                generation_config=genai.GenerationConfig(
                    max_output_tokens=self.max_output_tokens,
                    temperature=self.temperature,
                ),
            )
            return response.text
        except Exception as e:
            raise LLMServiceError(f"Gemini call failed: {e}") from e


class LLMService:
    """Process-wide LLM service holder."""

    _instance: BaseLLMService | None = None

    @classmethod
    def get_instance(cls) -> BaseLLMService:
        if cls._instance is None:
            cls._instance = GeminiService()
        return cls._instance

    @classmethod
    def set_instance(cls, service: BaseLLMService) -> None:
        """Set a custom LLM service (useful for testing)."""
        cls._instance = service

    @classmethod
    def reset(cls) -> None:
        cls._instance = None
