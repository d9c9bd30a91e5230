from .base import TranslationService, TranslationServiceError
from .gemini_service import GeminiTranslationService
from .openai_service import OpenAITranslationService

__all__ = [
    "TranslationService",
    "TranslationServiceError",
    "GeminiTranslationService",
    "OpenAITranslationService",
]
