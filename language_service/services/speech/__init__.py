from .base import SpeechService, SpeechServiceError
from .google_service import GoogleSpeechService
from .openai_service import OpenAISpeechService

__all__ = ["SpeechService", "SpeechServiceError", "GoogleSpeechService", "OpenAISpeechService"]
