import logging

from language_service.core.config import Settings
from language_service.services.language_service import LanguageService
from language_service.services.speech import GoogleSpeechService, OpenAISpeechService, SpeechService
from language_service.services.translation import (
    GeminiTranslationService,
    OpenAITranslationService,
    TranslationService,
)

logger = logging.getLogger(__name__)

TRANSLATION_PROVIDERS = ("openai", "gemini")
SPEECH_PROVIDERS = ("google", "openai")


def create_translation_service(settings: Settings) -> TranslationService:
    provider = settings.translation.provider
    if not provider:
        logger.error("TRANSLATION_PROVIDER is missing or empty")
        raise ValueError("A translation provider is required")

    if provider == "openai":
        if not settings.openai_api_key:
            logger.error("OPENAI_API_KEY is missing for the OpenAI translation provider")
            raise ValueError("OPENAI_API_KEY is required for the OpenAI translation provider")
        logger.info("Creating OpenAI translation service")
        return OpenAITranslationService(api_key=settings.openai_api_key, settings=settings.translation)

    elif provider == "gemini":
        logger.info("Creating Gemini translation service")
        return GeminiTranslationService(api_key=settings.gemini_api_key, settings=settings.translation)

    else:
        logger.error(f"Unknown translation provider: {provider}")
        raise ValueError(
            f"Unknown translation provider: {provider}. Supported providers: {', '.join(TRANSLATION_PROVIDERS)}"
        )


def create_speech_service(settings: Settings) -> SpeechService:
    provider = settings.speech.provider
    if not provider:
        logger.error("SPEECH_PROVIDER is missing or empty")
        raise ValueError("A speech provider is required")

    if provider == "google":
        logger.info("Creating Google Cloud TTS speech service")
        return GoogleSpeechService(settings=settings.speech)

    elif provider == "openai":
        if not settings.openai_api_key:
            logger.error("OPENAI_API_KEY is missing for the OpenAI speech provider")
            raise ValueError("OPENAI_API_KEY is required for the OpenAI speech provider")
        logger.info("Creating OpenAI speech service")
        return OpenAISpeechService(api_key=settings.openai_api_key, settings=settings.speech)

    else:
        logger.error(f"Unknown speech provider: {provider}")
        raise ValueError(
            f"Unknown speech provider: {provider}. Supported providers: {', '.join(SPEECH_PROVIDERS)}"
        )


def build_language_service(settings: Settings) -> LanguageService:
    return LanguageService(
        translator=create_translation_service(settings),
        speech=create_speech_service(settings),
    )
