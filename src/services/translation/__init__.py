"""Translation 모듈

사용법:
    from src.services.translation import get_language_translator

    translator = get_language_translator()
    outcome = translator.translate(text, target)

백엔드 선택 (.env):
    PRIMARY_PROVIDER
    - "groq": Groq API (기본값)
    - "gemini": Google Gemini API
    SECONDARY_PROVIDER
    - "mymemory": MyMemory API (기본값)
"""

from src.config import get_settings
from src.services.translation.base import ProviderError, TranslationProvider
from src.services.translation.groq import GroqTranslation
from src.services.translation.mymemory import MyMemoryTranslation
from src.services.translation.translator import LanguageTranslator

__all__ = [
    "LanguageTranslator",
    "ProviderError",
    "TranslationProvider",
    "get_language_translator",
    "set_language_translator",
]

_translator: LanguageTranslator | None = None


def _create_primary() -> TranslationProvider:
    settings = get_settings()
    if settings.primary_provider == "groq":
        return GroqTranslation(
            api_key=settings.groq_api_key,
            model=settings.groq_model,
            api_url=settings.groq_api_url,
            source_language=settings.translation_source_language,
            timeout=settings.translation_provider_timeout,
        )
    if settings.primary_provider == "gemini":
        from src.services.translation.gemini import GeminiTranslation

        return GeminiTranslation(
            api_key=settings.gemini_api_key,
            model=settings.gemini_model,
            source_language=settings.translation_source_language,
            timeout=settings.translation_provider_timeout,
        )
    raise ValueError(f"Unknown translation provider: {settings.primary_provider!r}")


def _create_secondary() -> TranslationProvider:
    settings = get_settings()
    if settings.secondary_provider == "mymemory":
        return MyMemoryTranslation(
            api_url=settings.mymemory_api_url,
            source_language=settings.translation_source_language,
            email=settings.mymemory_email,
            timeout=settings.translation_provider_timeout,
        )
    raise ValueError(f"Unknown translation provider: {settings.secondary_provider!r}")


def get_language_translator() -> LanguageTranslator:
    """설정에 따라 primary/secondary provider 체인 반환"""
    global _translator
    if _translator is None:
        _translator = LanguageTranslator(primary=_create_primary(), secondary=_create_secondary())
    return _translator


def set_language_translator(translator: LanguageTranslator | None) -> None:
    """provider 체인 설정 (테스트용)"""
    global _translator
    _translator = translator
