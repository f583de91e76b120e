"""Listing 번역 유스케이스

listing 원문 조회 → 배치/단일 번역 → 저장.
Celery 워커(자동 번역)와 수동 번역 route가 공유한다.
"""

import logging

from src.constants import Limits
from src.schemas.base import BaseSchema
from src.schemas.translation import ProviderUsed, TranslationBatchResult, TranslationTarget
from src.services.listing import ListingNotFoundError, get_source_text
from src.services.orchestrator import BatchOrchestrator
from src.services.persistence import apply_translations
from src.services.translation.targets import find_target, get_targets

logger = logging.getLogger(__name__)

ALL_LANGUAGES = "all"


class LanguageResult(BaseSchema):
    language: str
    language_code: str
    storage_field: str
    provider_used: ProviderUsed
    succeeded: bool


class ListingTranslationSummary(BaseSchema):
    listing_id: str
    translations: dict[str, str]
    languages: list[LanguageResult]

    @property
    def succeeded(self) -> bool:
        """provider가 하나라도 번역에 성공했는지"""
        return any(lang.succeeded for lang in self.languages)


class EmptySourceTextError(Exception):
    def __init__(self, listing_id: str):
        self.listing_id = listing_id
        super().__init__(f"번역할 description이 없음: {listing_id}")


class UnsupportedLanguageError(Exception):
    def __init__(self, lang: str):
        self.lang = lang
        supported = ", ".join(t.language_name.lower() for t in get_targets())
        super().__init__(f"Language '{lang}' not supported. Supported languages: {supported}")


def is_all_languages(lang: str | None) -> bool:
    return lang is None or lang.strip().lower() in ("", ALL_LANGUAGES)


def resolve_target(lang: str) -> TranslationTarget:
    """
    Raises:
        UnsupportedLanguageError: 지원하지 않는 언어
    """
    target = find_target(lang)
    if target is None:
        raise UnsupportedLanguageError(lang)
    return target


def _summarize(listing_id: str, result: TranslationBatchResult) -> ListingTranslationSummary:
    return ListingTranslationSummary(
        listing_id=listing_id,
        translations=result.translations,
        languages=[
            LanguageResult(
                language=outcome.target.language_name,
                language_code=outcome.target.language_code,
                storage_field=outcome.target.storage_field,
                provider_used=outcome.provider_used,
                succeeded=outcome.succeeded,
            )
            for outcome in result.outcomes
        ],
    )


def translate_listing(
    listing_id: str,
    lang: str | None = None,
    orchestrator: BatchOrchestrator | None = None,
) -> ListingTranslationSummary:
    """listing description 번역 후 번역 필드 저장

    lang이 없거나 "all"이면 전체 언어, 아니면 해당 언어만 번역.

    Raises:
        UnsupportedLanguageError: 지원하지 않는 언어
        ListingNotFoundError: 존재하지 않는 listing ID
        EmptySourceTextError: description이 비어있음
        StorageError: 조회/저장 실패
    """
    target: TranslationTarget | None = None
    if lang is not None and not is_all_languages(lang):
        target = resolve_target(lang)

    listing = get_source_text(listing_id)
    if listing is None:
        raise ListingNotFoundError(listing_id)

    text = listing.source_text
    if not text.strip():
        raise EmptySourceTextError(listing_id)

    logger.info(f'[{listing_id}] 원문: "{text[: Limits.LOG_PREVIEW_CHARS]}"')

    orchestrator = orchestrator or BatchOrchestrator()
    if target is None:
        result = orchestrator.translate_all(text, get_targets())
    else:
        result = orchestrator.translate_one(text, target)

    apply_translations(listing_id, result)
    return _summarize(listing_id, result)
