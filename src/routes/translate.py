"""Translate API 라우트

수동 번역 엔드포인트. 자동 번역과 같은 유스케이스를 동기적으로 실행하고 결과를 반환한다.
"""

import asyncio
import logging

from fastapi import APIRouter, HTTPException, status

from src.schemas.base import BaseSchema
from src.schemas.translation import ProviderUsed
from src.services import listing_translation
from src.services.listing import ListingNotFoundError, StorageError
from src.services.translation.targets import get_targets

router = APIRouter(prefix="/translate", tags=["translate"])
logger = logging.getLogger(__name__)


class TranslateListingRequest(BaseSchema):
    listing_id: str
    lang: str | None = None


class BatchTranslateResponse(BaseSchema):
    success: bool
    message: str
    translations: dict[str, str]
    languages_processed: list[str]
    outcomes: list[listing_translation.LanguageResult]


class SingleTranslateResponse(BaseSchema):
    success: bool
    translated_text: str
    language: str
    provider_used: ProviderUsed


@router.post("", response_model=BatchTranslateResponse | SingleTranslateResponse)
async def translate_listing(
    request: TranslateListingRequest,
) -> BatchTranslateResponse | SingleTranslateResponse:
    """listing 번역 (lang 생략 또는 "all"이면 전체 언어)"""
    summary = await run_translation(request.listing_id, request.lang)

    if listing_translation.is_all_languages(request.lang):
        return batch_response(summary)

    result = summary.languages[0]
    return SingleTranslateResponse(
        success=True,
        translated_text=summary.translations[result.storage_field],
        language=result.language,
        provider_used=result.provider_used,
    )


async def run_translation(
    listing_id: str, lang: str | None
) -> listing_translation.ListingTranslationSummary:
    """번역 유스케이스 실행 후 도메인 오류를 HTTP 오류로 변환

    Raises:
        HTTPException: 400 / 404 / 500 / 502 (502는 원문 폴백 저장 후)
    """
    logger.info(f"[{listing_id}] 수동 번역 요청 (lang={lang or 'all'})")

    try:
        summary = await asyncio.to_thread(listing_translation.translate_listing, listing_id, lang)
    except listing_translation.UnsupportedLanguageError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"code": "UNSUPPORTED_LANGUAGE", "message": str(e)},
        ) from None
    except ListingNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"code": "LISTING_NOT_FOUND", "message": "Listing not found"},
        ) from None
    except listing_translation.EmptySourceTextError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"code": "EMPTY_SOURCE_TEXT", "message": "No description to translate"},
        ) from None
    except StorageError as e:
        logger.error(f"[{listing_id}] 번역 저장 실패: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"code": "STORAGE_ERROR", "message": "Failed to update translations"},
        ) from None

    if not summary.succeeded:
        # 원문 폴백 값은 이미 저장된 상태
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail={
                "code": "TRANSLATION_FAILED",
                "message": "All translation providers failed; original text was kept",
            },
        )

    return summary


def batch_response(
    summary: listing_translation.ListingTranslationSummary,
) -> BatchTranslateResponse:
    return BatchTranslateResponse(
        success=True,
        message="All languages translated",
        translations=summary.translations,
        languages_processed=[t.language_name for t in get_targets()],
        outcomes=summary.languages,
    )
