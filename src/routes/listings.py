"""Admin Listings API 라우트

listing CRUD + 원문 변경 시 자동 번역 디스패치 + listing 단위 수동 번역.

NOTE: 오케스트레이션(service 호출 + 번역 디스패치)을 Route에서 처리.
      번역 디스패치 실패는 CRUD 응답 상태 코드에 영향을 주지 않는다.
"""

import logging
from typing import Literal

from fastapi import APIRouter, HTTPException, status

from src.routes.translate import BatchTranslateResponse, batch_response, run_translation
from src.schemas.base import BaseSchema
from src.services import listing as listing_service
from src.services.change_detector import should_retranslate
from src.services.dispatch import dispatch_translation

router = APIRouter(prefix="/admin/listings", tags=["listings"])
logger = logging.getLogger(__name__)

TranslationStatus = Literal["in_progress", "unchanged", "queue_failed"]


class ListingWriteResponse(BaseSchema):
    message: str
    listing: listing_service.ListingResponse
    translation_status: TranslationStatus


class ListingDeleteResponse(BaseSchema):
    message: str
    listing: listing_service.ListingResponse


def _not_found(listing_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail={
            "code": "LISTING_NOT_FOUND",
            "message": f"listing을 찾을 수 없습니다: {listing_id}",
        },
    )


async def _dispatch_if_changed(
    listing_id: str, old_text: str | None, new_text: str | None
) -> TranslationStatus:
    if not should_retranslate(old_text, new_text):
        return "unchanged"

    task_id = await dispatch_translation(listing_id)
    return "in_progress" if task_id else "queue_failed"


@router.get("", response_model=list[listing_service.ListingResponse])
async def list_listings() -> list[listing_service.ListingResponse]:
    """전체 listing 조회 (번역 포함, 최신순)"""
    return await listing_service.list_listings()


@router.get("/{listing_id}", response_model=listing_service.ListingResponse)
async def get_listing(listing_id: str) -> listing_service.ListingResponse:
    listing = await listing_service.get_listing(listing_id)
    if listing is None:
        raise _not_found(listing_id)
    return listing


@router.post("", response_model=ListingWriteResponse, status_code=status.HTTP_201_CREATED)
async def create_listing(request: listing_service.ListingCreateRequest) -> ListingWriteResponse:
    """listing 생성 후 description이 있으면 번역 디스패치 (응답은 기다리지 않음)"""
    listing = await listing_service.create_listing(request)
    logger.info(f"[{listing.id}] listing 생성")

    translation_status = await _dispatch_if_changed(listing.id, None, request.description)

    message = "Listing created"
    if translation_status == "in_progress":
        message += ", translations in progress..."

    return ListingWriteResponse(
        message=message, listing=listing, translation_status=translation_status
    )


@router.put("/{listing_id}", response_model=ListingWriteResponse)
async def update_listing(
    listing_id: str, request: listing_service.ListingUpdateRequest
) -> ListingWriteResponse:
    """listing 수정 후 description이 바뀌었으면 재번역 디스패치

    변경 여부 판단을 위해 수정 반영 전에 기존 description을 읽는다.
    """
    previous = await listing_service.get_listing(listing_id)
    if previous is None:
        raise _not_found(listing_id)

    try:
        listing = await listing_service.update_listing(listing_id, request)
    except listing_service.ListingNotFoundError:
        raise _not_found(listing_id) from None

    translation_status: TranslationStatus = "unchanged"
    if "description" in request.model_fields_set:
        translation_status = await _dispatch_if_changed(
            listing_id, previous.description, request.description
        )
        if translation_status == "in_progress":
            logger.info(f"[{listing_id}] description 변경, 재번역 디스패치")

    message = "Listing updated"
    if translation_status == "in_progress":
        message += ", translations in progress..."

    return ListingWriteResponse(
        message=message, listing=listing, translation_status=translation_status
    )


@router.delete("/{listing_id}", response_model=ListingDeleteResponse)
async def delete_listing(listing_id: str) -> ListingDeleteResponse:
    listing = await listing_service.delete_listing(listing_id)
    if listing is None:
        raise _not_found(listing_id)
    return ListingDeleteResponse(message="Listing deleted", listing=listing)


@router.post("/{listing_id}/translate", response_model=BatchTranslateResponse)
async def translate_listing(listing_id: str) -> BatchTranslateResponse:
    """전체 언어 수동 번역 (완료까지 대기, POST /translate와 동일한 오류 코드)"""
    summary = await run_translation(listing_id, None)
    return batch_response(summary)
