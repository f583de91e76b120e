"""번역 결과 저장 (listing 단위 부분 업데이트)"""

import logging

from src.schemas.translation import TranslationBatchResult
from src.services.listing import StorageError, update_translation_fields

logger = logging.getLogger(__name__)


def apply_translations(listing_id: str, result: TranslationBatchResult) -> None:
    """번역 필드만 한 번의 업데이트로 반영. 재시도하지 않음.

    같은 결과를 다시 적용해도 상태는 변하지 않는다.

    Raises:
        StorageError: listing 삭제, Redis 장애 등
    """
    try:
        update_translation_fields(listing_id, result.translations)
    except StorageError as e:
        logger.error(f"[{listing_id}] 번역 저장 실패: {e}")
        raise

    logger.info(f"[{listing_id}] 번역 저장 완료: {sorted(result.translations)}")
