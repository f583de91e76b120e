"""번역 디스패처: CRUD 쓰기 이후 자동 번역을 백그라운드로 위임

호출자는 작업 완료를 기다리지 않는다 (AsyncResult는 조회용으로만 사용).
같은 listing에 대한 연속 디스패치는 중복 제거하지 않는다.
"""

import asyncio
import logging

from src.infra.workers.translate_listing_job import translate_listing_job

logger = logging.getLogger(__name__)


async def dispatch_translation(listing_id: str, lang: str | None = None) -> str | None:
    """번역 태스크 큐잉. 성공 시 task ID, 실패 시 None (예외를 올리지 않음)."""
    try:
        result = await asyncio.to_thread(translate_listing_job.delay, listing_id, lang)
    except Exception as e:
        logger.error(f"[{listing_id}] Celery 큐잉 실패: {e}")
        return None

    logger.info(f"[{listing_id}] 번역 태스크 큐잉: {result.id}")
    return str(result.id)
