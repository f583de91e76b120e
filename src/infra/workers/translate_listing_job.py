"""Listing 자동 번역 작업 처리

Celery 워커에서 실행되는 백그라운드 태스크.
CRUD 응답과 분리되어 있으므로 어떤 실패도 로그로만 남긴다.
"""

import logging
from typing import Any

from celery.exceptions import SoftTimeLimitExceeded

from src.config import get_settings
from src.constants import SUPPORTED_LANGUAGES, Limits
from src.infra.celery_app import celery_app
from src.services.listing import ListingNotFoundError, StorageError
from src.services.listing_translation import (
    EmptySourceTextError,
    UnsupportedLanguageError,
    translate_listing,
)

logger = logging.getLogger(__name__)


def soft_time_limit() -> int:
    """모든 언어가 primary/secondary 타임아웃을 다 쓰는 최악의 경우 + 여유 (초)"""
    settings = get_settings()
    worst_case = len(SUPPORTED_LANGUAGES) * 2 * settings.translation_provider_timeout
    return int(worst_case) + Limits.TASK_TIME_MARGIN


SOFT_TIME_LIMIT = soft_time_limit()
TIME_LIMIT = SOFT_TIME_LIMIT + Limits.TASK_KILL_GRACE


@celery_app.task(soft_time_limit=SOFT_TIME_LIMIT, time_limit=TIME_LIMIT)
def translate_listing_job(listing_id: str, lang: str | None = None) -> dict[str, Any]:
    """Listing 번역 태스크

    Celery 워커에서 동기적으로 실행됨.

    Timeout:
        - soft_time_limit: provider 타임아웃 기준 (기본 360초, SoftTimeLimitExceeded 발생)
        - time_limit: soft limit + 60초 (강제 종료)
    """
    logger.info(f"[{listing_id}] 번역 시작 (lang={lang or 'all'})")

    try:
        summary = translate_listing(listing_id, lang)

    except (ListingNotFoundError, EmptySourceTextError, UnsupportedLanguageError) as e:
        logger.error(f"[{listing_id}] 번역 중단: {e}")
        return {"status": "failed", "error": str(e)}

    except StorageError as e:
        logger.error(f"[{listing_id}] 저장 오류: {e}")
        return {"status": "failed", "error": str(e)}

    except SoftTimeLimitExceeded:
        logger.error(f"[{listing_id}] 시간 초과")
        return {"status": "failed", "error": "timeout"}

    except Exception as e:
        logger.exception(f"[{listing_id}] 예외 발생: {e}")
        return {"status": "failed", "error": str(e)}

    status = "completed" if summary.succeeded else "fallback"
    logger.info(f"[{listing_id}] 번역 완료 ({status})")
    return {"status": status, "translations": summary.translations}
