from src.schemas.translation import TranslationTarget


class ListingId:
    PREFIX = "listing_"


class TTL:
    CELERY_RESULT = 60 * 60 * 2  # 2시간


class RedisPrefix:
    LISTING = "listing"
    LISTING_INDEX = "listings"


class Limits:
    TASK_TIME_MARGIN = 60  # soft limit 계산 시 throttle/저장 여유
    TASK_KILL_GRACE = 60  # soft limit 이후 강제 종료까지
    LOG_PREVIEW_CHARS = 100


# 설정 순서대로 번역됨 (순차 처리)
SUPPORTED_LANGUAGES: tuple[TranslationTarget, ...] = (
    TranslationTarget(language_name="French", language_code="fr", storage_field="description_fr"),
    TranslationTarget(language_name="Spanish", language_code="es", storage_field="description_es"),
    TranslationTarget(language_name="German", language_code="de", storage_field="description_de"),
    TranslationTarget(
        language_name="Japanese", language_code="ja", storage_field="description_jp"
    ),
    TranslationTarget(language_name="Thai", language_code="th", storage_field="description_th"),
)
