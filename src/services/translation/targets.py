"""번역 대상 언어 설정"""

from collections.abc import Iterable
from functools import lru_cache

from src.constants import SUPPORTED_LANGUAGES
from src.schemas.translation import TranslationTarget


def load_targets(targets: Iterable[TranslationTarget]) -> tuple[TranslationTarget, ...]:
    """대상 언어 목록 검증

    Raises:
        ValueError: 목록이 비었거나 language_name/storage_field가 중복된 경우
    """
    loaded = tuple(targets)
    if not loaded:
        raise ValueError("번역 대상 언어가 최소 1개 필요합니다")

    names = [t.language_name.lower() for t in loaded]
    if len(set(names)) != len(names):
        raise ValueError(f"중복된 language_name: {names}")

    fields = [t.storage_field for t in loaded]
    if len(set(fields)) != len(fields):
        raise ValueError(f"중복된 storage_field: {fields}")

    return loaded


@lru_cache
def get_targets() -> tuple[TranslationTarget, ...]:
    return load_targets(SUPPORTED_LANGUAGES)


def find_target(lang: str) -> TranslationTarget | None:
    """언어 이름 또는 코드로 대상 언어 조회"""
    for target in get_targets():
        if target.matches(lang):
            return target
    return None


def translation_fields() -> list[str]:
    return [t.storage_field for t in get_targets()]
