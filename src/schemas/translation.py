"""번역 엔진 데이터 모델

Provider → LanguageTranslator → BatchOrchestrator → PersistenceSync 전체에서 사용하는 공통 스키마
"""

from typing import Literal, Self

from pydantic import BaseModel, ConfigDict, model_validator

ProviderUsed = Literal["primary", "secondary", "original"]


class TranslationTarget(BaseModel):
    """번역 대상 언어 (프로세스 시작 시 1회 로드, 불변)

    - language_name: primary provider 프롬프트용 ("French")
    - language_code: secondary provider langpair용 ("fr")
    - storage_field: 결과를 저장할 listing 필드 ("description_fr")
    """

    model_config = ConfigDict(frozen=True)

    language_name: str
    language_code: str
    storage_field: str

    def matches(self, lang: str) -> bool:
        """언어 이름 또는 코드와 일치하는지 (대소문자 무시)"""
        key = lang.strip().lower()
        return key in (self.language_name.lower(), self.language_code.lower())


class TranslationOutcome(BaseModel):
    """단일 언어 번역 결과

    실패해도 text는 항상 채워짐 (최악의 경우 원문).
    """

    model_config = ConfigDict(frozen=True)

    target: TranslationTarget
    text: str
    provider_used: ProviderUsed
    succeeded: bool


class TranslationBatchResult(BaseModel):
    """배치 번역 결과

    translations: storage_field → 번역 텍스트 (저장 단계에 전달되는 유일한 값)
    outcomes: 설정 순서대로의 언어별 결과 (로깅/응답용)
    """

    translations: dict[str, str]
    outcomes: list[TranslationOutcome]

    @model_validator(mode="after")
    def validate_complete(self) -> Self:
        """모든 outcome이 정확히 하나의 비어있지 않은 필드로 매핑되는지 검증"""
        expected = [outcome.target.storage_field for outcome in self.outcomes]
        if len(set(expected)) != len(expected):
            raise ValueError(f"중복된 storage_field: {expected}")
        if set(expected) != set(self.translations):
            raise ValueError(f"필드 불일치: {sorted(self.translations)} != {sorted(expected)}")
        empty = [field for field, text in self.translations.items() if not text]
        if empty:
            raise ValueError(f"빈 번역 필드: {empty}")
        return self


class ListingText(BaseModel):
    """엔진이 storage에서 읽는 최소 정보 (엔진은 수정하지 않음)"""

    id: str
    source_text: str
