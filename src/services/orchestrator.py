"""배치 번역 오케스트레이션

설정된 모든 대상 언어에 대해 LanguageTranslator를 순차 실행한다.
rate limit이 배치 전체에 걸려 있으므로 병렬 처리하지 않는다.
"""

import logging
from collections.abc import Sequence

from celery.exceptions import SoftTimeLimitExceeded

from src.schemas.translation import TranslationBatchResult, TranslationOutcome, TranslationTarget
from src.services.throttle import Throttle, get_throttle
from src.services.translation import LanguageTranslator, get_language_translator

logger = logging.getLogger(__name__)


class BatchOrchestrator:
    def __init__(
        self,
        translator: LanguageTranslator | None = None,
        throttle: Throttle | None = None,
    ) -> None:
        self._translator = translator or get_language_translator()
        self._throttle = throttle or get_throttle()

    def translate_all(
        self, text: str, targets: Sequence[TranslationTarget]
    ) -> TranslationBatchResult:
        """모든 대상 언어를 설정 순서대로 한 번씩 번역

        한 언어의 실패(예상치 못한 예외 포함)는 원문으로 대체되며,
        나머지 언어의 번역을 중단시키지 않는다.

        Raises:
            ValueError: 원문이 비어있는 경우
        """
        self._validate_text(text)

        logger.info(f"전체 {len(targets)}개 언어 번역 시작")
        translations: dict[str, str] = {}
        outcomes: list[TranslationOutcome] = []

        for target in targets:
            outcome = self._translate_target(text, target)
            translations[target.storage_field] = outcome.text
            outcomes.append(outcome)

        succeeded = sum(1 for outcome in outcomes if outcome.succeeded)
        logger.info(f"전체 번역 완료: {succeeded}/{len(targets)}개 성공")
        return TranslationBatchResult(translations=translations, outcomes=outcomes)

    def translate_one(self, text: str, target: TranslationTarget) -> TranslationBatchResult:
        """단일 언어 번역 (전체 번역과 동일한 간격 제어/폴백 적용)"""
        self._validate_text(text)

        outcome = self._translate_target(text, target)
        return TranslationBatchResult(
            translations={target.storage_field: outcome.text}, outcomes=[outcome]
        )

    def _translate_target(self, text: str, target: TranslationTarget) -> TranslationOutcome:
        try:
            self._throttle.wait()
            return self._translator.translate(text, target)
        except SoftTimeLimitExceeded:
            # 워커 시간 초과 시 배치 전체 중단 (저장하지 않음)
            raise
        except Exception as e:
            logger.exception(f"[{target.language_name}] 치명적 오류, 원문 사용: {e}")
            return TranslationOutcome(
                target=target, text=text, provider_used="original", succeeded=False
            )

    @staticmethod
    def _validate_text(text: str) -> None:
        if not text or not text.strip():
            raise ValueError("번역할 원문이 비어있습니다")
