"""단일 언어 번역: primary → secondary → 원문 폴백 체인"""

import logging

from src.schemas.translation import TranslationOutcome, TranslationTarget
from src.services.translation.base import ProviderError, TranslationProvider

logger = logging.getLogger(__name__)


class LanguageTranslator:
    """(text, target) 한 쌍에 대한 2단계 provider 폴백

    primary에는 언어 이름, secondary에는 언어 코드를 넘긴다.
    어떤 실패도 예외로 올리지 않고 TranslationOutcome에 담는다.
    """

    def __init__(self, primary: TranslationProvider, secondary: TranslationProvider) -> None:
        self.primary = primary
        self.secondary = secondary

    def translate(self, text: str, target: TranslationTarget) -> TranslationOutcome:
        name = target.language_name

        logger.info(f"[{name}] {self.primary.name}로 번역 시도")
        try:
            translated = self.primary.translate(text, target.language_name)
        except ProviderError as e:
            logger.warning(f"[{name}] {self.primary.name} 실패, {self.secondary.name}로 폴백: {e}")
        else:
            logger.info(f"[{name}] 번역 성공 ({self.primary.name})")
            return TranslationOutcome(
                target=target, text=translated, provider_used="primary", succeeded=True
            )

        try:
            translated = self.secondary.translate(text, target.language_code)
        except ProviderError as e:
            logger.error(f"[{name}] 모든 provider 실패, 원문 사용: {e}")
            return TranslationOutcome(
                target=target, text=text, provider_used="original", succeeded=False
            )

        logger.info(f"[{name}] 번역 성공 ({self.secondary.name} 폴백)")
        return TranslationOutcome(
            target=target, text=translated, provider_used="secondary", succeeded=True
        )
