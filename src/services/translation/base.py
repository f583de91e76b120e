"""Translation Provider Protocol

교체 가능한 번역 provider 구현을 위한 인터페이스 정의.
"""

from typing import Protocol


class ProviderError(Exception):
    """provider 호출 실패 (타임아웃, non-2xx, 응답 형식 오류, API 키 누락)"""


class TranslationProvider(Protocol):
    """텍스트 번역 provider 인터페이스

    구현체:
    - GroqTranslation: Groq API (primary, 언어 이름 사용)
    - GeminiTranslation: Google Gemini API (primary, 언어 이름 사용)
    - MyMemoryTranslation: MyMemory API (secondary, 언어 코드 사용)
    """

    name: str

    def translate(self, text: str, language: str) -> str:
        """텍스트를 대상 언어로 번역

        Args:
            text: 원문 (영어)
            language: provider별 언어 선택자 (언어 이름 또는 언어 코드)

        Returns:
            str: 번역된 텍스트 (비어있지 않음)

        Raises:
            ProviderError: 번역 실패 시
        """
        ...
