"""Gemini 기반 번역 구현체 (primary 대안)"""

# pyright: reportMissingTypeStubs=false

from celery.exceptions import SoftTimeLimitExceeded
from google import genai
from google.genai import types

from src.services.translation.base import ProviderError
from src.services.translation.prompts import build_instruction


class GeminiTranslation:
    """Google Gemini API를 사용한 텍스트 번역"""

    name = "gemini"

    def __init__(
        self,
        api_key: str,
        model: str,
        source_language: str = "en",
        timeout: float = 30.0,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._source_language = source_language
        self._timeout = timeout

    def translate(self, text: str, language: str) -> str:
        """언어 이름(예: "French")으로 번역

        Raises:
            ProviderError: API 키 누락, API 오류, 빈 응답
        """
        if not self._api_key:
            raise ProviderError("GEMINI_API_KEY가 설정되지 않았습니다")

        client = genai.Client(
            api_key=self._api_key,
            # HttpOptions.timeout은 밀리초 단위
            http_options=types.HttpOptions(timeout=int(self._timeout * 1000)),
        )

        try:
            response = client.models.generate_content(
                model=self._model,
                contents=text,
                config=types.GenerateContentConfig(
                    system_instruction=build_instruction(self._source_language, language),
                    temperature=0.1,
                    max_output_tokens=1000,
                ),
            )
        except SoftTimeLimitExceeded:
            raise
        except Exception as e:
            raise ProviderError(f"Gemini API 호출 실패: {e}") from e

        translated = (response.text or "").strip()
        if not translated:
            raise ProviderError("빈 응답")

        return translated
