"""Groq 기반 번역 구현체 (primary)

OpenAI 호환 chat completions 엔드포인트 사용.
"""

import httpx
from pydantic import BaseModel, ValidationError

from src.services.translation.base import ProviderError
from src.services.translation.prompts import build_instruction


class _ChatMessage(BaseModel):
    content: str | None = None


class _ChatChoice(BaseModel):
    message: _ChatMessage


class _ChatCompletion(BaseModel):
    choices: list[_ChatChoice]


class GroqTranslation:
    """Groq API(Llama)를 사용한 텍스트 번역"""

    name = "groq"

    def __init__(
        self,
        api_key: str,
        model: str,
        api_url: str = "https://api.groq.com/openai/v1",
        source_language: str = "en",
        timeout: float = 30.0,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._api_url = api_url.rstrip("/")
        self._source_language = source_language
        self._timeout = timeout

    def translate(self, text: str, language: str) -> str:
        """언어 이름(예: "French")으로 번역

        Raises:
            ProviderError: API 키 누락, 타임아웃, HTTP 오류, 응답 형식 오류, 빈 응답
        """
        if not self._api_key:
            raise ProviderError("GROQ_API_KEY가 설정되지 않았습니다")

        payload = {
            "model": self._model,
            "messages": [
                {
                    "role": "system",
                    "content": build_instruction(self._source_language, language),
                },
                {"role": "user", "content": text},
            ],
            "temperature": 0.1,
            "max_tokens": 1000,
            "top_p": 1,
            "stream": False,
        }

        try:
            with httpx.Client(timeout=self._timeout) as client:
                resp = client.post(
                    f"{self._api_url}/chat/completions",
                    headers={"Authorization": f"Bearer {self._api_key}"},
                    json=payload,
                )
                resp.raise_for_status()
        except httpx.TimeoutException as e:
            raise ProviderError(f"Groq API 타임아웃 ({self._timeout}s)") from e
        except httpx.HTTPStatusError as e:
            raise ProviderError(
                f"Groq API 오류 {e.response.status_code}: {e.response.text}"
            ) from e
        except httpx.HTTPError as e:
            raise ProviderError(f"Groq API 호출 실패: {e}") from e

        return self._parse_response(resp)

    def _parse_response(self, resp: httpx.Response) -> str:
        try:
            completion = _ChatCompletion.model_validate(resp.json())
        except (ValueError, ValidationError) as e:
            raise ProviderError(f"Groq 응답 형식 오류: {e}") from e

        if not completion.choices:
            raise ProviderError("Groq 응답에 choices가 없음")

        translated = (completion.choices[0].message.content or "").strip()
        if not translated:
            raise ProviderError("Groq 번역 결과가 비어있음")

        return translated
