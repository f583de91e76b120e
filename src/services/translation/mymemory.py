"""MyMemory 기반 번역 구현체 (secondary)

통계 기반 MT. primary 실패 시에만 사용.
"""

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from src.services.translation.base import ProviderError

MYMEMORY_API_URL = "https://api.mymemory.translated.net"


class _ResponseData(BaseModel):
    translated_text: str | None = Field(default=None, alias="translatedText")


class _MyMemoryResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    response_status: int | None = Field(default=None, alias="responseStatus")
    response_details: str | None = Field(default=None, alias="responseDetails")
    response_data: _ResponseData | None = Field(default=None, alias="responseData")


class MyMemoryTranslation:
    """MyMemory REST API를 사용한 텍스트 번역"""

    name = "mymemory"

    def __init__(
        self,
        api_url: str = MYMEMORY_API_URL,
        source_language: str = "en",
        email: str = "",
        timeout: float = 30.0,
    ) -> None:
        self._api_url = api_url.rstrip("/")
        self._source_language = source_language
        self._email = email
        self._timeout = timeout

    def translate(self, text: str, language: str) -> str:
        """언어 코드(예: "fr")로 번역

        MyMemory는 실패해도 200을 반환하는 경우가 있어 responseStatus로 판정.

        Raises:
            ProviderError: 타임아웃, HTTP 오류, responseStatus != 200, 빈 번역
        """
        params = {"q": text, "langpair": f"{self._source_language}|{language}"}
        if self._email:
            params["de"] = self._email

        try:
            with httpx.Client(timeout=self._timeout) as client:
                resp = client.get(f"{self._api_url}/get", params=params)
                resp.raise_for_status()
        except httpx.TimeoutException as e:
            raise ProviderError(f"MyMemory API 타임아웃 ({self._timeout}s)") from e
        except httpx.HTTPStatusError as e:
            raise ProviderError(f"MyMemory API 오류: {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise ProviderError(f"MyMemory API 호출 실패: {e}") from e

        try:
            data = _MyMemoryResponse.model_validate(resp.json())
        except (ValueError, ValidationError) as e:
            raise ProviderError(f"MyMemory 응답 형식 오류: {e}") from e

        translated = data.response_data.translated_text if data.response_data else None
        if data.response_status != 200 or not translated or not translated.strip():
            raise ProviderError(f"MyMemory failed: {data.response_details or 'Unknown error'}")

        return translated.strip()
