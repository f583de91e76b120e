from collections.abc import Generator
from typing import Protocol
from unittest.mock import MagicMock, patch

import fakeredis
import pytest
from fastapi.testclient import TestClient

from src.constants import SUPPORTED_LANGUAGES, RedisPrefix
from src.infra.redis import set_redis
from src.main import app
from src.schemas.translation import TranslationTarget
from src.services.throttle import Throttle, set_throttle
from src.services.translation import LanguageTranslator, set_language_translator
from src.services.translation.base import ProviderError

SOURCE_TEXT = "Welcome to our restaurant"

FRENCH = SUPPORTED_LANGUAGES[0]
SPANISH = SUPPORTED_LANGUAGES[1]


class SetupListingFunc(Protocol):
    def __call__(self, listing_id: str, description: str = SOURCE_TEXT) -> None: ...


class StubProvider:
    """언어 선택자별 고정 응답을 돌려주는 테스트용 provider

    translations에 없는 언어는 error(기본 ProviderError)를 발생시킨다.
    """

    def __init__(
        self,
        name: str,
        translations: dict[str, str] | None = None,
        error: Exception | None = None,
    ) -> None:
        self.name = name
        self._translations = translations or {}
        self._error = error
        self.calls: list[tuple[str, str]] = []

    def translate(self, text: str, language: str) -> str:
        self.calls.append((text, language))
        if language in self._translations:
            return self._translations[language]
        raise self._error or ProviderError(f"{self.name} unavailable for {language}")


class FakeClock:
    """Throttle 테스트용 가짜 시계 (sleep하면 시간이 흐름)"""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds

    def advance(self, seconds: float) -> None:
        self.now += seconds


def make_translator(
    primary: dict[str, str] | None = None,
    secondary: dict[str, str] | None = None,
) -> tuple[LanguageTranslator, StubProvider, StubProvider]:
    primary_stub = StubProvider("stub-primary", primary)
    secondary_stub = StubProvider("stub-secondary", secondary)
    return LanguageTranslator(primary_stub, secondary_stub), primary_stub, secondary_stub


def full_primary_translations(targets: tuple[TranslationTarget, ...]) -> dict[str, str]:
    return {t.language_name: f"<{t.language_code}> {SOURCE_TEXT}" for t in targets}


@pytest.fixture(autouse=True)
def no_throttle_delay() -> Generator[None, None, None]:
    set_throttle(Throttle(min_interval=0))
    yield
    set_throttle(None)


@pytest.fixture(autouse=True)
def reset_translator() -> Generator[None, None, None]:
    yield
    set_language_translator(None)


@pytest.fixture
def fake_redis() -> Generator[fakeredis.FakeRedis, None, None]:
    r = fakeredis.FakeRedis(decode_responses=True)
    set_redis(r)
    yield r
    set_redis(None)


@pytest.fixture
def mock_translate_job() -> Generator[MagicMock, None, None]:
    """Celery 브로커 없이 디스패치 호출만 기록"""
    with patch("src.services.dispatch.translate_listing_job") as mock_job:
        mock_job.delay.return_value.id = "task-123"
        yield mock_job


@pytest.fixture
def client(
    fake_redis: fakeredis.FakeRedis, mock_translate_job: MagicMock
) -> Generator[TestClient, None, None]:
    yield TestClient(app)


@pytest.fixture
def setup_listing(fake_redis: fakeredis.FakeRedis) -> Generator[SetupListingFunc, None, None]:
    """listing 저장소 직접 설정 팩토리

    사용법:
        setup_listing("listing_a1b2c3d4")
        setup_listing("listing_a1b2c3d4", description="")
    """

    def _setup(listing_id: str, description: str = SOURCE_TEXT) -> None:
        fake_redis.hset(
            f"{RedisPrefix.LISTING}:{listing_id}",
            mapping={
                "id": listing_id,
                "restaurant_name": "Chez Test",
                "description": description,
                "opening_hours": "",
                "address": "",
                "amenities": "[]",
                "created_at": "2026-01-01T00:00:00Z",
            },
        )
        fake_redis.zadd(RedisPrefix.LISTING_INDEX, {listing_id: 1.0})

    yield _setup
