"""provider 호출 간격 제어

외부 API의 분당/일일 쿼터 보호용. 프로세스 전역에서 하나의 인스턴스를 공유하며,
동시에 실행 중인 모든 배치의 호출 간격을 함께 보장한다.
"""

import threading
import time
from collections.abc import Callable

from src.config import get_settings


class Throttle:
    """연속된 호출 사이에 최소 간격을 강제 (고정 시간 기반)

    첫 호출은 대기하지 않는다. clock/sleep은 테스트에서 교체 가능.
    """

    def __init__(
        self,
        min_interval: float,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if min_interval < 0:
            raise ValueError(f"min_interval은 0 이상이어야 합니다: {min_interval}")
        self.min_interval = min_interval
        self._clock = clock
        self._sleep = sleep
        self._lock = threading.Lock()
        self._last_call: float | None = None

    def wait(self) -> float:
        """필요한 만큼 대기 후 호출 시각 기록. 실제 대기한 시간(초) 반환."""
        with self._lock:
            waited = 0.0
            if self._last_call is not None:
                remaining = self.min_interval - (self._clock() - self._last_call)
                if remaining > 0:
                    self._sleep(remaining)
                    waited = remaining
            self._last_call = self._clock()
            return waited


class _ThrottleHolder:
    instance: Throttle | None = None


def get_throttle() -> Throttle:
    if _ThrottleHolder.instance is None:
        settings = get_settings()
        _ThrottleHolder.instance = Throttle(min_interval=settings.translation_throttle_ms / 1000)
    return _ThrottleHolder.instance


def set_throttle(throttle: Throttle | None) -> None:
    _ThrottleHolder.instance = throttle
