import logging

import redis

from src.config import get_settings

logger = logging.getLogger(__name__)


class _RedisHolder:
    client: redis.Redis | None = None


def get_redis() -> redis.Redis:
    """listing 저장소 클라이언트 (프로세스 전역)"""
    if _RedisHolder.client is None:
        settings = get_settings()
        _RedisHolder.client = redis.Redis(
            host=settings.redis_host,
            port=settings.redis_port,
            socket_timeout=settings.redis_socket_timeout,
            decode_responses=True,
        )
    return _RedisHolder.client


def is_redis_available() -> bool:
    try:
        return bool(get_redis().ping())
    except redis.RedisError as e:
        logger.warning(f"Redis 연결 실패: {e}")
        return False


def close_redis() -> None:
    if _RedisHolder.client is not None:
        _RedisHolder.client.close()
        _RedisHolder.client = None


def set_redis(client: redis.Redis | None) -> None:
    _RedisHolder.client = client
