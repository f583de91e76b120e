"""Listing 서비스: 레스토랑 listing 저장소 (Redis hash)

CRUD는 route에서, 원문 조회/번역 필드 갱신은 번역 엔진에서 사용.
"""

import json
import uuid
from datetime import UTC, datetime
from typing import cast

import redis as redis_lib
from pydantic import field_validator

from src.constants import ListingId, RedisPrefix
from src.infra.redis import get_redis
from src.schemas.base import BaseSchema
from src.schemas.translation import ListingText
from src.services.translation.targets import translation_fields


class ListingCreateRequest(BaseSchema):
    restaurant_name: str
    description: str
    opening_hours: str | None = None
    address: str | None = None
    amenities: list[str] = []

    @field_validator("restaurant_name")
    @classmethod
    def validate_restaurant_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("restaurant_name은 비어있을 수 없습니다")
        return v


class ListingUpdateRequest(BaseSchema):
    """부분 수정 요청 (전달된 필드만 반영, 번역 필드는 수정 불가)"""

    restaurant_name: str | None = None
    description: str | None = None
    opening_hours: str | None = None
    address: str | None = None
    amenities: list[str] | None = None

    @field_validator("restaurant_name")
    @classmethod
    def validate_restaurant_name(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            raise ValueError("restaurant_name은 비어있을 수 없습니다")
        return v


class ListingResponse(BaseSchema):
    id: str
    restaurant_name: str
    description: str
    translations: dict[str, str | None]
    opening_hours: str | None = None
    address: str | None = None
    amenities: list[str] = []
    created_at: str
    updated_at: str | None = None


class ListingNotFoundError(Exception):
    def __init__(self, listing_id: str):
        self.listing_id = listing_id
        super().__init__(f"존재하지 않는 listing ID: {listing_id}")


class StorageError(Exception):
    pass


# 키가 없으면 -1. 있으면 ARGV의 (field, value) 쌍만 덮어쓴다.
_UPDATE_EXISTING_SCRIPT = """
if redis.call("EXISTS", KEYS[1]) == 0 then
    return -1
end
for i = 1, #ARGV, 2 do
    redis.call("HSET", KEYS[1], ARGV[i], ARGV[i + 1])
end
return 1
"""


def _generate_listing_id() -> str:
    return f"{ListingId.PREFIX}{uuid.uuid4().hex[:8]}"


def _listing_key(listing_id: str) -> str:
    return f"{RedisPrefix.LISTING}:{listing_id}"


def _now() -> str:
    return datetime.now(UTC).isoformat().replace("+00:00", "Z")


def _to_response(data: dict[str, str]) -> ListingResponse:
    return ListingResponse(
        id=data["id"],
        restaurant_name=data["restaurant_name"],
        description=data.get("description", ""),
        translations={field: data.get(field) for field in translation_fields()},
        opening_hours=data.get("opening_hours") or None,
        address=data.get("address") or None,
        amenities=json.loads(data.get("amenities") or "[]"),
        created_at=data["created_at"],
        updated_at=data.get("updated_at") or None,
    )


def _update_existing(listing_id: str, mapping: dict[str, str]) -> bool:
    """존재하는 listing의 지정 필드만 원자적으로 갱신. listing이 없으면 False."""
    redis = get_redis()
    args: list[str] = []
    for field, value in mapping.items():
        args.extend((field, value))

    result: int = redis.eval(  # type: ignore[assignment]
        _UPDATE_EXISTING_SCRIPT, 1, _listing_key(listing_id), *args
    )
    return result != -1


async def create_listing(request: ListingCreateRequest) -> ListingResponse:
    redis = get_redis()

    listing_id = _generate_listing_id()
    created_at = _now()
    mapping = {
        "id": listing_id,
        "restaurant_name": request.restaurant_name,
        "description": request.description,
        "opening_hours": request.opening_hours or "",
        "address": request.address or "",
        "amenities": json.dumps(request.amenities, ensure_ascii=False),
        "created_at": created_at,
    }

    pipe = redis.pipeline()
    pipe.hset(_listing_key(listing_id), mapping=mapping)
    pipe.zadd(RedisPrefix.LISTING_INDEX, {listing_id: datetime.now(UTC).timestamp()})
    pipe.execute()

    return _to_response(mapping)


async def get_listing(listing_id: str) -> ListingResponse | None:
    redis = get_redis()

    data = cast(dict[str, str], redis.hgetall(_listing_key(listing_id)))
    if not data:
        return None

    return _to_response(data)


async def list_listings() -> list[ListingResponse]:
    """최신순 전체 조회"""
    redis = get_redis()

    listing_ids = cast(list[str], redis.zrevrange(RedisPrefix.LISTING_INDEX, 0, -1))
    pipe = redis.pipeline()
    for listing_id in listing_ids:
        pipe.hgetall(_listing_key(listing_id))
    rows = cast(list[dict[str, str]], pipe.execute())

    return [_to_response(row) for row in rows if row]


async def update_listing(listing_id: str, request: ListingUpdateRequest) -> ListingResponse:
    """전달된 필드만 수정

    Raises:
        ListingNotFoundError: 존재하지 않는 listing ID
    """
    changes = request.model_dump(exclude_unset=True)
    mapping: dict[str, str] = {"updated_at": _now()}
    for field, value in changes.items():
        if field == "amenities":
            mapping[field] = json.dumps(value or [], ensure_ascii=False)
        else:
            mapping[field] = value or ""

    if not _update_existing(listing_id, mapping):
        raise ListingNotFoundError(listing_id)

    listing = await get_listing(listing_id)
    if listing is None:
        raise ListingNotFoundError(listing_id)
    return listing


async def delete_listing(listing_id: str) -> ListingResponse | None:
    redis = get_redis()

    listing = await get_listing(listing_id)
    if listing is None:
        return None

    pipe = redis.pipeline()
    pipe.delete(_listing_key(listing_id))
    pipe.zrem(RedisPrefix.LISTING_INDEX, listing_id)
    pipe.execute()

    return listing


def get_source_text(listing_id: str) -> ListingText | None:
    """번역 원문 조회 (엔진용)

    Raises:
        StorageError: Redis 접근 실패
    """
    redis = get_redis()

    try:
        data = cast(dict[str, str], redis.hgetall(_listing_key(listing_id)))
    except redis_lib.RedisError as e:
        raise StorageError(f"listing 조회 실패: {e}") from e

    if not data:
        return None

    return ListingText(id=listing_id, source_text=data.get("description", ""))


def update_translation_fields(listing_id: str, translations: dict[str, str]) -> None:
    """번역 필드만 한 번에 갱신 (원문 필드는 절대 수정하지 않음)

    Raises:
        ValueError: 번역 필드가 아닌 키가 포함된 경우
        StorageError: listing이 삭제되었거나 Redis 접근 실패
    """
    allowed = set(translation_fields())
    unknown = set(translations) - allowed
    if unknown:
        raise ValueError(f"번역 필드가 아님: {sorted(unknown)}")

    try:
        updated = _update_existing(listing_id, translations)
    except redis_lib.RedisError as e:
        raise StorageError(f"번역 필드 갱신 실패: {e}") from e

    if not updated:
        raise StorageError(f"listing이 존재하지 않음: {listing_id}")
