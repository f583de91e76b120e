from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.config import get_settings
from src.infra.redis import close_redis, is_redis_available
from src.routes.listings import router as listings_router
from src.routes.translate import router as translate_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    yield
    close_redis()


app = FastAPI(lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Content-Type", "Authorization"],
    max_age=600,
)

app.include_router(listings_router)
app.include_router(translate_router)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok", "redis": "ok" if is_redis_available() else "unavailable"}
