from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Redis
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_socket_timeout: float = 5.0

    # Celery
    celery_broker_url: str = "redis://localhost:6379/0"
    celery_result_backend: str = "redis://localhost:6379/1"

    # CORS
    cors_origins: list[str] = ["http://localhost:5173"]

    # Translation providers
    primary_provider: str = "groq"  # "groq" | "gemini"
    secondary_provider: str = "mymemory"  # "mymemory"
    translation_source_language: str = "en"
    translation_provider_timeout: float = 30.0
    translation_throttle_ms: int = 200

    # Groq API (OpenAI 호환)
    groq_api_key: str = ""
    groq_model: str = "llama3-8b-8192"
    groq_api_url: str = "https://api.groq.com/openai/v1"

    # Gemini API
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash-lite"

    # MyMemory API
    mymemory_api_url: str = "https://api.mymemory.translated.net"
    mymemory_email: str = ""  # 설정 시 일일 쿼터 상향


@lru_cache
def get_settings() -> Settings:
    return Settings()
