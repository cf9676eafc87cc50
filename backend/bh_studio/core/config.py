from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    PROJECT_NAME: str = "BH Studio"
    API_V1_STR: str = "/api/v1"
    ENVIRONMENT: Literal["local", "staging", "production"] = "local"
    LOG_LEVEL: str = "INFO"
    BACKEND_CORS_ORIGINS: list[str] = ["*"]

    # AI gateway (OpenAI chat-completions compatible)
    AI_GATEWAY_API_KEY: str | None = Field(
        default=None,
        validation_alias=AliasChoices("AI_GATEWAY_API_KEY", "LOVABLE_API_KEY"),
    )
    AI_GATEWAY_BASE_URL: str = "https://ai.gateway.lovable.dev/v1"

    MODEL_TEXT: str = "google/gemini-2.5-flash"
    MODEL_PROMPT_ENGINEER: str = "google/gemini-3-flash-preview"
    MODEL_IMAGE_EDIT: str = "google/gemini-2.5-flash-image-preview"
    MODEL_IMAGE_PRO: str = "google/gemini-3-pro-image-preview"
    MODEL_IMAGE_FAST: str = "google/gemini-2.5-flash-image"
    PROMPT_ENGINEER_MAX_TOKENS: int = 2000

    # BaaS (database RPCs + object storage)
    SUPABASE_URL: str | None = None
    SUPABASE_SERVICE_ROLE_KEY: str | None = None
    GENERATION_IMAGES_BUCKET: str = "generation-images"

    # Video model
    REPLICATE_API_KEY: str | None = None
    REPLICATE_BASE_URL: str = "https://api.replicate.com/v1"
    VIDEO_MODEL_VERSION: str = "3f0457e4619daac51203dedb472816fd4af51f3149fa7a9e0b5ffcf1b8172438"
    VIDEO_POLL_INTERVAL_SECONDS: float = 5.0
    VIDEO_MAX_POLL_ATTEMPTS: int = 60
    VIDEO_REQUEST_TIMEOUT_SECONDS: float = 120.0

    GEM_COST_CACHE_TTL_SECONDS: float = 300.0


settings = Settings()  # type: ignore
