from functools import lru_cache
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, extra="ignore", populate_by_name=True
    )

    # HTTP listener
    port: int = Field(5000, validation_alias="PORT")
    # Comma-separated origins, "*" for any
    cors_allow_origins: str = Field("*", validation_alias="CORS_ALLOW_ORIGINS")

    # Storage selection: "file" (one JSON file per user) or "mongo"
    task_repo_backend: str = Field("file", validation_alias="TASK_REPO_BACKEND")

    # File backend
    data_dir: str = Field("./data", validation_alias="DATA_DIR")

    # Document backend
    mongo_url: str = Field("mongodb://localhost:27017", validation_alias="MONGO_URL")
    mongo_db: str = Field("taskdesk", validation_alias="MONGO_DB")
    mongo_timeout_ms: int = Field(5000, validation_alias="MONGO_TIMEOUT_MS")

    # Username shape rule
    username_min_length: int = Field(5, validation_alias="USERNAME_MIN_LENGTH")
    username_max_length: int = Field(9, validation_alias="USERNAME_MAX_LENGTH")

    app_log_level: Optional[str] = Field(None, validation_alias="APP_LOG_LEVEL")

    @property
    def allowed_origins(self) -> List[str]:
        origins = [item.strip() for item in (self.cors_allow_origins or "").split(",")]
        return [item for item in origins if item] or ["*"]

    @property
    def backend(self) -> str:
        return (self.task_repo_backend or "file").strip().lower()


@lru_cache()
def get_settings() -> Settings:
    return Settings()
