from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    log_level: str = "INFO"
    log_console: bool = False
    request_preview_limit: int = 64_000   # bytes
    response_preview_limit: int = 64_000  # chars

    model_config = SettingsConfigDict(
        env_prefix="UCODE_", env_file=".env", extra="ignore"
    )


class Config(BaseSettings):
    """
    Параметры подключения к u-code.

    Объект неизменяемый: один экземпляр разделяется всеми билдерами,
    созданными от одного UcodeAPI. Поля можно передать явно или взять
    из переменных окружения UCODE_* / файла .env.
    """

    app_id: str = ""
    base_url: str = ""
    auth_base_url: str = ""
    project_id: str = ""
    function_name: str = ""
    request_timeout: Optional[float] = 90.0

    model_config = SettingsConfigDict(
        env_prefix="UCODE_", env_file=".env", extra="ignore", frozen=True
    )

    @field_validator("base_url", "auth_base_url", mode="before")
    @classmethod
    def _strip_slash(cls, value: Optional[str]) -> str:
        return (value or "").rstrip("/")


settings = Settings()
