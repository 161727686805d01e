import logging
from pathlib import Path
from typing import Annotated, Any, Literal

from pydantic import BeforeValidator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

logger = logging.getLogger(__name__)


def parse_origins(v: Any) -> list[str] | str:
    if isinstance(v, str) and not v.startswith("["):
        return [i.strip() for i in v.split(",") if i.strip()]
    elif isinstance(v, list | str):
        return v
    raise ValueError(v)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    LOG_LEVEL: str = "INFO"

    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Completion service
    OPENAI_API_KEY: str | None = None
    OPENAI_MODEL: str = "gpt-4o-mini"
    LLM_BASE_URL: str | None = None

    DEFAULT_SPELL_LENGTH: Literal["short", "medium", "long"] = "long"

    DATABASE_URL: str = "sqlite:///./cauldron.db"
    SUBSCRIBERS_FILE: Path = Path("emails.json")
    STATIC_DIR: Path | None = Path("public")

    # Mixed into the client address before hashing for spell records
    IP_HASH_SALT: str = ""

    ALLOWED_ORIGINS: Annotated[
        list[str] | str, NoDecode, BeforeValidator(parse_origins)
    ] = ["https://cauldron.online"]

    @property
    def has_api_key(self) -> bool:
        return bool(self.OPENAI_API_KEY)

    @model_validator(mode="after")
    def _warn_missing_api_key(self) -> "Settings":
        if not self.OPENAI_API_KEY:
            logger.warning(
                "OPENAI_API_KEY is not set. /cast-spell will fail until you add it to .env"
            )
        return self


settings = Settings()  # type: ignore
