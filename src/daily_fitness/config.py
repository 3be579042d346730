from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


def _norm_db_url(url: str | None) -> str | None:
    """
    Normalize database URL to use the async SQLite driver for SQLAlchemy.

    Plain ``sqlite`` URLs are rewritten to ``sqlite+aiosqlite``. URLs already
    specifying an async driver are returned as-is.
    """
    if not url:
        return None
    if url.startswith("sqlite://"):
        url = "sqlite+aiosqlite://" + url[len("sqlite://") :]
    return url


class Config(BaseSettings):
    """
    Application configuration loaded from environment variables.
    Uses pydantic for validation and parsing.
    """

    DATABASE_URL: str = Field(
        "sqlite+aiosqlite:///./db.local.sqlite", description="Database URL"
    )
    LOG_LEVEL: str = Field("INFO", description="Root log level")
    HOST: str = Field("0.0.0.0", description="HTTP bind address")
    PORT: int = Field(4321, description="HTTP port")
    ALLOWED_ORIGINS: str = Field(
        "http://localhost:3000,http://127.0.0.1:3000",
        description="Comma-separated CORS origins",
    )

    @field_validator("DATABASE_URL", mode="before")
    @classmethod
    def validate_database_url(cls, v):
        if not v:
            raise ValueError("DATABASE_URL environment variable is required")
        return _norm_db_url(v)

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v):
        level = v.strip().upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unsupported LOG_LEVEL: {v}")
        return level

    @property
    def allowed_origins(self) -> list[str]:
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",") if o.strip()]


SETTINGS = Config()  # pyright: ignore[reportCallIssue]
