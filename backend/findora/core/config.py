"""
Pydantic Settings — centralized configuration loaded from environment variables.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Database ─────────────────────────────
    POSTGRES_USER: str = "findora_user"
    POSTGRES_PASSWORD: str = "findora_pass"
    POSTGRES_SERVER: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_DB: str = "findora_db"

    # Full SQLAlchemy URL; takes precedence over the POSTGRES_* parts when set
    DATABASE_URI: str | None = None

    @property
    def DATABASE_URL(self) -> str:
        """Async URL for app runtime (asyncpg)."""
        if self.DATABASE_URI:
            return self.DATABASE_URI
        return f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"

    @property
    def DATABASE_URL_SYNC(self) -> str:
        """Sync URL for Alembic migrations (psycopg2)."""
        if self.DATABASE_URI:
            return self.DATABASE_URI.replace("+asyncpg", "").replace("+aiosqlite", "")
        return f"postgresql://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"

    # ── File Storage ──────────────────────────
    STORAGE_BACKEND: str = "s3"  # s3 | memory
    STORAGE_ENDPOINT: str = "http://localhost:9000"
    STORAGE_ACCESS_KEY: str = "minioadmin"
    STORAGE_SECRET_KEY: str = "minioadmin"
    STORAGE_BUCKET_NAME: str = "seller-documents"
    STORAGE_REGION: str = "us-east-1"

    # ── Seller documents ─────────────────────
    MAX_DOCUMENT_SIZE_BYTES: int = 5 * 1024 * 1024

    # ── Auth / JWT ────────────────────────────
    JWT_SECRET_KEY: str = "change-this-in-production"
    JWT_ALGORITHM: str = "HS256"
    JWT_ACCESS_TOKEN_EXPIRE_MINUTES: int = 480
    BCRYPT_ROUNDS: int = 12

    # ── Application ───────────────────────────
    APP_ENV: str = "development"
    LOG_JSON: bool = False
    CORS_ORIGINS: list[str] = ["*"]

    model_config = {"env_file": ["../.env", ".env"], "extra": "ignore"}


settings = Settings()
