from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    database_url: str = "sqlite+aiosqlite:///./lifting_diary.db"
    secret_key: str = "change-me-in-production"
    app_env: str = "development"  # "production" enables strict checks (JWT keys)
    # JWT: verify with RS256 when JWT_PUBLIC_KEY is set; otherwise HS256 with SECRET_KEY
    jwt_algorithm: str = "HS256"
    jwt_private_key: str = ""  # PEM string, only needed to mint RS256 tokens (tooling)
    jwt_public_key: str = ""  # PEM string for RS256 (identity provider key)
    access_token_expire_minutes: int = 60 * 24 * 7  # 7 days
    cors_origins: str = "http://localhost:3000"
    enable_hsts: bool = False  # Set True in production behind HTTPS
    debug: bool = False
    rate_limit_default: str = "200/minute"

    recent_workouts_limit: int = 10

    @property
    def sync_database_url(self) -> str:
        """Database URL for sync drivers (Alembic, scripts)."""
        return self.database_url.replace("+asyncpg", "", 1).replace("+aiosqlite", "", 1)

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    @property
    def use_rs256(self) -> bool:
        """True if an RSA public key is set and RS256 should be used."""
        return bool(self.jwt_public_key.strip())

    def validate_jwt_config(self) -> None:
        """Raise if production config is inconsistent (e.g. default secret with HS256)."""
        if self.app_env != "production":
            return
        if not self.use_rs256 and self.secret_key == "change-me-in-production":
            raise RuntimeError("SECRET_KEY must be set in production when JWT_PUBLIC_KEY is not configured")
        if self.jwt_private_key.strip() and not self.jwt_public_key.strip():
            raise RuntimeError("JWT_PRIVATE_KEY is set but JWT_PUBLIC_KEY is missing in production")


settings = Settings()
