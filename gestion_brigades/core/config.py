"""Configuration de l'application via variables d'environnement."""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration chargée depuis .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "Gestion des brigades API"
    debug: bool = False
    log_level: str = "INFO"
    create_tables: bool = True

    # Session serveur
    session_cookie_name: str = "session_token"
    session_ttl_seconds: int = 60 * 60 * 24  # 24 heures
    session_cookie_secure: bool = False
    session_purge_interval_seconds: int = 60 * 15  # 0 pour désactiver la purge périodique

    # CORS : le cookie de session exige des origines explicites en production
    cors_origins: list[str] = ["http://localhost:3000"]

    # PostgreSQL
    postgres_host: str = "127.0.0.1"
    postgres_port: int = 5432
    postgres_user: str = "postgres"
    postgres_password: str = ""
    postgres_db: str = "gestion_brigades"
    postgres_pool_size: int = 5
    postgres_max_overflow: int = 10

    @property
    def database_url_async(self) -> str:
        """URL pour SQLAlchemy avec le driver asyncpg (utilisée par l'application)."""
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )


settings = Settings()
