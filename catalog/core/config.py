from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Base configuration for the API (no secrets here)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False
    )

    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8080)
    project_id: str = Field(default="MSDS-Course-Catalog")
    log_level: str = Field(default="INFO")

    postgres_host: str = Field(default="localhost")
    postgres_port: int = Field(default=5432)
    postgres_db: str = Field(default="msds_course_catalog")
    postgres_user: str = Field(default="postgres")
    postgres_password: str = Field(default="postgres")
    database_url: str | None = Field(default=None)

    reset_schema_on_startup: bool = Field(default=True)

    @property
    def postgres_url(self) -> str:
        if self.database_url:
            return self.database_url
        # Cloud SQL style unix socket directory, e.g. /cloudsql/project:region:instance
        if self.postgres_host.startswith("/"):
            return (
                f"postgresql+asyncpg://{self.postgres_user}:{self.postgres_password}@"
                f"/{self.postgres_db}?host={self.postgres_host}"
            )
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{self.postgres_password}@"
            f"{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

settings = Settings()
