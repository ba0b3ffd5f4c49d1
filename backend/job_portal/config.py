from typing import Optional
from urllib.parse import quote_plus

from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigurationError(RuntimeError):
    """Raised when the environment cannot support serving requests."""


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Database
    db_user: Optional[str] = None
    db_pass: Optional[str] = None
    db_host: str = "cluster0.h6nxi.mongodb.net"
    db_name: str = "Job-Portal"
    db_options: str = "retryWrites=true&w=majority&appName=Cluster0"

    # Server
    host: str = "0.0.0.0"
    port: int = 5000
    allowed_origins: str = "*"  # comma separated

    # Exposes every applicant's records when no email filter is given
    allow_unfiltered_applications: bool = True

    # App
    debug: bool = False

    def has_credentials(self) -> bool:
        return bool(self.db_user) and bool(self.db_pass)

    def mongodb_uri(self) -> str:
        """
        Build the SRV connection string for the managed cluster.

        Raises:
            ConfigurationError: If DB_USER or DB_PASS is not set
        """
        if not self.has_credentials():
            raise ConfigurationError("Missing MongoDB credentials in environment variables.")

        user = quote_plus(self.db_user)
        password = quote_plus(self.db_pass)
        return f"mongodb+srv://{user}:{password}@{self.db_host}/?{self.db_options}"

    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]


settings = Settings()
