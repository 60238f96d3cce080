"""
Name: Application Configuration (Settings)

Responsibilities:
  - Centralized, typed configuration using pydantic-settings
  - Validate environment variables at startup
  - Provide defaults that work against a local MongoDB

Collaborators:
  - main.py: reads settings for CORS, router prefix and startup
  - container.py: reads settings for repository selection
  - infrastructure/db/client.py: reads Mongo connection settings

Constraints:
  - Lives in API/infrastructure layer, NOT in domain/application
  - No business logic, configuration only

Notes:
  - Uses pydantic-settings for env parsing and validation
  - Singleton via lru_cache
  - MONGO_ADDR is the only value needed to reach a non-local database
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        mongo_addr: MongoDB host address (default: localhost)
        mongo_port: MongoDB port (default: 27017)
        mongo_db_name: Database holding the users collection
        mongo_users_collection: Collection name for user documents
        mongo_server_selection_timeout_ms: Driver server selection timeout
        users_repository: "mongo" or "memory"
        api_prefix: Prefix the users router is mounted under
        app_env: Application environment (development/production)
        allowed_origins: Comma-separated CORS origins
        cors_allow_credentials: Allow cookies cross-origin (default: False)
        max_body_bytes: Max request body size (default: 1MB)
        log_level: Root level for the application logger
        log_json: Emit JSON log lines (default: True)
    """

    # Database
    mongo_addr: str = "localhost"
    mongo_port: int = 27017
    mongo_db_name: str = "dev"
    mongo_users_collection: str = "users"
    mongo_server_selection_timeout_ms: int = 5000

    # Repository backend ("memory" is for tests and local demos)
    users_repository: str = "mongo"

    # HTTP
    api_prefix: str = "/api"
    app_env: str = "development"
    allowed_origins: str = "http://localhost:3000"
    cors_allow_credentials: bool = False
    max_body_bytes: int = 1024 * 1024  # 1MB

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    @field_validator("mongo_addr")
    @classmethod
    def mongo_addr_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("mongo_addr must not be empty")
        return v

    @field_validator("mongo_port")
    @classmethod
    def mongo_port_in_range(cls, v: int) -> int:
        if v < 1 or v > 65535:
            raise ValueError("mongo_port must be between 1 and 65535")
        return v

    @field_validator("mongo_server_selection_timeout_ms")
    @classmethod
    def timeout_must_be_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("mongo_server_selection_timeout_ms must be greater than 0")
        return v

    @field_validator("users_repository")
    @classmethod
    def users_repository_valid(cls, v: str) -> str:
        backend = (v or "mongo").strip().lower()
        if backend not in {"mongo", "memory"}:
            raise ValueError("users_repository must be mongo or memory")
        return backend

    @field_validator("api_prefix")
    @classmethod
    def normalize_api_prefix(cls, v: str) -> str:
        prefix = (v or "").strip().strip("/")
        return f"/{prefix}" if prefix else ""

    @field_validator("max_body_bytes")
    @classmethod
    def max_body_bytes_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("max_body_bytes must be greater than 0")
        return v

    def get_allowed_origins_list(self) -> list[str]:
        """Parse comma-separated origins into a list."""
        return [
            origin.strip()
            for origin in self.allowed_origins.split(",")
            if origin.strip()
        ]

    def is_production(self) -> bool:
        return self.app_env.strip().lower() == "production"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown env vars
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get singleton Settings instance.

    Raises:
        ValidationError: If env vars are invalid
    """
    return Settings()
