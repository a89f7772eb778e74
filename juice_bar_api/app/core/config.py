"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts without any configuration; in production set
``APP_ENV=production`` and provide ``ALLOWED_ORIGINS`` to restrict
cross‑origin access.
"""

import os
from dataclasses import dataclass
from typing import List, Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Juice Bar API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    environment: str = os.getenv("APP_ENV", "development")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # Comma‑separated list of origins allowed to call the API when
    # running in production.  Outside production every origin is
    # accepted.  Example: ALLOWED_ORIGINS="https://shop.example.com".
    allowed_origins: str = os.getenv("ALLOWED_ORIGINS", "")

    # Populate the store with the demo catalog on startup.
    seed_data: bool = os.getenv("SEED_DATA", "true").lower() in {"1", "true", "yes"}

    graphql_path: str = os.getenv("GRAPHQL_PATH", "/graphql")

    # Events a GraphQL subscriber may fall behind before new ones are
    # dropped for it.
    subscription_buffer: int = int(os.getenv("SUBSCRIPTION_BUFFER", "100"))

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def cors_origins(self) -> List[str]:
        """Origins passed to the CORS middleware."""
        if not self.is_production:
            return ["*"]
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before importing this module.
settings = Settings()
