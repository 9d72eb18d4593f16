import logging
import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


@dataclass
class DatabaseConfig:
    """Database configuration settings"""
    url: str
    echo: bool = False  # Log SQL statements


@dataclass
class CatalogConfig:
    """Print-on-demand provider API settings"""
    api_token: str = ""
    shop_id: str = ""
    base_url: str = "https://api.printify.com/v1"
    timeout: float = 30.0

    @property
    def is_configured(self) -> bool:
        return bool(self.api_token and self.shop_id)


@dataclass
class AppConfig:
    """Application configuration"""
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 3000
    environment: str = "development"  # development, staging, production
    log_level: str = "INFO"
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    max_content_length: int = 10 * 1024


class Config:
    def __init__(
        self,
        database: DatabaseConfig,
        catalog: CatalogConfig,
        app: AppConfig,
    ):
        self.database = database
        self.catalog = catalog
        self.app = app

    @classmethod
    def from_env(cls) -> "Config":
        """Build configuration from the process environment (and .env, if present)."""
        load_dotenv()

        database = DatabaseConfig(
            url=os.getenv("DATABASE_URL", "sqlite:///database/storefront.db"),
            echo=os.getenv("DB_ECHO", "false").lower() == "true",
        )

        catalog = CatalogConfig(
            api_token=os.getenv("PRINTIFY_API_TOKEN", ""),
            shop_id=os.getenv("PRINTIFY_SHOP_ID", ""),
            base_url=os.getenv("PRINTIFY_BASE_URL", "https://api.printify.com/v1"),
            timeout=float(os.getenv("PRINTIFY_TIMEOUT", "30")),
        )

        origins = os.getenv("CORS_ORIGINS", "*")
        app = AppConfig(
            debug=os.getenv("DEBUG", "false").lower() == "true",
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "3000")),
            environment=os.getenv("ENVIRONMENT", "development"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
        )

        return cls(database=database, catalog=catalog, app=app)

    def validate(self) -> None:
        """Validate critical configuration"""
        if not self.database.url:
            raise ValueError("DATABASE_URL is required")

        if not self.catalog.is_configured:
            logger.warning("PRINTIFY_API_TOKEN or PRINTIFY_SHOP_ID missing; catalog requests will fail")
