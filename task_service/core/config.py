"""
Configuration settings for Task Service.
"""
import os
from typing import List
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Settings:
    """Application settings"""

    # Service information
    service_name: str = os.getenv("SERVICE_NAME", "task_service")
    service_version: str = os.getenv("SERVICE_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "False").lower() == "true"
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Database configuration
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./tasks.db")

    # Task store backend: "sql" or "memory"
    task_store_backend: str = os.getenv("TASK_STORE_BACKEND", "sql").lower()

    # Auth Service configuration
    auth_service_url: str = os.getenv("AUTH_SERVICE_URL", "http://auth_service:8000")
    auth_service_timeout: int = int(os.getenv("AUTH_SERVICE_TIMEOUT", "30"))
    auth_service_retries: int = int(os.getenv("AUTH_SERVICE_RETRIES", "3"))

    # API configuration
    api_prefix: str = os.getenv("API_PREFIX", "/api/v1")

    # CORS configuration
    allowed_origins: List[str] = os.getenv("ALLOWED_ORIGINS", "*").split(",")


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get settings instance."""
    return settings
