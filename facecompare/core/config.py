"""Configuration settings for the face template comparison service."""
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings.

    These settings are loaded from environment variables with the following precedence:
    1. Environment variables
    2. .env file
    3. Default values

    Attributes:
        TEMPLATE_BUCKET: S3 bucket where uploaded images are stored
        TEMPLATE_KEY_SUFFIX: Suffix appended to generated object keys
        SIMILARITY_THRESHOLD: Minimum similarity (0-100) Rekognition reports as a match
        LEGACY_METHODS_HEADER: Emit the legacy misspelled allow-methods header
    """
    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_prefix="",
    )

    # Core Settings
    PROJECT_NAME: str = "Face Template Comparison Service"
    VERSION: str = "0.1.0"
    API_PREFIX: str = ""
    ENVIRONMENT: str = "development"

    # CORS Settings
    ALLOWED_ORIGINS: str = "*"
    LEGACY_METHODS_HEADER: bool = False

    @property
    def cors_origins(self) -> List[str]:
        """Get list of allowed origins."""
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",")]

    # AWS Settings
    AWS_ACCESS_KEY_ID: str = ""
    AWS_SECRET_ACCESS_KEY: str = ""
    AWS_REGION: str = "us-east-1"

    # Template storage
    TEMPLATE_BUCKET: str = "mw-dhs-code-assessment"
    TEMPLATE_KEY_SUFFIX: str = ".png"
    LIST_MAX_KEYS: Optional[int] = None  # None lists the whole bucket

    # Face comparison settings
    SIMILARITY_THRESHOLD: float = 80.0

    # Optional settings with defaults
    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False
    HOST: str = "0.0.0.0"
    PORT: int = 8000

settings = Settings()
