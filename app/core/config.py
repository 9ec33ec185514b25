"""Configuration settings for the face match service."""
from typing import List, Optional

from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.core.exceptions import ConfigurationError
from app.domain.value_objects.comparison import DEFAULT_QUALITY_FILTER, QualityFilter


class Settings(BaseSettings):
    """Application settings.

    These settings are loaded from environment variables with the following precedence:
    1. Environment variables
    2. .env file
    3. Default values

    Attributes:
        SIMILARITY_THRESHOLD: Minimum similarity (0-100) Rekognition requires before
            returning a candidate match
        HIGH_CONFIDENCE_SCORE: Score above which a reference comparison is flagged
            as a high confidence match in the combined flow
    """
    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_prefix="",
    )

    # Core Settings
    PROJECT_NAME: str = "Face Match Service"
    VERSION: str = "0.1.0"
    API_V1_STR: str = "/api/v1"
    ENVIRONMENT: str = "development"

    # CORS Settings
    ALLOWED_ORIGINS: str = "http://localhost:3000"

    @property
    def cors_origins(self) -> List[str]:
        """Get list of allowed origins."""
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",")]

    # AWS Settings
    AWS_ACCESS_KEY_ID: str = ""
    AWS_SECRET_ACCESS_KEY: str = ""
    AWS_REGION: str = "us-east-1"
    AWS_S3_BUCKET: str = ""

    # Rekognition client settings
    REKOGNITION_CONNECT_TIMEOUT: float = 5.0
    REKOGNITION_READ_TIMEOUT: float = 30.0
    REKOGNITION_MAX_ATTEMPTS: int = 1  # A single attempt, failures surface immediately

    # Face comparison settings
    SIMILARITY_THRESHOLD: float = 98.0
    HIGH_CONFIDENCE_SCORE: float = 99.0

    # Image download settings
    IMAGE_FETCH_TIMEOUT: float = 10.0

    # Optional settings with defaults
    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False
    HOST: str = "0.0.0.0"
    PORT: int = 8000


class FaceComparisonConfig(BaseModel):
    """Explicit configuration handed to the face comparison service.

    Built once at startup from ``Settings`` so the comparison layer never reads
    process-wide state on its own.
    """
    region: str = Field("", description="AWS region hosting Rekognition")
    access_key_id: str = Field("", description="AWS access key id")
    secret_access_key: str = Field("", description="AWS secret access key")
    bucket: str = Field("", description="Default S3 bucket for object references")
    similarity_threshold: float = Field(
        98.0, ge=0.0, le=100.0, description="Minimum similarity for a candidate (0-100)"
    )
    quality_filter: QualityFilter = Field(
        DEFAULT_QUALITY_FILTER, description="Pre-filter applied to detected faces"
    )
    connect_timeout: float = Field(5.0, gt=0)
    read_timeout: float = Field(30.0, gt=0)
    max_attempts: int = Field(1, ge=1)

    @classmethod
    def from_settings(cls, app_settings: Optional[Settings] = None) -> "FaceComparisonConfig":
        """Build the comparison config from application settings.

        Raises:
            ConfigurationError: If a value is out of range or required values are missing
        """
        app_settings = app_settings or settings
        try:
            config = cls(
                region=app_settings.AWS_REGION,
                access_key_id=app_settings.AWS_ACCESS_KEY_ID,
                secret_access_key=app_settings.AWS_SECRET_ACCESS_KEY,
                bucket=app_settings.AWS_S3_BUCKET,
                similarity_threshold=app_settings.SIMILARITY_THRESHOLD,
                connect_timeout=app_settings.REKOGNITION_CONNECT_TIMEOUT,
                read_timeout=app_settings.REKOGNITION_READ_TIMEOUT,
                max_attempts=app_settings.REKOGNITION_MAX_ATTEMPTS,
            )
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid face comparison configuration: {e}",
                details={"errors": e.errors(include_url=False)},
            ) from e
        config.require_complete()
        return config

    def require_complete(self) -> None:
        """Fail fast when credentials, region or bucket are missing."""
        required = {
            "AWS_REGION": self.region,
            "AWS_ACCESS_KEY_ID": self.access_key_id,
            "AWS_SECRET_ACCESS_KEY": self.secret_access_key,
            "AWS_S3_BUCKET": self.bucket,
        }
        missing = [name for name, value in required.items() if not value]
        if missing:
            raise ConfigurationError(
                f"Missing required configuration: {', '.join(missing)}",
                details={"missing": missing},
            )


settings = Settings()
