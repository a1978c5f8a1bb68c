"""Configuration settings for the tender search gateway."""
from typing import Annotated, Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
from dotenv import load_dotenv

load_dotenv()


class Settings(BaseSettings):
    """Application settings with validation."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Google Cloud service account
    gcp_client_email: str = Field(..., validation_alias="GCP_CLIENT_EMAIL", description="Service account email")
    gcp_private_key: str = Field(..., validation_alias="GCP_PRIVATE_KEY", description="Service account private key (PEM)")
    gcp_project_id: str = Field(..., validation_alias="GCP_PROJECT_ID", description="Google Cloud project id")
    gcp_token_uri: str = Field(
        default="https://oauth2.googleapis.com/token",
        validation_alias="GCP_TOKEN_URI",
        description="OAuth2 token endpoint used to mint ID tokens"
    )

    # Remote search function
    cloud_function_url: str = Field(..., validation_alias="CLOUD_FUNCTION_URL", description="Search Cloud Function URL")
    request_timeout: Optional[float] = Field(
        default=None,
        validation_alias="REQUEST_TIMEOUT",
        description="Timeout in seconds for the remote call, unset means no timeout",
        gt=0
    )

    # Server Configuration
    host: str = Field(default="0.0.0.0", validation_alias="HOST")
    port: int = Field(default=8000, validation_alias="PORT", ge=1, le=65535)
    debug: bool = Field(default=False, validation_alias="DEBUG")

    # CORS Settings
    allowed_origins: Annotated[list[str], NoDecode] = Field(
        default=["http://localhost:3000", "http://127.0.0.1:3000"],
        validation_alias="ALLOWED_ORIGINS"
    )

    @field_validator("gcp_private_key")
    @classmethod
    def unescape_private_key(cls, v: str) -> str:
        """Keys stored in .env files carry literal \\n sequences."""
        return v.replace("\\n", "\n")

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def parse_allowed_origins(cls, v):
        """Parse comma-separated origins from env var."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v


# Global settings instance
settings = Settings()
