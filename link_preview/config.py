from functools import lru_cache
from typing import cast

from pydantic import AnyHttpUrl, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    app_name: str = Field(
        default="Link Preview API",
        description="Application name",
    )
    metadata_service_url: AnyHttpUrl = Field(
        default=cast(
            AnyHttpUrl, "https://open-apis.hax.cloud/api/services/website/metadata"
        ),
        description="Endpoint of the remote website metadata service",
    )
    request_timeout: float = Field(
        default=10.0,
        description="Transport timeout in seconds for metadata requests",
    )
    encode_query: bool = Field(
        default=True,
        description="Percent-encode the q parameter; False sends the raw URL",
    )
    institution_domain: str = Field(
        default="psu.edu",
        description="Host substring that selects the institutional theme",
    )
    default_locale: str = Field(default="en")
    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def metadata_endpoint(self) -> str:
        return str(self.metadata_service_url).rstrip("/")


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
