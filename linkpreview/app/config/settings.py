"""Settings for the link preview service."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # "production" selects the remote resolver; anything else stays local.
    environment: str = Field("development", validation_alias="APP_ENV")

    link_preview_api_key: str = Field("", validation_alias="LINK_PREVIEW_API_KEY")
    link_preview_api_url: str = Field(
        "https://api.linkpreview.net",
        validation_alias="LINK_PREVIEW_API_URL",
    )

    simulated_delay_seconds: float = Field(0.1, validation_alias="SIMULATED_DELAY_SECONDS")

    fetch_connect_timeout_seconds: float = Field(5.0, validation_alias="FETCH_CONNECT_TIMEOUT_SECONDS")
    fetch_read_timeout_seconds: float = Field(15.0, validation_alias="FETCH_READ_TIMEOUT_SECONDS")
    fetch_user_agent: str = Field("", validation_alias="FETCH_USER_AGENT")

    readiness_timeout_seconds: float = Field(5.0, validation_alias="READINESS_TIMEOUT_SECONDS")
