from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

TEST_ENVIRONMENT = "test"


class ReportingSettings(BaseSettings):
    """Reporting settings loaded from environment variables.

    Pydantic Settings reads env vars matching the field aliases.
    In development, it also reads from .env file if present.

    Instantiate per call instead of keeping a module-level copy: the
    environment may change between calls (tests do this all the time) and
    reporting eligibility must reflect the current values.
    """

    # Runtime designation, "test" disables external reporting
    environment: str = Field(default="development", alias="ENVIRONMENT")

    # Rollbar post_server_item access token
    rollbar_key: str | None = Field(default=None, alias="ROLLBAR_KEY")

    model_config = SettingsConfigDict(
        env_file=".env",  # Load from .env in development
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown env vars
    )
