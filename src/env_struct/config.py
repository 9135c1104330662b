"""Runtime configuration for the env-struct command line tool."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ToolConfig(BaseSettings):
    """Tool settings loaded from env variables and .env files."""

    model_config = SettingsConfigDict(
        env_prefix="ENV_STRUCT_",
        env_file=".env",
        extra="ignore",
    )

    output_dir: str = Field(default="generated")
    log_level: str = Field(default="WARNING")
