"""Configuration schema using Pydantic."""

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AdminConfig(BaseModel):
    """Administrative command line (synadm) configuration."""

    command: str = "synadm"
    args: list[str] = Field(default_factory=list)  # e.g. ["-c", "/etc/synadm.yaml"]
    timeout: float | None = None  # Seconds; None waits forever


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "WARNING"
    file: str | None = None  # Optional log file, rotated at 10 MB


class Config(BaseSettings):
    """Root configuration for matrix-contacts."""

    admin: AdminConfig = Field(default_factory=AdminConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = SettingsConfigDict(
        env_prefix="MATRIX_CONTACTS_",
        env_nested_delimiter="__",
    )
