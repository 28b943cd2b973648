"""
Settings for the status renderer, loaded from YAML or the environment.
"""

import logging
import os
from pathlib import Path
from typing import Union

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from monit_status.exceptions import ConfigError, UnsupportedFormatVersion
from monit_status.models.enums import FormatVersion
from monit_status.models.runtime import RuntimeInfo

logger = logging.getLogger(__name__)

ENV_PREFIX = "MONIT_STATUS_"


class LoggingConfig(BaseModel):
    """Logging settings, see logging_config.setup_logging."""

    log_dir: str = Field(default="/var/log/monit-status", description="Directory for log files")
    console_level: str = Field(default="INFO", description="Console log level")
    file_level: str = Field(default="DEBUG", description="File log level")
    use_json: bool = Field(default=False, description="Write JSON lines to log files")

    @field_validator("console_level", "file_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {value}")
        return level


class ApiConfig(BaseModel):
    """HTTP status endpoint settings."""

    status_path: str = Field(default="/_status", description="Route serving the document")


class StatusConfig(BaseModel):
    """Top level configuration."""

    format_version: FormatVersion = Field(
        default=FormatVersion.V2, description="Version used when a request names none"
    )
    process_engine: bool = Field(
        default=True, description="Write process and system resource blocks"
    )
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    api: ApiConfig = Field(default_factory=ApiConfig)

    @field_validator("format_version", mode="before")
    @classmethod
    def _negotiate_version(cls, value):
        try:
            return FormatVersion.negotiate(value)
        except UnsupportedFormatVersion as e:
            raise ValueError(str(e)) from e

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "StatusConfig":
        """
        Load configuration from a YAML file.

        A missing file yields the defaults.

        Raises:
            ConfigError: if the file cannot be parsed or fails validation
        """
        path = Path(path)
        if not path.exists():
            logger.info(f"Config file {path} not found, using defaults")
            return cls()

        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Cannot read config {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Config {path} must contain a mapping")

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid config {path}: {e}") from e

    @classmethod
    def from_env(cls) -> "StatusConfig":
        """Create config from MONIT_STATUS_* environment variables."""
        config = cls()
        try:
            if os.getenv(f"{ENV_PREFIX}FORMAT_VERSION"):
                config.format_version = FormatVersion.negotiate(
                    os.getenv(f"{ENV_PREFIX}FORMAT_VERSION")
                )
            if os.getenv(f"{ENV_PREFIX}PROCESS_ENGINE"):
                config.process_engine = (
                    os.getenv(f"{ENV_PREFIX}PROCESS_ENGINE").lower() == "true"
                )
            config.logging = LoggingConfig(
                log_dir=os.getenv(f"{ENV_PREFIX}LOG_DIR", config.logging.log_dir),
                console_level=os.getenv(f"{ENV_PREFIX}LOG_LEVEL", config.logging.console_level),
                file_level=os.getenv(f"{ENV_PREFIX}FILE_LOG_LEVEL", config.logging.file_level),
                use_json=os.getenv(f"{ENV_PREFIX}LOG_JSON", "false").lower() == "true",
            )
            config.api = ApiConfig(
                status_path=os.getenv(f"{ENV_PREFIX}STATUS_PATH", config.api.status_path)
            )
        except (ValidationError, UnsupportedFormatVersion) as e:
            raise ConfigError(f"Invalid environment configuration: {e}") from e
        return config

    def save(self, path: Union[str, Path]) -> None:
        """Write configuration as YAML, creating parent directories."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            yaml.safe_dump(self.model_dump(mode="json"), f, default_flow_style=False, sort_keys=False)
        logger.info(f"Saved configuration to {path}")

    def apply_to(self, runtime: RuntimeInfo) -> RuntimeInfo:
        """
        Return the runtime snapshot with configured overrides applied.

        A disabled process engine hides the process and system resource
        blocks even when the snapshot was collected with it enabled.
        """
        if self.process_engine or not runtime.process_engine:
            return runtime
        return runtime.model_copy(update={"process_engine": False})
