"""Configuration and logging setup for the Network as Code client."""

import json
import logging
import os
import pathlib
from typing import Literal

import pydantic
import structlog

from . import api

CONFIG_ENV_VAR = "NAC_CONFIG_PATH"
TOKEN_ENV_VAR = "NAC_TOKEN"
LogFormat = Literal["logfmt", "json"]
logger = structlog.get_logger(__name__)


class ClientConfig(pydantic.BaseModel):
    """Configuration for the Network as Code client."""

    token: str = pydantic.Field(
        default_factory=lambda: os.environ.get(TOKEN_ENV_VAR, ""),
        description=f"API key (defaults to the {TOKEN_ENV_VAR} env var)",
        validate_default=True,
    )
    dev_mode: bool = pydantic.Field(
        False,
        description="Route requests to the development tenant",
    )
    timeout: float = pydantic.Field(
        api.DEFAULT_TIMEOUT,
        description="Request timeout in seconds",
        gt=0,
    )
    slice_poll_limit: float = pydantic.Field(
        30.0,
        description="Minimum seconds between slice state polls in monitoring",
        gt=0,
    )
    log_level: str = pydantic.Field("INFO", description="Logging level")
    log_format: LogFormat = pydantic.Field("logfmt", description="Log line format")
    setup_logging: bool = pydantic.Field(
        True,
        description="Configure structlog unless the application already did",
    )

    @pydantic.field_validator("token")
    @classmethod
    def token_not_empty(cls, value: str) -> str:
        if not value:
            msg = f"token is required (set it in the config or {TOKEN_ENV_VAR})"
            raise ValueError(msg)
        return value


def configure_logging(
    log_level_name: str,
    log_format: LogFormat = "logfmt",
    *,
    force: bool = False,
) -> bool:
    """Configure structlog for the client's log output.

    A library shares structlog's global configuration with its host
    application, so an existing configuration is left alone unless
    ``force`` is set.

    Args:
        log_level_name: Minimum level name, e.g. "INFO".
        log_format: "logfmt" for key=value lines, "json" for one JSON
            object per line.
        force: Replace an existing configuration.

    Returns:
        True if the configuration was applied.
    """
    if structlog.is_configured() and not force:
        logger.debug("Keeping existing logging configuration")
        return False

    if log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.processors.LogfmtRenderer(
            key_order=("timestamp", "level", "msg"),
        )
    log_level = getattr(logging, log_level_name.upper(), logging.INFO)
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.EventRenamer("msg"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
    return True


def load_config(config_path: str | None = None) -> ClientConfig:
    """Load configuration from a JSON file.

    Args:
        config_path: Path of the JSON file; defaults to the
            NAC_CONFIG_PATH environment variable.

    Raises:
        FileNotFoundError: If no path is given or the file does not exist.
        pydantic.ValidationError: If the file content is invalid.
    """
    resolved_path = config_path or os.environ.get(CONFIG_ENV_VAR)
    if not resolved_path:
        msg = f"No configuration path given and {CONFIG_ENV_VAR} is not set"
        raise FileNotFoundError(msg)

    path = pathlib.Path(resolved_path)
    if not path.exists():
        msg = f"Configuration file not found: {resolved_path}"
        raise FileNotFoundError(msg)

    with path.open("r") as f:
        data = json.load(f)

    logger.debug("Loaded configuration", path=str(path))
    return ClientConfig(**data)
