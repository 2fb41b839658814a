# -*- coding: utf-8 -*-
"""Location: ./ssui_e2e/config.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Suite configuration.

All settings can be overridden via environment variables with the SSUI_E2E_
prefix or a ``.env`` file. For example: SSUI_E2E_BASE_URL=https://ss1:4000,
SSUI_E2E_REST_URL_1=https://example.org/api/v1/, SSUI_E2E_RUN_E2E=true.
"""

# Standard
from functools import lru_cache
import logging
import re
from typing import Any, Dict, Optional

# Third-Party
from pydantic import Field, field_validator, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

# First-Party
from ssui_e2e.errors import ConfigurationError

_SIZE_PATTERN = re.compile(r"^\s*(\d+)x(\d+)\s*$")


def _empty_string_to_none(value: Any) -> Any:
    """Treat empty optional env vars as unset (None).

    Args:
        value: The raw value from the environment variable.

    Returns:
        None if the value is an empty string, otherwise the original value.

    Examples:
        >>> _empty_string_to_none("  ") is None
        True
        >>> _empty_string_to_none("x")
        'x'
    """
    if isinstance(value, str) and value.strip() == "":
        return None
    return value


def parse_size(size: Optional[str]) -> Optional[Dict[str, int]]:
    """Parse a WIDTHxHEIGHT string into a Playwright size dict.

    Args:
        size: Size string such as ``1920x1080``; empty or None disables sizing.

    Returns:
        ``{"width": w, "height": h}`` or None.

    Raises:
        ConfigurationError: If the string is not in WIDTHxHEIGHT form.

    Examples:
        >>> parse_size("1280x720")
        {'width': 1280, 'height': 720}
        >>> parse_size("") is None
        True
    """
    if not size:
        return None
    match = _SIZE_PATTERN.match(size)
    if not match:
        raise ConfigurationError(f"Size must be in the format WIDTHxHEIGHT (e.g., 1280x720), got {size!r}")
    return {"width": int(match.group(1)), "height": int(match.group(2))}


class Settings(BaseSettings):
    """Configuration of the target Security Server and the fixture data used by scenarios."""

    # Target console
    base_url: str = Field(default="https://localhost:4000", description="Root URL of the Security Server admin console")
    username: str = Field(default="xrd", description="Default sign-in user")
    password: SecretStr = Field(default=SecretStr("secret"), description="Password of the default sign-in user")
    test_client_name: str = Field(default="TestService", description="Client whose services the scenarios manage")
    ignore_https_errors: bool = Field(default=True, description="Accept self-signed console certificates")

    # Fixture URLs
    rest_url_1: str = Field(default="https://niis.org/nosuch/api/v1/test/", description="REST base path added by the add-service scenario")
    rest_url_2: str = Field(default="https://niis.org/nosuch/api/v2/test/", description="REST base path set by the edit-service scenario")
    openapi_url_1: Optional[str] = Field(default=None, description="OpenAPI 3 description added by the OpenAPI scenarios")
    openapi_url_2: Optional[str] = Field(default=None, description="OpenAPI 3 description set by the OpenAPI edit scenario")

    # Icon styles asserted on the TLS verification lock
    service_ssl_auth_on_style: str = Field(default="color: rgb(0, 115, 204)", description="Inline style of the lock icon when TLS verification is on")
    service_ssl_auth_off_style: str = Field(default="color: rgb(176, 176, 176)", description="Inline style of the lock icon when TLS verification is off")

    # Timing
    default_timeout_ms: int = Field(default=30000, gt=0, description="Default wait timeout for page objects in milliseconds")
    refresh_window_seconds: float = Field(default=60.0, ge=0, description="Minimum time between service refreshes enforced by the server")

    # Browser
    viewport_size: Optional[str] = Field(default="1920x1080", description="Browser viewport as WIDTHxHEIGHT")

    # Harness
    log_level: str = Field(default="INFO", description="Logging level for suite components")
    run_e2e: bool = Field(default=False, description="Run browser scenarios against the configured console")

    @field_validator("openapi_url_1", "openapi_url_2", "viewport_size", mode="before")
    @classmethod
    def empty_string_to_none(cls, value: Any) -> Any:
        """Delegate to shared validator."""
        return _empty_string_to_none(value)

    @field_validator("viewport_size")
    @classmethod
    def validate_viewport_size(cls, value: Optional[str]) -> Optional[str]:
        """Reject viewport strings that are not WIDTHxHEIGHT."""
        try:
            parse_size(value)
        except ConfigurationError as exc:
            raise ValueError(str(exc)) from exc
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Normalize and validate the logging level name."""
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @property
    def viewport(self) -> Optional[Dict[str, int]]:
        """Viewport as a Playwright size dict."""
        return parse_size(self.viewport_size)

    @property
    def openapi_configured(self) -> bool:
        """True when both OpenAPI description URLs are set."""
        return bool(self.openapi_url_1 and self.openapi_url_2)

    @property
    def refresh_window_ms(self) -> int:
        """Refresh window in milliseconds."""
        return int(self.refresh_window_seconds * 1000)

    model_config = SettingsConfigDict(env_prefix="SSUI_E2E_", env_file=".env", env_file_encoding="utf-8", extra="ignore")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings: A cached instance of the Settings class.
    """
    return Settings()
