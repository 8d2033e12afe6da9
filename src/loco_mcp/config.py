"""Process configuration for the Loco MCP server.

Settings are resolved once at startup from the environment (optionally
populated from a ``.env`` file by the entry point) and then passed explicitly
to the components that need them. Nothing below reads the environment after
construction.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional
from urllib.parse import urlparse

from .constants import API_BASE_ENV, API_TOKEN_ENV, DEFAULT_API_BASE, SERVICE_TIMEOUT_ENV
from .exceptions import ConfigurationError


@dataclass
class ConfigValidationResult:
    """Result of configuration validation with success state and error details.

    Attributes:
        success: True if validation passed, False otherwise
        errors: List of error messages describing validation failures
    """

    success: bool
    errors: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Alias for success property for more readable code."""
        return self.success

    def add_error(self, error: str) -> None:
        """Add an error message and mark validation as failed."""
        self.errors.append(error)
        self.success = False

    @classmethod
    def success_result(cls) -> ConfigValidationResult:
        return cls(success=True, errors=[])


@dataclass(frozen=True)
class LocoSettings:
    """Credential and endpoint used for every request to the Loco API.

    Attributes:
        api_token: Bearer token sent in the Authorization header
        api_base: GraphQL endpoint URL
        timeout: Optional request timeout in seconds; None leaves the
            networking layer default in place
    """

    api_token: str = field(repr=False)
    api_base: str = DEFAULT_API_BASE
    timeout: Optional[float] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> LocoSettings:
        """Build settings from environment variables.

        Args:
            environ: Mapping to read from (defaults to ``os.environ``)

        Raises:
            ConfigurationError: If the API token is missing or a value is malformed
        """
        env = os.environ if environ is None else environ

        api_token = (env.get(API_TOKEN_ENV) or "").strip()
        if not api_token:
            raise ConfigurationError(f"{API_TOKEN_ENV} environment variable is not set")

        api_base = (env.get(API_BASE_ENV) or "").strip() or DEFAULT_API_BASE

        timeout: Optional[float] = None
        raw_timeout = (env.get(SERVICE_TIMEOUT_ENV) or "").strip()
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError as exc:
                raise ConfigurationError(f"{SERVICE_TIMEOUT_ENV} must be a number, got {raw_timeout!r}") from exc

        settings = cls(api_token=api_token, api_base=api_base, timeout=timeout)
        result = settings.validate()
        if not result.is_valid:
            raise ConfigurationError("; ".join(result.errors))
        return settings

    def validate(self) -> ConfigValidationResult:
        result = ConfigValidationResult.success_result()

        if not self.api_token:
            result.add_error("API token must not be empty")

        parsed = urlparse(self.api_base)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            result.add_error(f"Invalid API base URL: {self.api_base!r}")

        if self.timeout is not None and self.timeout <= 0:
            result.add_error(f"Timeout must be positive, got {self.timeout}")

        return result

    def to_dict(self) -> Dict[str, Any]:
        """Serialisable view of the settings with the token masked."""
        return {
            "api_base": self.api_base,
            "api_token": mask_token(self.api_token),
            "timeout": self.timeout,
        }


def mask_token(token: str) -> str:
    """Return a log-safe representation of a bearer token."""
    if len(token) <= 8:
        return "***"
    return f"{token[:4]}...{token[-4:]}"
