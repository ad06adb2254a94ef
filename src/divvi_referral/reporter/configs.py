"""Reporter configuration models.

See Also:
    [AttributionReporter][divvi_referral.reporter.reporter.AttributionReporter]:
        Consumes this configuration.
    [load_yaml()][divvi_referral.core.yaml.load_yaml]: Reads the YAML file
        passed to ``from_yaml()``.
"""

from __future__ import annotations

from pathlib import Path  # noqa: TC003
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator

from divvi_referral.core.yaml import load_yaml


DEFAULT_REFERRAL_URL = "https://api.divvi.xyz/submitReferral"
DEFAULT_ATTRIBUTION_URL = "https://api.divvi.xyz/submitAttributionEvent"


class ReporterConfig(BaseModel):
    """Endpoints and limits for submitting attribution events.

    Attributes:
        referral_url: Endpoint for referral submissions.
        attribution_url: Endpoint for attribution-event submissions.
        max_body_size: Maximum error-response body bytes kept for diagnostics.

    Examples:
        ```yaml
        referral_url: https://api.staging.divvi.xyz/submitReferral
        max_body_size: 16384
        ```

        ```python
        config = ReporterConfig.from_yaml("config/reporter.yaml")
        ```

    Note:
        No timeout or retry settings exist. Retries are signalled to the
        caller through the exception type; a caller that needs a deadline
        wraps the coroutine in ``asyncio.timeout()``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    referral_url: str = Field(
        default=DEFAULT_REFERRAL_URL,
        min_length=1,
        description="Referral submission endpoint",
    )
    attribution_url: str = Field(
        default=DEFAULT_ATTRIBUTION_URL,
        min_length=1,
        description="Attribution event submission endpoint",
    )
    max_body_size: int = Field(
        default=65_536,
        ge=1,
        description="Maximum error-response body bytes kept for diagnostics",
    )

    @field_validator("referral_url", "attribution_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Require an absolute http(s) URL."""
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"endpoint must be an http(s) URL, got {v!r}")
        return v

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create a configuration from a dictionary with strict validation."""
        return cls.model_validate(data)

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> Self:
        """Create a configuration from a YAML file.

        Raises:
            FileNotFoundError: If the file does not exist.
            pydantic.ValidationError: If a value is invalid or a key is unknown.
        """
        return cls.from_dict(load_yaml(config_path))
