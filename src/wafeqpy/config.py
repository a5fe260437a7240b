"""Client configuration."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from wafeqpy.exceptions import WafeqConfigError


class ClientConfig(BaseModel):
    """Configuration for Wafeq API client."""

    model_config = ConfigDict(frozen=True)

    BASE_URL: ClassVar[str] = "https://api.wafeq.com/v1"
    DEFAULT_TIMEOUT: ClassVar[float] = 10.0

    api_key: str = Field(min_length=1)
    base_url: str = BASE_URL
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)


def resolve_config(
    config: ClientConfig | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> ClientConfig:
    """Merge user settings with defaults.

    Args:
        config: Existing config or mapping of settings
        **overrides: Individual settings (api_key, base_url, timeout) that
            take precedence over ``config``

    Returns:
        Resolved, immutable config

    Raises:
        WafeqConfigError: If api_key is missing or empty, or timeout is not
            a positive number
    """
    if isinstance(config, ClientConfig):
        settings: dict[str, Any] = config.model_dump()
    else:
        settings = dict(config or {})
    settings.update({key: value for key, value in overrides.items() if value is not None})

    api_key = settings.get("api_key")
    if not isinstance(api_key, str) or not api_key.strip():
        raise WafeqConfigError("API key is required.")

    # Unset or blank values fall back to defaults
    if not settings.get("base_url"):
        settings["base_url"] = ClientConfig.BASE_URL
    if settings.get("timeout") is None:
        settings["timeout"] = ClientConfig.DEFAULT_TIMEOUT

    try:
        return ClientConfig(
            api_key=api_key,
            base_url=settings["base_url"],
            timeout=settings["timeout"],
        )
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in e.errors()
        )
        raise WafeqConfigError(f"Invalid client configuration: {details}") from e
