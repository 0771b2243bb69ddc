"""Application settings models."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from eksphemeral.constants.defaults import (
    CONTROL_PLANE_URL_DEFAULT,
    KUBE_VERSIONS_DEFAULT,
    PROLONG_MINUTES_DEFAULT,
)
from eksphemeral.constants.timeouts import (
    CONTROL_PLANE_REQUEST_TIMEOUT,
    DETAIL_REFRESH_INTERVAL,
    INVENTORY_REFRESH_INTERVAL,
)
from eksphemeral.constants.values import CONSOLE_LINK_TEMPLATE


class AppSettings(BaseModel):
    """Application settings model with validation."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    # Control plane
    control_plane_url: str = CONTROL_PLANE_URL_DEFAULT
    request_timeout_seconds: float = Field(CONTROL_PLANE_REQUEST_TIMEOUT, gt=0)

    # Polling cadences (seconds)
    inventory_refresh_seconds: float = Field(INVENTORY_REFRESH_INTERVAL, gt=0)
    detail_refresh_seconds: float = Field(DETAIL_REFRESH_INTERVAL, gt=0)

    # Actions
    prolong_minutes: int = Field(PROLONG_MINUTES_DEFAULT, gt=0)

    # Rendering
    console_link_template: str = CONSOLE_LINK_TEMPLATE
    kube_versions: list[str] = list(KUBE_VERSIONS_DEFAULT)

    @field_validator("control_plane_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if not value:
            raise ValueError("control_plane_url must not be empty")
        return value


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""


class ConfigSaveError(ConfigError):
    """Raised when settings fail to save."""
