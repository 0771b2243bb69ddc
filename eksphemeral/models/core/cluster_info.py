"""Cluster data models exchanged with the control plane.

Field names follow Python conventions; the control plane's JSON keys are
declared as aliases so payloads validate and serialize without mapping code.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ClusterStatusBlock(BaseModel):
    """Provider-side cluster status, surfaced verbatim."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    status: str = ""
    endpoint: str = ""
    platform_version: str = Field("", alias="platformv")
    vpc_config: str = Field("", alias="vpcconf")
    iam_role: str = Field("", alias="iamrole")

    @field_validator("*", mode="before")
    @classmethod
    def _stringify(cls, value: Any) -> str:
        if value is None:
            return ""
        return value if isinstance(value, str) else str(value)


class ClusterDetail(BaseModel):
    """Full description of a single cluster."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = ""
    name: str = ""
    kube_version: str = Field("", alias="kubeversion")
    num_workers: int = Field(0, alias="numworkers")
    created_at: int = Field(0, alias="created")
    timeout_minutes: int = Field(0, alias="timeout")
    ttl_minutes_remaining: int = Field(0, alias="ttl")
    owner: str = ""
    status: ClusterStatusBlock = Field(
        default_factory=ClusterStatusBlock, alias="details"
    )

    @field_validator("created_at", mode="before")
    @classmethod
    def _parse_epoch(cls, value: Any) -> Any:
        # The control plane stores the creation time as a string.
        if value is None or value == "":
            return 0
        if isinstance(value, str):
            return int(float(value.strip()))
        return value

    @field_validator("status", mode="before")
    @classmethod
    def _default_status(cls, value: Any) -> Any:
        return {} if value is None else value


class ClusterSpec(BaseModel):
    """Parameters for provisioning a new cluster."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    num_workers: int = Field(alias="numworkers")
    kube_version: str = Field(alias="kubeversion")
    timeout_minutes: int = Field(alias="timeout")
    owner: str

    @classmethod
    def from_form(cls, form: Mapping[str, Any]) -> ClusterSpec:
        """Build a spec from raw form values.

        Only well-formedness is checked here: text fields are stripped and
        numeric fields must parse as integers. Anything deeper is left to
        the control plane.

        Raises:
            pydantic.ValidationError: If a numeric field does not parse.
        """
        values = {
            key: value.strip() if isinstance(value, str) else value
            for key, value in form.items()
        }
        return cls.model_validate(values)

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the control plane's create request body."""
        return self.model_dump(by_alias=True)


class ProlongRequest(BaseModel):
    """Lifetime extension for an existing cluster."""

    id: str
    ptime: int = Field(gt=0)


__all__ = [
    "ClusterDetail",
    "ClusterSpec",
    "ClusterStatusBlock",
    "ProlongRequest",
]
