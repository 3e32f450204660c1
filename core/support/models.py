"""Data models for limited support reasons and API replies."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class LimitedSupportReason(BaseModel):
    """Limited support reason document posted to the management API."""

    model_config = ConfigDict(extra="ignore")

    summary: str
    details: str | None = None
    detection_type: str | None = None


class SuccessReply(BaseModel):
    """Body returned with ``201 Created``."""

    model_config = ConfigDict(extra="ignore")

    id: str
    kind: str | None = None
    href: str | None = None
    summary: str | None = None
    details: str | None = None
    detection_type: str | None = None
    creation_timestamp: str | None = None


class ErrorReply(BaseModel):
    """Error body returned for any non-201 status."""

    model_config = ConfigDict(extra="ignore")

    reason: str
    kind: str | None = None
    id: str | None = None
    href: str | None = None
    code: str | None = None
    operation_id: str | None = None


class SupportSuccess(BaseModel):
    """The API accepted the limited support reason."""

    model_config = ConfigDict(extra="forbid")

    outcome: Literal["success"] = "success"
    status: int
    reply: SuccessReply


class SupportFailure(BaseModel):
    """The API rejected the limited support reason."""

    model_config = ConfigDict(extra="forbid")

    outcome: Literal["failure"] = "failure"
    status: int
    reply: ErrorReply
    reason: str


ClassifiedResponse = Annotated[SupportSuccess | SupportFailure, Field(discriminator="outcome")]


class SubstitutionEntry(BaseModel):
    """One applied parameter."""

    model_config = ConfigDict(extra="forbid")

    name: str
    token: str
    replaced_count: int


class SubstitutionReport(BaseModel):
    """Outcome of applying parameters to a template."""

    model_config = ConfigDict(extra="forbid")

    entries: list[SubstitutionEntry] = Field(default_factory=list)
    unresolved: list[str] = Field(default_factory=list)

    @property
    def replaced_count(self) -> int:
        return sum(entry.replaced_count for entry in self.entries)
