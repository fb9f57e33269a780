"""Pydantic models for the report saved by ``axe --save``."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _AxeModel(BaseModel):
    # Unmodelled scanner keys are kept so debug dumps carry them through.
    model_config = ConfigDict(extra="allow", populate_by_name=True)


class ViolationInstance(_AxeModel):
    """One DOM node that fails a rule.

    ``target`` entries are plain selectors, or a list of selectors for nodes
    inside a shadow DOM (host first).
    """

    impact: str | None = None
    html: str = ""
    target: list[str | list[str]] = []
    failure_summary: str = Field(default="", alias="failureSummary")

    @field_validator("target", mode="before")
    @classmethod
    def _none_as_empty_list(cls, value: object) -> object:
        return [] if value is None else value

    @field_validator("html", "failure_summary", mode="before")
    @classmethod
    def _none_as_empty_str(cls, value: object) -> object:
        return "" if value is None else value


class ViolationType(_AxeModel):
    """A violated rule together with every node it was found on."""

    id: str = ""
    impact: str | None = None
    tags: list[str] = []
    description: str = ""
    help: str = ""
    help_url: str = Field(default="", alias="helpUrl")
    nodes: list[ViolationInstance] = []

    @field_validator("tags", "nodes", mode="before")
    @classmethod
    def _none_as_empty_list(cls, value: object) -> object:
        return [] if value is None else value

    @field_validator("id", "description", "help", "help_url", mode="before")
    @classmethod
    def _none_as_empty_str(cls, value: object) -> object:
        return "" if value is None else value


class AxeCliResult(_AxeModel):
    """A single page result. ``axe --save`` writes a list of these."""

    violations: list[ViolationType] = []

    @field_validator("violations", mode="before")
    @classmethod
    def _none_as_empty(cls, value: object) -> object:
        return [] if value is None else value
