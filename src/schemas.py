"""Pydantic models for the verbose per-violation output."""

from pydantic import BaseModel


class InstanceDetail(BaseModel):
    html: str
    targets: str
    summary: str


class ViolationDetail(BaseModel):
    id: str
    impact: str | None = None
    tags: str
    description: str
    help: str
    instances: list[InstanceDetail] = []
