"""Pydantic models for the subset of ``cargo metadata`` output we read."""

from __future__ import annotations

from pydantic import BaseModel, Field


class CargoPackage(BaseModel):
    id: str
    name: str
    version: str


class DepKindInfo(BaseModel):
    kind: str | None = None
    target: str | None = None


class NodeDep(BaseModel):
    name: str = ""
    pkg: str
    dep_kinds: list[DepKindInfo] = Field(default_factory=list)


class ResolveNode(BaseModel):
    id: str
    deps: list[NodeDep] = Field(default_factory=list)
    dependencies: list[str] = Field(default_factory=list)


class Resolve(BaseModel):
    nodes: list[ResolveNode] = Field(default_factory=list)
    root: str | None = None


class CargoMetadata(BaseModel):
    packages: list[CargoPackage]
    workspace_members: list[str] = Field(default_factory=list)
    resolve: Resolve | None = None
    workspace_root: str | None = None
    version: int = 1
