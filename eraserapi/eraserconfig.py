"""The EraserConfig resource in its current (unversioned and v1alpha2) shape."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from .types import ContainerConfig, ManagerConfig, OptionalContainerConfig

__all__ = ["Components", "EraserConfig"]


def _section(data: dict, key: str) -> dict:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"{key} must be an object, got {value!r}")
    return value


@dataclass
class Components:
    """Container settings for the collector, scanner and remover."""

    collector: OptionalContainerConfig = field(default_factory=OptionalContainerConfig)
    scanner: OptionalContainerConfig = field(default_factory=OptionalContainerConfig)
    remover: ContainerConfig = field(default_factory=ContainerConfig)

    def to_dict(self) -> dict:
        return {
            "collector": self.collector.to_dict(),
            "scanner": self.scanner.to_dict(),
            "remover": self.remover.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Components":
        data = data or {}
        return cls(
            collector=OptionalContainerConfig.from_dict(_section(data, "collector")),
            scanner=OptionalContainerConfig.from_dict(_section(data, "scanner")),
            remover=ContainerConfig.from_dict(_section(data, "remover")),
        )


@dataclass
class EraserConfig:
    """Configuration of the eraser manager and its components."""

    manager: ManagerConfig = field(default_factory=ManagerConfig)
    components: Components = field(default_factory=Components)
    api_version: str = ""
    kind: str = ""

    def to_dict(self) -> dict:
        out: dict[str, Any] = {}
        if self.kind:
            out["kind"] = self.kind
        if self.api_version:
            out["apiVersion"] = self.api_version
        out["manager"] = self.manager.to_dict()
        out["components"] = self.components.to_dict()
        return out

    @classmethod
    def from_dict(cls, data: dict) -> "EraserConfig":
        if not isinstance(data, dict):
            raise ValueError(f"an EraserConfig must be an object, got {data!r}")
        return cls(
            manager=ManagerConfig.from_dict(_section(data, "manager")),
            components=Components.from_dict(_section(data, "components")),
            api_version=data.get("apiVersion", ""),
            kind=data.get("kind", ""),
        )

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), separators=(",", ":"))

    @classmethod
    def from_json(cls, text: str) -> "EraserConfig":
        """Decode a JSON document; raise ValueError if it is invalid."""
        return cls.from_dict(json.loads(text))