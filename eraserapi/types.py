"""Data types shared by the eraser configuration and job resources."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

from .duration import format_duration, parse_duration
from .quantity import Quantity

__all__ = [
    "Runtime", "JobPhase", "RepoTag", "ResourceRequirements", "ContainerConfig",
    "OptionalContainerConfig", "ScheduleConfig", "ProfileConfig", "ImageJobCleanupConfig",
    "ImageJobConfig", "NodeFilterConfig", "ManagerConfig", "Image", "ObjectMeta",
    "ImageJobStatus", "ImageJob", "ImageListSpec", "ImageListStatus", "ImageList",
]


class Runtime(str, Enum):
    CONTAINERD = "containerd"
    DOCKERSHIM = "dockershim"
    CRIO = "crio"

    @classmethod
    def parse(cls, value: Any) -> "Runtime":
        """Return the runtime named by value; raise ValueError otherwise."""
        if not isinstance(value, str):
            raise ValueError(f"runtime must be a string, got {value!r}")
        try:
            return cls(value)
        except ValueError:
            raise ValueError(
                f"cannot determine runtime type: {value}. "
                "valid values are containerd, dockershim, or crio"
            ) from None


class JobPhase(str, Enum):
    RUNNING = "Running"
    COMPLETED = "Completed"
    FAILED = "Failed"


def _duration(data: dict, key: str) -> int:
    return parse_duration(data[key]) if key in data else 0


def _quantity(data: dict, key: str) -> Quantity:
    return Quantity.parse(data[key]) if key in data else Quantity()


def _format_time(moment: datetime) -> str:
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%SZ")


def _parse_time(text: Optional[str]) -> Optional[datetime]:
    if text is None:
        return None
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


@dataclass
class RepoTag:
    repo: str = ""
    tag: str = ""

    def to_dict(self) -> dict:
        out = {}
        if self.repo:
            out["repo"] = self.repo
        if self.tag:
            out["tag"] = self.tag
        return out

    @classmethod
    def from_dict(cls, data: dict) -> "RepoTag":
        return cls(repo=data.get("repo", ""), tag=data.get("tag", ""))


@dataclass
class ResourceRequirements:
    mem: Quantity = field(default_factory=Quantity)
    cpu: Quantity = field(default_factory=Quantity)

    def to_dict(self) -> dict:
        return {"mem": self.mem.to_json(), "cpu": self.cpu.to_json()}

    @classmethod
    def from_dict(cls, data: dict) -> "ResourceRequirements":
        return cls(mem=_quantity(data, "mem"), cpu=_quantity(data, "cpu"))


@dataclass
class ContainerConfig:
    image: RepoTag = field(default_factory=RepoTag)
    request: ResourceRequirements = field(default_factory=ResourceRequirements)
    limit: ResourceRequirements = field(default_factory=ResourceRequirements)
    config: Optional[str] = None

    def to_dict(self) -> dict:
        out = {
            "image": self.image.to_dict(),
            "request": self.request.to_dict(),
            "limit": self.limit.to_dict(),
        }
        if self.config is not None:
            out["config"] = self.config
        return out

    @classmethod
    def from_dict(cls, data: dict) -> "ContainerConfig":
        return cls(
            image=RepoTag.from_dict(data.get("image", {})),
            request=ResourceRequirements.from_dict(data.get("request", {})),
            limit=ResourceRequirements.from_dict(data.get("limit", {})),
            config=data.get("config"),
        )


@dataclass
class OptionalContainerConfig(ContainerConfig):
    enabled: bool = False

    def to_dict(self) -> dict:
        out = {"enabled": True} if self.enabled else {}
        out.update(super().to_dict())
        return out

    @classmethod
    def from_dict(cls, data: dict) -> "OptionalContainerConfig":
        base = ContainerConfig.from_dict(data)
        return cls(
            image=base.image,
            request=base.request,
            limit=base.limit,
            config=base.config,
            enabled=bool(data.get("enabled", False)),
        )


@dataclass
class ScheduleConfig:
    repeat_interval: int = 0
    begin_immediately: bool = False

    def to_dict(self) -> dict:
        out: dict = {}
        if self.repeat_interval:
            out["repeatInterval"] = format_duration(self.repeat_interval)
        if self.begin_immediately:
            out["beginImmediately"] = True
        return out

    @classmethod
    def from_dict(cls, data: dict) -> "ScheduleConfig":
        return cls(
            repeat_interval=_duration(data, "repeatInterval"),
            begin_immediately=bool(data.get("beginImmediately", False)),
        )


@dataclass
class ProfileConfig:
    enabled: bool = False
    port: int = 0

    def to_dict(self) -> dict:
        out: dict = {}
        if self.enabled:
            out["enabled"] = True
        if self.port:
            out["port"] = self.port
        return out

    @classmethod
    def from_dict(cls, data: dict) -> "ProfileConfig":
        return cls(enabled=bool(data.get("enabled", False)), port=int(data.get("port", 0)))


@dataclass
class ImageJobCleanupConfig:
    delay_on_success: int = 0
    delay_on_failure: int = 0

    def to_dict(self) -> dict:
        out = {}
        if self.delay_on_success:
            out["delayOnSuccess"] = format_duration(self.delay_on_success)
        if self.delay_on_failure:
            out["delayOnFailure"] = format_duration(self.delay_on_failure)
        return out

    @classmethod
    def from_dict(cls, data: dict) -> "ImageJobCleanupConfig":
        return cls(
            delay_on_success=_duration(data, "delayOnSuccess"),
            delay_on_failure=_duration(data, "delayOnFailure"),
        )


@dataclass
class ImageJobConfig:
    success_ratio: float = 0.0
    cleanup: ImageJobCleanupConfig = field(default_factory=ImageJobCleanupConfig)

    def to_dict(self) -> dict:
        out: dict = {}
        if self.success_ratio:
            out["successRatio"] = self.success_ratio
        out["cleanup"] = self.cleanup.to_dict()
        return out

    @classmethod
    def from_dict(cls, data: dict) -> "ImageJobConfig":
        return cls(
            success_ratio=float(data.get("successRatio", 0.0)),
            cleanup=ImageJobCleanupConfig.from_dict(data.get("cleanup", {})),
        )


@dataclass
class NodeFilterConfig:
    type: str = ""
    selectors: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        out: dict = {}
        if self.type:
            out["type"] = self.type
        if self.selectors:
            out["selectors"] = list(self.selectors)
        return out

    @classmethod
    def from_dict(cls, data: dict) -> "NodeFilterConfig":
        return cls(type=data.get("type", ""), selectors=list(data.get("selectors") or []))


@dataclass
class ManagerConfig:
    runtime: Optional[Runtime] = None
    otlp_endpoint: str = ""
    log_level: str = ""
    scheduling: ScheduleConfig = field(default_factory=ScheduleConfig)
    profile: ProfileConfig = field(default_factory=ProfileConfig)
    image_job: ImageJobConfig = field(default_factory=ImageJobConfig)
    pull_secrets: list[str] = field(default_factory=list)
    node_filter: NodeFilterConfig = field(default_factory=NodeFilterConfig)
    priority_class_name: str = ""

    def to_dict(self) -> dict:
        out: dict = {}
        if self.runtime is not None:
            out["runtime"] = self.runtime.value
        if self.otlp_endpoint:
            out["otlpEndpoint"] = self.otlp_endpoint
        if self.log_level:
            out["logLevel"] = self.log_level
        out["scheduling"] = self.scheduling.to_dict()
        out["profile"] = self.profile.to_dict()
        out["imageJob"] = self.image_job.to_dict()
        if self.pull_secrets:
            out["pullSecrets"] = list(self.pull_secrets)
        out["nodeFilter"] = self.node_filter.to_dict()
        if self.priority_class_name:
            out["priorityClassName"] = self.priority_class_name
        return out

    @classmethod
    def from_dict(cls, data: dict) -> "ManagerConfig":
        runtime = data.get("runtime")
        return cls(
            runtime=Runtime.parse(runtime) if runtime is not None else None,
            otlp_endpoint=data.get("otlpEndpoint", ""),
            log_level=data.get("logLevel", ""),
            scheduling=ScheduleConfig.from_dict(data.get("scheduling", {})),
            profile=ProfileConfig.from_dict(data.get("profile", {})),
            image_job=ImageJobConfig.from_dict(data.get("imageJob", {})),
            pull_secrets=list(data.get("pullSecrets") or []),
            node_filter=NodeFilterConfig.from_dict(data.get("nodeFilter", {})),
            priority_class_name=data.get("priorityClassName", ""),
        )


@dataclass
class Image:
    image_id: str
    names: list[str] = field(default_factory=list)
    digests: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        out: dict = {"image_id": self.image_id}
        if self.names:
            out["names"] = list(self.names)
        if self.digests:
            out["digests"] = list(self.digests)
        return out

    @classmethod
    def from_dict(cls, data: dict) -> "Image":
        return cls(
            image_id=data.get("image_id", ""),
            names=list(data.get("names") or []),
            digests=list(data.get("digests") or []),
        )


@dataclass
class ObjectMeta:
    name: str = ""
    namespace: str = ""
    labels: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict:
        out: dict = {}
        if self.name:
            out["name"] = self.name
        if self.namespace:
            out["namespace"] = self.namespace
        if self.labels:
            out["labels"] = dict(self.labels)
        return out

    @classmethod
    def from_dict(cls, data: dict) -> "ObjectMeta":
        return cls(
            name=data.get("name", ""),
            namespace=data.get("namespace", ""),
            labels=dict(data.get("labels") or {}),
        )


@dataclass
class ImageJobStatus:
    failed: int = 0
    succeeded: int = 0
    desired: int = 0
    skipped: int = 0
    phase: Optional[JobPhase] = None
    delete_after: Optional[datetime] = None

    def to_dict(self) -> dict:
        out: dict = {
            "failed": self.failed,
            "succeeded": self.succeeded,
            "desired": self.desired,
            "skipped": self.skipped,
            "phase": self.phase.value if self.phase else "",
        }
        if self.delete_after is not None:
            out["deleteAfter"] = _format_time(self.delete_after)
        return out

    @classmethod
    def from_dict(cls, data: dict) -> "ImageJobStatus":
        phase = data.get("phase") or None
        return cls(
            failed=int(data.get("failed", 0)),
            succeeded=int(data.get("succeeded", 0)),
            desired=int(data.get("desired", 0)),
            skipped=int(data.get("skipped", 0)),
            phase=JobPhase(phase) if phase else None,
            delete_after=_parse_time(data.get("deleteAfter")),
        )


def _type_meta(api_version: str, kind: str) -> dict:
    out = {}
    if kind:
        out["kind"] = kind
    if api_version:
        out["apiVersion"] = api_version
    return out


@dataclass
class ImageJob:
    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    status: ImageJobStatus = field(default_factory=ImageJobStatus)
    api_version: str = ""
    kind: str = ""

    def to_dict(self) -> dict:
        out = _type_meta(self.api_version, self.kind)
        out["metadata"] = self.metadata.to_dict()
        out["status"] = self.status.to_dict()
        return out

    @classmethod
    def from_dict(cls, data: dict) -> "ImageJob":
        return cls(
            metadata=ObjectMeta.from_dict(data.get("metadata", {})),
            status=ImageJobStatus.from_dict(data.get("status", {})),
            api_version=data.get("apiVersion", ""),
            kind=data.get("kind", ""),
        )


@dataclass
class ImageListSpec:
    images: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"images": list(self.images)}

    @classmethod
    def from_dict(cls, data: dict) -> "ImageListSpec":
        return cls(images=list(data.get("images") or []))


@dataclass
class ImageListStatus:
    timestamp: Optional[datetime] = None
    success: int = 0
    failed: int = 0
    skipped: int = 0

    def to_dict(self) -> dict:
        return {
            "timestamp": _format_time(self.timestamp) if self.timestamp else None,
            "success": self.success,
            "failed": self.failed,
            "skipped": self.skipped,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ImageListStatus":
        return cls(
            timestamp=_parse_time(data.get("timestamp")),
            success=int(data.get("success", 0)),
            failed=int(data.get("failed", 0)),
            skipped=int(data.get("skipped", 0)),
        )


@dataclass
class ImageList:
    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: ImageListSpec = field(default_factory=ImageListSpec)
    status: ImageListStatus = field(default_factory=ImageListStatus)
    api_version: str = ""
    kind: str = ""

    def to_dict(self) -> dict:
        out = _type_meta(self.api_version, self.kind)
        out["metadata"] = self.metadata.to_dict()
        out["spec"] = self.spec.to_dict()
        out["status"] = self.status.to_dict()
        return out

    @classmethod
    def from_dict(cls, data: dict) -> "ImageList":
        return cls(
            metadata=ObjectMeta.from_dict(data.get("metadata", {})),
            spec=ImageListSpec.from_dict(data.get("spec", {})),
            status=ImageListStatus.from_dict(data.get("status", {})),
            api_version=data.get("apiVersion", ""),
            kind=data.get("kind", ""),
        )