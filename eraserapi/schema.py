"""API group versions of the eraser.sh group and the kinds registered in each."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Union

from . import eraserconfig, v1alpha1
from .types import ImageJob, ImageList

__all__ = ["GroupVersion", "Scheme", "build_scheme", "GROUP"]

GROUP = "eraser.sh"


@dataclass(frozen=True)
class GroupVersion:
    group: str
    version: str

    def api_version(self) -> str:
        """Return the apiVersion string, e.g. "eraser.sh/v1"."""
        if not self.group:
            return self.version
        return f"{self.group}/{self.version}"

    @classmethod
    def _parse(cls, api_version: str) -> "GroupVersion":
        if api_version.count("/") > 1 or not api_version:
            raise KeyError(f"unexpected apiVersion {api_version!r}")
        group, _, version = api_version.rpartition("/")
        return cls(group, version)


UNVERSIONED = GroupVersion(GROUP, "unversioned")
V1 = GroupVersion(GROUP, "v1")
V1ALPHA1 = GroupVersion(GROUP, "v1alpha1")
V1ALPHA2 = GroupVersion(GROUP, "v1alpha2")


@dataclass
class _ImageJobList:
    items: list[ImageJob] = field(default_factory=list)
    api_version: str = ""
    kind: str = ""

    def to_dict(self) -> dict:
        out: dict = {}
        if self.kind:
            out["kind"] = self.kind
        if self.api_version:
            out["apiVersion"] = self.api_version
        out["metadata"] = {}
        out["items"] = [item.to_dict() for item in self.items]
        return out

    @classmethod
    def from_dict(cls, data: dict) -> "_ImageJobList":
        return cls(
            items=[ImageJob.from_dict(item) for item in data.get("items") or []],
            api_version=data.get("apiVersion", ""),
            kind=data.get("kind", ""),
        )


@dataclass
class _ImageListList:
    items: list[ImageList] = field(default_factory=list)
    api_version: str = ""
    kind: str = ""

    def to_dict(self) -> dict:
        out: dict = {}
        if self.kind:
            out["kind"] = self.kind
        if self.api_version:
            out["apiVersion"] = self.api_version
        out["metadata"] = {}
        out["items"] = [item.to_dict() for item in self.items]
        return out

    @classmethod
    def from_dict(cls, data: dict) -> "_ImageListList":
        return cls(
            items=[ImageList.from_dict(item) for item in data.get("items") or []],
            api_version=data.get("apiVersion", ""),
            kind=data.get("kind", ""),
        )


_Entry = Union[type, tuple]


class Scheme:
    """Maps (group version, kind) pairs to the classes that represent them."""

    def __init__(self) -> None:
        self._kinds: dict[GroupVersion, dict[str, type]] = {}

    def register(self, group_version: GroupVersion, *args: _Entry) -> None:
        """Register classes under a group version.

        Each argument is a class, registered under its own name, or a
        (kind, class) pair.
        """
        kinds = self._kinds.setdefault(group_version, {})
        for entry in args:
            kind, cls = entry if isinstance(entry, tuple) else (entry.__name__, entry)
            existing = kinds.get(kind)
            if existing is not None and existing is not cls:
                raise ValueError(
                    f"double registration of different types for "
                    f"{group_version.api_version()}, Kind={kind}"
                )
            kinds[kind] = cls

    def lookup(self, api_version: str, kind: str) -> type:
        """Return the class for a kind; raise KeyError if it is not registered."""
        group_version = GroupVersion._parse(api_version)
        try:
            return self._kinds[group_version][kind]
        except KeyError:
            raise KeyError(
                f"no kind {kind!r} is registered for version {api_version!r}"
            ) from None

    def known_kinds(self, group_version: GroupVersion) -> list[str]:
        """Return the kinds registered for a group version, sorted by name."""
        return sorted(self._kinds.get(group_version, {}))

    def group_versions(self) -> Iterable[GroupVersion]:
        return list(self._kinds)


def build_scheme() -> Scheme:
    """Return a scheme holding every kind of the eraser.sh group."""
    scheme = Scheme()
    scheme.register(UNVERSIONED, ("EraserConfig", eraserconfig.EraserConfig))
    scheme.register(
        V1,
        ImageJob,
        ("ImageJobList", _ImageJobList),
        ImageList,
        ("ImageListList", _ImageListList),
    )
    scheme.register(
        V1ALPHA1,
        ("EraserConfig", v1alpha1.EraserConfig),
        ImageJob,
        ("ImageJobList", _ImageJobList),
        ImageList,
        ("ImageListList", _ImageListList),
    )
    scheme.register(V1ALPHA2, ("EraserConfig", eraserconfig.EraserConfig))
    return scheme