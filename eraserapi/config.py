"""Default EraserConfig values and a thread-safe holder for the live configuration."""

from __future__ import annotations

import copy
import threading
from typing import Optional, Union

from . import eraserconfig, v1alpha1
from .duration import HOUR
from .quantity import Quantity
from .types import (
    ContainerConfig,
    ImageJobCleanupConfig,
    ImageJobConfig,
    ManagerConfig,
    NodeFilterConfig,
    OptionalContainerConfig,
    ProfileConfig,
    RepoTag,
    ResourceRequirements,
    Runtime,
    ScheduleConfig,
)

__all__ = [
    "ConfigManager",
    "DEFAULT_SCANNER_CONFIG",
    "repo",
    "default_config",
    "default_v1alpha1_config",
    "default_v1alpha2_config",
]

DEFAULT_SCANNER_CONFIG = """
cacheDir: /var/lib/trivy
dbRepo: ghcr.io/aquasecurity/trivy-db
deleteFailedImages: true
deleteEOLImages: true
vulnerabilities:
  ignoreUnfixed: true
  types:
    - os
    - library
securityChecks: # need to be documented; determined by trivy, not us
  - vuln
severities:
  - CRITICAL
  - HIGH
  - MEDIUM
  - LOW
"""

_NO_DELAY = 0
_ONE_DAY = 24 * HOUR

AnyEraserConfig = Union[eraserconfig.EraserConfig, v1alpha1.EraserConfig]


class ConfigManager:
    """Holds the current configuration and hands out copies of it under a lock."""

    def __init__(self, config: Optional[AnyEraserConfig]) -> None:
        self._lock = threading.Lock()
        self._config = config

    def read(self) -> AnyEraserConfig:
        """Return a copy of the current configuration."""
        with self._lock:
            if self._config is None:
                raise ValueError("ConfigManager configuration is nil, aborting")
            return copy.deepcopy(self._config)

    def update(self, new_config: Optional[AnyEraserConfig]) -> None:
        """Replace the current configuration with a copy of new_config."""
        with self._lock:
            if self._config is None:
                raise ValueError("ConfigManager configuration is nil, aborting")
            if new_config is None:
                raise ValueError("new configuration is nil, aborting")
            self._config = copy.deepcopy(new_config)


def repo(basename: str, default_repo: str = "") -> str:
    """Prefix an image name with the default repository, if there is one."""
    if not default_repo:
        return basename
    return f"{default_repo}/{basename}"


def _manager_config() -> ManagerConfig:
    return ManagerConfig(
        runtime=Runtime.CONTAINERD,
        otlp_endpoint="",
        log_level="info",
        scheduling=ScheduleConfig(repeat_interval=_ONE_DAY, begin_immediately=True),
        profile=ProfileConfig(enabled=False, port=6060),
        image_job=ImageJobConfig(
            success_ratio=1.0,
            cleanup=ImageJobCleanupConfig(
                delay_on_success=_NO_DELAY,
                delay_on_failure=_ONE_DAY,
            ),
        ),
        pull_secrets=[],
        node_filter=NodeFilterConfig(
            type="exclude",
            selectors=["eraser.sh/cleanup.filter"],
        ),
    )


def _collector(build_version: str, default_repo: str) -> OptionalContainerConfig:
    return OptionalContainerConfig(
        enabled=False,
        image=RepoTag(repo=repo("collector", default_repo), tag=build_version),
        request=ResourceRequirements(mem=Quantity.parse("25Mi"), cpu=Quantity.parse("7m")),
        limit=ResourceRequirements(mem=Quantity.parse("500Mi"), cpu=Quantity()),
        config=None,
    )


def _scanner(build_version: str, default_repo: str) -> OptionalContainerConfig:
    return OptionalContainerConfig(
        enabled=False,
        image=RepoTag(repo=repo("eraser-trivy-scanner", default_repo), tag=build_version),
        request=ResourceRequirements(mem=Quantity.parse("500Mi"), cpu=Quantity.parse("1000m")),
        limit=ResourceRequirements(mem=Quantity.parse("2Gi"), cpu=Quantity.parse("1500m")),
        config=DEFAULT_SCANNER_CONFIG,
    )


def _remover(basename: str, build_version: str, default_repo: str) -> ContainerConfig:
    return ContainerConfig(
        image=RepoTag(repo=repo(basename, default_repo), tag=build_version),
        request=ResourceRequirements(mem=Quantity.parse("25Mi"), cpu=Quantity.parse("7m")),
        limit=ResourceRequirements(mem=Quantity.parse("30Mi"), cpu=Quantity()),
        config=None,
    )


def default_config(build_version: str = "", default_repo: str = "") -> eraserconfig.EraserConfig:
    """Return the default configuration in its internal shape."""
    return eraserconfig.EraserConfig(
        manager=_manager_config(),
        components=eraserconfig.Components(
            collector=_collector(build_version, default_repo),
            scanner=_scanner(build_version, default_repo),
            remover=_remover("remover", build_version, default_repo),
        ),
    )


def default_v1alpha1_config(
    build_version: str = "", default_repo: str = ""
) -> v1alpha1.EraserConfig:
    """Return the default v1alpha1 configuration, whose remover is named "eraser"."""
    return v1alpha1.EraserConfig(
        manager=_manager_config(),
        components=v1alpha1.Components(
            collector=_collector(build_version, default_repo),
            scanner=_scanner(build_version, default_repo),
            eraser=_remover("eraser", build_version, default_repo),
        ),
    )


def default_v1alpha2_config(
    build_version: str = "", default_repo: str = ""
) -> eraserconfig.EraserConfig:
    """Return the default v1alpha2 configuration."""
    return default_config(build_version, default_repo)