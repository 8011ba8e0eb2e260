import json

import pytest

from eraserapi import eraserconfig
from eraserapi.types import ContainerConfig, ManagerConfig, OptionalContainerConfig, RepoTag, Runtime
from eraserapi.v1alpha1 import Components, EraserConfig, from_unversioned, to_unversioned


def _sample() -> EraserConfig:
    return EraserConfig(
        manager=ManagerConfig(runtime=Runtime.CONTAINERD, pull_secrets=["regcred"]),
        components=Components(
            collector=OptionalContainerConfig(enabled=True, image=RepoTag("collector", "v1")),
            scanner=OptionalContainerConfig(image=RepoTag("eraser-trivy-scanner", "v1")),
            eraser=ContainerConfig(image=RepoTag("eraser", "v1")),
        ),
    )


def test_eraser_key_in_dict():
    out = _sample().to_dict()
    assert "eraser" in out["components"]
    assert "remover" not in out["components"]


def test_json_round_trip():
    cfg = _sample()
    assert EraserConfig.from_json(cfg.to_json()) == cfg


def test_to_unversioned_moves_eraser_to_remover():
    cfg = _sample()
    converted = to_unversioned(cfg)
    assert isinstance(converted, eraserconfig.EraserConfig)
    assert converted.components.remover == cfg.components.eraser
    assert converted.components.collector == cfg.components.collector
    assert converted.components.scanner == cfg.components.scanner
    assert converted.manager == cfg.manager


def test_from_unversioned_moves_remover_to_eraser():
    src = eraserconfig.EraserConfig(
        components=eraserconfig.Components(remover=ContainerConfig(image=RepoTag("remover", "v2")))
    )
    converted = from_unversioned(src)
    assert converted.components.eraser == src.components.remover


def test_conversion_round_trip():
    cfg = _sample()
    assert from_unversioned(to_unversioned(cfg)) == cfg


def test_conversion_does_not_share_state():
    cfg = _sample()
    converted = to_unversioned(cfg)
    converted.manager.pull_secrets.append("other")
    converted.components.remover.image.tag = "changed"
    assert cfg.manager.pull_secrets == ["regcred"]
    assert cfg.components.eraser.image.tag == "v1"


def test_json_document_converts():
    doc = {
        "apiVersion": "eraser.sh/v1alpha1",
        "kind": "EraserConfig",
        "components": {"eraser": {"image": {"repo": "busybox", "tag": "1.36.0"}}},
    }
    converted = to_unversioned(EraserConfig.from_json(json.dumps(doc)))
    assert converted.components.remover.image == RepoTag("busybox", "1.36.0")


def test_invalid_runtime_rejected():
    with pytest.raises(ValueError, match="cannot determine runtime type"):
        EraserConfig.from_dict({"manager": {"runtime": "rkt"}})


def test_non_object_rejected():
    with pytest.raises(ValueError):
        EraserConfig.from_json('"text"')