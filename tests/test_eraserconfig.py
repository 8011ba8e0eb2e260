import json

import pytest
from hypothesis import given
from hypothesis import strategies as st

from eraserapi.duration import HOUR
from eraserapi.eraserconfig import Components, EraserConfig
from eraserapi.quantity import Quantity
from eraserapi.types import (
    ContainerConfig,
    ManagerConfig,
    OptionalContainerConfig,
    RepoTag,
    ResourceRequirements,
    Runtime,
    ScheduleConfig,
)


def _sample() -> EraserConfig:
    return EraserConfig(
        manager=ManagerConfig(
            runtime=Runtime.CRIO,
            log_level="debug",
            scheduling=ScheduleConfig(repeat_interval=HOUR, begin_immediately=True),
            pull_secrets=["regcred"],
        ),
        components=Components(
            collector=OptionalContainerConfig(
                enabled=True,
                image=RepoTag("collector", "v1.1.0"),
                request=ResourceRequirements(Quantity.parse("25Mi"), Quantity.parse("7m")),
            ),
            scanner=OptionalContainerConfig(config="cacheDir: /var/lib/trivy\n"),
            remover=ContainerConfig(image=RepoTag("remover", "v1.1.0")),
        ),
        api_version="eraser.sh/v1alpha2",
        kind="EraserConfig",
    )


def test_json_round_trip():
    cfg = _sample()
    assert EraserConfig.from_json(cfg.to_json()) == cfg


def test_dict_round_trip():
    cfg = _sample()
    assert EraserConfig.from_dict(cfg.to_dict()) == cfg


def test_configmap_document_sets_remover_image():
    doc = {
        "apiVersion": "eraser.sh/v1alpha2",
        "kind": "EraserConfig",
        "components": {"remover": {"image": {"repo": "busybox-e2e-test", "tag": "latest"}}},
    }
    cfg = EraserConfig.from_json(json.dumps(doc))
    assert cfg.components.remover.image == RepoTag("busybox-e2e-test", "latest")
    assert cfg.api_version == "eraser.sh/v1alpha2"
    assert cfg.kind == "EraserConfig"
    assert cfg.manager == ManagerConfig()


def test_empty_config_always_has_manager_and_components():
    assert set(EraserConfig().to_dict()) == {"manager", "components"}
    assert set(Components().to_dict()) == {"collector", "scanner", "remover"}


def test_type_meta_written_when_set():
    out = _sample().to_dict()
    assert out["kind"] == "EraserConfig"
    assert out["apiVersion"] == "eraser.sh/v1alpha2"


def test_repeat_interval_parsed_and_rendered():
    cfg = EraserConfig.from_dict({"manager": {"scheduling": {"repeatInterval": "24h"}}})
    assert cfg.manager.scheduling.repeat_interval == 24 * HOUR
    assert cfg.to_dict()["manager"]["scheduling"]["repeatInterval"] == "24h0m0s"


def test_invalid_runtime_rejected():
    with pytest.raises(ValueError, match="cannot determine runtime type: podman"):
        EraserConfig.from_dict({"manager": {"runtime": "podman"}})


def test_invalid_duration_rejected():
    with pytest.raises(ValueError):
        EraserConfig.from_dict({"manager": {"scheduling": {"repeatInterval": "soon"}}})


def test_invalid_json_rejected():
    with pytest.raises(ValueError):
        EraserConfig.from_json("{not json")


def test_non_object_rejected():
    with pytest.raises(ValueError):
        EraserConfig.from_json("[1, 2]")


def test_null_sections_treated_as_empty():
    cfg = EraserConfig.from_dict({"manager": None, "components": None})
    assert cfg == EraserConfig()


@given(st.lists(st.text(min_size=1), max_size=5), st.sampled_from(list(Runtime)))
def test_manager_fields_round_trip(secrets, runtime):
    cfg = EraserConfig(manager=ManagerConfig(runtime=runtime, pull_secrets=secrets))
    back = EraserConfig.from_json(cfg.to_json())
    assert back.manager.pull_secrets == secrets
    assert back.manager.runtime is runtime