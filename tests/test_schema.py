import pytest

from eraserapi import eraserconfig, v1alpha1
from eraserapi.schema import GROUP, GroupVersion, Scheme, build_scheme
from eraserapi.types import ImageJob, ImageList


def test_api_version_joins_group_and_version():
    assert GroupVersion(GROUP, "v1").api_version() == "eraser.sh/v1"
    assert GroupVersion("", "v1").api_version() == "v1"


def test_lookup_eraserconfig_per_version():
    scheme = build_scheme()
    assert scheme.lookup("eraser.sh/v1alpha1", "EraserConfig") is v1alpha1.EraserConfig
    assert scheme.lookup("eraser.sh/v1alpha2", "EraserConfig") is eraserconfig.EraserConfig
    assert scheme.lookup("eraser.sh/unversioned", "EraserConfig") is eraserconfig.EraserConfig


def test_lookup_job_kinds():
    scheme = build_scheme()
    assert scheme.lookup("eraser.sh/v1", "ImageJob") is ImageJob
    assert scheme.lookup("eraser.sh/v1alpha1", "ImageList") is ImageList


def test_v1_has_no_eraserconfig():
    with pytest.raises(KeyError):
        build_scheme().lookup("eraser.sh/v1", "EraserConfig")


def test_unknown_version_raises():
    with pytest.raises(KeyError):
        build_scheme().lookup("eraser.sh/v9", "ImageJob")


def test_malformed_api_version_raises():
    with pytest.raises(KeyError):
        build_scheme().lookup("a/b/c", "ImageJob")


def test_known_kinds_for_v1():
    kinds = build_scheme().known_kinds(GroupVersion(GROUP, "v1"))
    assert kinds == ["ImageJob", "ImageJobList", "ImageList", "ImageListList"]


def test_known_kinds_unknown_version_empty():
    assert Scheme().known_kinds(GroupVersion(GROUP, "v1")) == []


def test_double_registration_of_different_types_rejected():
    scheme = Scheme()
    gv = GroupVersion("example.com", "v1")
    scheme.register(gv, ("Thing", ImageJob))
    scheme.register(gv, ("Thing", ImageJob))
    assert scheme.known_kinds(gv) == ["Thing"]
    with pytest.raises(ValueError):
        scheme.register(gv, ("Thing", ImageList))


def test_list_kind_round_trip():
    scheme = build_scheme()
    list_cls = scheme.lookup("eraser.sh/v1", "ImageJobList")
    data = {"kind": "ImageJobList", "apiVersion": "eraser.sh/v1", "items": [ImageJob().to_dict()]}
    obj = list_cls.from_dict(data)
    assert obj.items == [ImageJob()]
    assert list_cls.from_dict(obj.to_dict()) == obj