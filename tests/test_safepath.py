import os
from pathlib import Path

import pytest

from zenops.safepath import (
    NotASinglePathComponent,
    PathGoesOutsideParent,
    SafePathError,
    SafeRelativePath,
    SinglePathComponent,
    is_safe_relative_path,
    srpath,
)


@pytest.mark.parametrize("path", ["foo/bar", "./foo/bar", "", "."])
def test_validate_safe_paths(path):
    assert is_safe_relative_path(path) is True


@pytest.mark.parametrize(
    "path",
    [
        "../foo",
        "foo/../bar",
        "foo/../../bar",
        "foo/../../foo/bar",
        "..",
        "a/b/c/../..",
        "a/../..",
    ],
)
def test_validate_unsafe_paths(path):
    assert is_safe_relative_path(path) is False


def test_basic_paths():
    assert str(SafeRelativePath.from_relative_path("foo/bar")) == "foo/bar"
    assert str(SafeRelativePath.from_relative_path("baz")) == "baz"


def test_from_relative_path_rejects_parent_traversal():
    with pytest.raises(PathGoesOutsideParent) as info:
        SafeRelativePath.from_relative_path("../escape")
    assert info.value.path == "../escape"
    with pytest.raises(PathGoesOutsideParent) as info:
        SafeRelativePath.from_relative_path("foo/../../bar")
    assert info.value.path == "foo/../../bar"


def test_errors_share_base_class():
    with pytest.raises(SafePathError):
        SafeRelativePath("..")
    with pytest.raises(ValueError):
        SinglePathComponent.try_new("a/b")


def test_try_join_succeeds_for_safe_path_and_fails_for_traversal():
    base = SafeRelativePath.from_relative_path("base")
    assert str(base.try_join("nested/file")) == "base/nested/file"
    with pytest.raises(PathGoesOutsideParent) as info:
        base.try_join("../escape")
    assert info.value.path == "../escape"


def test_safe_join_requires_safe_type():
    with pytest.raises(TypeError):
        srpath("base").safe_join("nested")


def test_safe_parent_walks_up_one_component_at_a_time():
    p = SafeRelativePath.from_relative_path("a/b/c")
    assert str(p.safe_parent()) == "a/b"
    assert str(p.safe_parent().safe_parent()) == "a"
    assert SafeRelativePath.from_relative_path("").safe_parent() is None


def test_to_full_path_appends_relative_to_base():
    p = SafeRelativePath.from_relative_path("sub/file.txt")
    assert p.to_full_path("/tmp/base") == Path("/tmp/base/sub/file.txt")


def test_normalize_safe_collapses_current_dir_segments():
    p = SafeRelativePath.from_relative_path("./foo/./bar")
    assert str(p.normalize_safe()) == "foo/bar"


def test_round_trip_via_str():
    p = SafeRelativePath("foo/bar")
    assert str(p) == "foo/bar"
    assert SafeRelativePath(str(p)) == p
    assert "foo/bar" in repr(p)
    with pytest.raises(PathGoesOutsideParent) as info:
        SafeRelativePath("../nope")
    assert info.value.path == "../nope"


def test_fspath_points_at_same_text():
    p = SafeRelativePath.from_relative_path("hello/world")
    assert os.fspath(p) == "hello/world"
    assert SafeRelativePath.from_relative_path(p) is p


def test_components():
    assert list(srpath("./a//b/c").components()) == [".", "a", "b", "c"]


def test_single_path_component_accepts_a_single_segment():
    c = SinglePathComponent.try_new("name")
    assert str(c) == "name"
    assert str(c.as_safe_relative_path()) == "name"
    assert os.fspath(c) == "name"


def test_single_path_component_rejects_multi_component_paths():
    with pytest.raises(NotASinglePathComponent) as info:
        SinglePathComponent.try_new("a/b")
    assert info.value.value == "a/b"


def test_single_path_component_rejects_parent_traversal():
    with pytest.raises(PathGoesOutsideParent) as info:
        SinglePathComponent.try_new("..")
    assert info.value.path == ".."


def test_single_path_component_rejects_empty():
    with pytest.raises(NotASinglePathComponent):
        SinglePathComponent.try_new("")


def test_macro_basic_paths():
    assert str(srpath("foo/bar")) == "foo/bar"
    assert str(srpath("baz")) == "baz"
    assert str(srpath("deep/nested/path/file.txt")) == "deep/nested/path/file.txt"


def test_macro_current_dir_paths():
    assert str(srpath("./foo")) == "./foo"
    assert str(srpath(".")) == "."
    assert str(srpath("./bar/baz")) == "./bar/baz"


def test_macro_empty_path():
    assert str(srpath("")) == ""


def test_macro_path_operations():
    path = srpath("foo/bar")
    assert str(SafeRelativePath(path)) == "foo/bar"
    assert str(srpath("base").safe_join(path)) == "base/foo/bar"


def test_safe_join_accepts_single_component():
    joined = srpath("base").safe_join(SinglePathComponent("leaf"))
    assert str(joined) == "base/leaf"


def test_macro_rejects_traversal():
    with pytest.raises(PathGoesOutsideParent):
        srpath("../x")