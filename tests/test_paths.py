import pytest

from site_admin.core.errors import PathError
from site_admin.core.paths import get_by_path, join_path, set_by_path, split_path


def test_join_and_split_plain_keys():
    p = join_path(join_path(join_path("", "hero"), "items"), 2)
    assert p == "hero.items.2"
    assert split_path(p) == ["hero", "items", "2"]


def test_dotted_keys_are_escaped():
    p = join_path(join_path("", "a.b"), "c")
    assert p == "a\\.b.c"
    assert split_path(p) == ["a.b", "c"]
    # backslashes survive as well
    q = join_path("", "x\\y")
    assert split_path(q) == ["x\\y"]


def test_dotted_key_does_not_collide_with_nesting():
    assert join_path(join_path("", "a"), "b") != join_path("", "a.b")


def test_dangling_escape_rejected():
    with pytest.raises(PathError):
        split_path("a\\")


def test_get_by_path():
    doc = {"menu": ["Home", {"label": "About"}]}
    assert get_by_path(doc, "menu.0") == "Home"
    assert get_by_path(doc, "menu.1.label") == "About"
    with pytest.raises(PathError):
        get_by_path(doc, "menu.5")
    with pytest.raises(PathError):
        get_by_path(doc, "missing")


def test_set_by_path_creates_objects_but_not_array_slots():
    doc = {"menu": ["Home"]}
    set_by_path(doc, "hero.title", "Salom")
    assert doc["hero"] == {"title": "Salom"}
    set_by_path(doc, "menu.0", "Bosh sahifa")
    assert doc["menu"] == ["Bosh sahifa"]
    with pytest.raises(PathError):
        set_by_path(doc, "menu.1", "x")
    with pytest.raises(PathError):
        set_by_path(doc, "hero.title.deeper", "x")
    with pytest.raises(PathError):
        set_by_path(doc, "", "x")


def test_non_ascii_digits_are_not_indices():
    with pytest.raises(PathError):
        set_by_path({"a": ["x"]}, "a.²", "y")
    with pytest.raises(PathError):
        get_by_path({"a": ["x"]}, "a.٣")
