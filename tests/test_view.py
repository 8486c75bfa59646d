from site_admin.core.field_store import build, update
from site_admin.core.view import (
    field_label,
    fields_frame,
    filter_paths,
    find_empty_fields,
    group_by_first_segment,
    use_textarea,
)


def sample_store():
    ru = {"hero": {"title": "Добро пожаловать", "subtitle": "Лучший сервис"}, "footer": {"copy": "2024"}}
    uz = {"hero": {"title": "Xush kelibsiz", "subtitle": "Eng yaxshi xizmat"}, "footer": {"copy": "2024"}}
    return build(ru, uz)


def test_filter_matches_path_and_both_languages():
    store = sample_store()
    assert filter_paths(store, "  ") == list(store)
    assert filter_paths(store, "HERO") == ["hero.subtitle", "hero.title"]
    assert filter_paths(store, "xush") == ["hero.title"]
    assert filter_paths(store, "лучший") == ["hero.subtitle"]
    assert filter_paths(store, "zzz") == []


def test_group_by_first_segment():
    groups = group_by_first_segment(["hero.title", "footer.copy", "hero.subtitle", "a\\.b.c"])
    assert groups == [
        ("a.b", ["a\\.b.c"]),
        ("footer", ["footer.copy"]),
        ("hero", ["hero.title", "hero.subtitle"]),
    ]


def test_group_empty_first_segment_is_other():
    assert group_by_first_segment([".x"]) == [("other", [".x"])]


def test_use_textarea():
    assert not use_textarea("short")
    assert use_textarea("line one\nline two")
    assert use_textarea("x" * 81)
    assert not use_textarea("x" * 80)


def test_field_label():
    assert field_label("title") == "Sarlavha"
    assert field_label("Description") == "Tavsif"
    assert field_label("call_to_action") == "Call to action"
    assert field_label("") == ""


def test_find_empty_fields():
    ru = {"hero": {"title": "Привет", "subtitle": " "}, "menu": ["", "О нас"]}
    uz = {"hero": {"title": "Salom", "subtitle": "Matn"}, "count": 3}
    assert find_empty_fields(ru, uz) == ["ru:hero.subtitle", "ru:menu.0"]
    assert find_empty_fields(None, uz) == ["ru:"]


def test_fields_frame():
    store = update(sample_store(), "hero.title", "uz", "Salom")
    df = fields_frame(store)
    assert list(df["path"]) == list(store)
    assert df.loc[df["path"] == "hero.title", "dirty"].item()
    assert df["dirty"].sum() == 1
    assert set(df["status"]) == {"idle"}


def test_fields_frame_empty_store_keeps_columns():
    df = fields_frame({})
    assert df.empty
    assert "dirty" in df.columns
