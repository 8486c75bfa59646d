from site_admin.core.field_store import build, dirty_count, dirty_paths, is_dirty, update
from site_admin.core.models import FieldStatus, Kind, SavedPair


def test_build_unions_paths_in_sorted_order():
    ru = {"hero": {"title": "Привет"}, "only_ru": "Да"}
    uz = {"hero": {"title": "Salom"}, "footer": {"year": 2024}}
    store = build(ru, uz)
    assert list(store) == ["footer.year", "hero.title", "only_ru"]

    year = store["footer.year"]
    assert (year.ru, year.ru_type) == ("", Kind.STRING)
    assert (year.uz, year.uz_type) == ("2024", Kind.NUMBER)
    assert store["only_ru"].uz == ""
    assert store["hero.title"].saved == SavedPair(ru="Привет", uz="Salom")
    assert all(not is_dirty(r) for r in store.values())


def test_update_is_pure_and_marks_dirty():
    store = build({"t": "A"}, {"t": "B"})
    before = store["t"]
    assert not is_dirty(before)

    new_store = update(store, "t", "ru", "A2")
    assert new_store is not store
    assert store["t"] is before
    assert new_store["t"].ru == "A2"
    assert is_dirty(new_store["t"])


def test_update_resets_status_and_error():
    store = build({"t": "A"}, {"t": "B"})
    from dataclasses import replace
    store["t"] = replace(store["t"], status=FieldStatus.ERROR, error="boom")
    new_store = update(store, "t", "uz", "B2")
    assert new_store["t"].status is FieldStatus.IDLE
    assert new_store["t"].error == ""


def test_update_unknown_path_is_noop():
    store = build({"t": "A"}, {"t": "B"})
    assert update(store, "nope", "ru", "x") is store


def test_editing_back_to_saved_value_is_clean():
    store = build({"t": "A"}, {"t": "B"})
    store = update(store, "t", "ru", "changed")
    store = update(store, "t", "ru", "A")
    assert not is_dirty(store["t"])


def test_dirty_count_matches_records():
    store = build({"a": "1", "b": "2", "c": "3"}, {"a": "x", "b": "y", "c": "z"})
    store = update(store, "a", "ru", "1!")
    store = update(store, "c", "uz", "z!")
    store = update(store, "c", "ru", "3!")
    assert dirty_count(store) == 2
    assert dirty_paths(store) == ["a", "c"]
    assert dirty_count(store) == sum(1 for r in store.values() if is_dirty(r))
