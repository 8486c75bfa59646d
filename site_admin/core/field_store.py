from dataclasses import replace
from typing import Any

from site_admin.core.flattener import flatten
from site_admin.core.models import LANGS, FieldRecord, FieldStatus, FieldStore, Kind, SavedPair


def build(ru_tree: Any, uz_tree: Any) -> FieldStore:
    """Build a field store from the two language subtrees.

    Paths are the union of both trees in sorted order. A path present in
    only one language gets an empty string draft in the other.
    """
    ru_flat = flatten(ru_tree)
    uz_flat = flatten(uz_tree)
    store: FieldStore = {}
    for path in sorted(set(ru_flat) | set(uz_flat)):
        ru_leaf = ru_flat.get(path)
        uz_leaf = uz_flat.get(path)
        ru = ru_leaf.text if ru_leaf else ""
        uz = uz_leaf.text if uz_leaf else ""
        store[path] = FieldRecord(
            ru=ru,
            uz=uz,
            ru_type=ru_leaf.kind if ru_leaf else Kind.STRING,
            uz_type=uz_leaf.kind if uz_leaf else Kind.STRING,
            saved=SavedPair(ru=ru, uz=uz),
        )
    return store


def update(store: FieldStore, path: str, lang: str, text: str) -> FieldStore:
    """Return a new store with ``lang``'s draft of ``path`` replaced.

    Unknown paths leave the store untouched (the same object is returned).
    """
    if lang not in LANGS:
        raise ValueError(f"Unknown language {lang!r}")
    record = store.get(path)
    if record is None:
        return store
    new_store = dict(store)
    new_store[path] = replace(record, **{lang: text}, status=FieldStatus.IDLE, error="")
    return new_store


def is_dirty(record: FieldRecord) -> bool:
    return record.ru != record.saved.ru or record.uz != record.saved.uz


def dirty_count(store: FieldStore) -> int:
    return sum(1 for record in store.values() if is_dirty(record))


def dirty_paths(store: FieldStore) -> list[str]:
    return [path for path, record in store.items() if is_dirty(record)]
