from typing import Any, Dict, Iterable, List, Tuple

import pandas as pd

from site_admin.core.field_store import is_dirty
from site_admin.core.models import FieldStore
from site_admin.core.paths import join_path, split_path

TEXTAREA_THRESHOLD = 80

# Uzbek labels for common content keys
FIELD_LABELS = {
    "title": "Sarlavha",
    "description": "Tavsif",
    "subtitle": "Kichik sarlavha",
    "text": "Matn",
    "button": "Tugma matni",
    "label": "Belgi",
    "placeholder": "Yordam matni",
    "name": "Nom",
    "content": "Kontent",
    "message": "Xabar",
    "heading": "Bo'lim sarlavhasi",
}


def use_textarea(text: str) -> bool:
    return "\n" in text or len(text) > TEXTAREA_THRESHOLD


def field_label(key: str) -> str:
    known = FIELD_LABELS.get(key.lower())
    if known:
        return known
    clean = key.lower().replace("_", " ")
    return clean[:1].upper() + clean[1:]


def filter_paths(store: FieldStore, query: str) -> List[str]:
    """Paths whose name or either draft contains ``query`` (case-insensitive)."""
    if not query.strip():
        return list(store)
    needle = query.lower()
    return [
        path
        for path, record in store.items()
        if needle in path.lower() or needle in record.ru.lower() or needle in record.uz.lower()
    ]


def group_by_first_segment(paths: Iterable[str]) -> List[Tuple[str, List[str]]]:
    grouped: Dict[str, List[str]] = {}
    for path in paths:
        segments = split_path(path)
        first = segments[0] if segments and segments[0] else "other"
        grouped.setdefault(first, []).append(path)
    return sorted(grouped.items(), key=lambda kv: kv[0])


def find_empty_fields(ru: Any, uz: Any) -> List[str]:
    """List string leaves that are blank, prefixed with their language.

    A language tree that is missing altogether is reported as ``<lang>:``.
    """
    problems: List[str] = []
    for lang, tree in (("ru", ru), ("uz", uz)):
        if not isinstance(tree, (dict, list)) or not tree:
            problems.append(f"{lang}:")
            continue
        _collect_blank(tree, "", lang, problems)
    return problems


def _collect_blank(node: Any, path: str, lang: str, out: List[str]) -> None:
    if isinstance(node, dict):
        for key, value in node.items():
            _collect_blank(value, join_path(path, key), lang, out)
    elif isinstance(node, list):
        for idx, value in enumerate(node):
            _collect_blank(value, join_path(path, idx), lang, out)
    elif isinstance(node, str) and not node.strip():
        out.append(f"{lang}:{path}")


def fields_frame(store: FieldStore) -> pd.DataFrame:
    rows = [
        {
            "path": path,
            "ru": record.ru,
            "uz": record.uz,
            "ru_type": record.ru_type.value,
            "uz_type": record.uz_type.value,
            "status": record.status.value,
            "dirty": is_dirty(record),
            "error": record.error,
        }
        for path, record in store.items()
    ]
    columns = ["path", "ru", "uz", "ru_type", "uz_type", "status", "dirty", "error"]
    return pd.DataFrame(rows, columns=columns)
