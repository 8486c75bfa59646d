from typing import Any, Optional

from site_admin.core.models import Kind


def classify(value: Any) -> Optional[Kind]:
    """Tag a decoded JSON value with its kind.

    Returns None for anything that is not a JSON value (e.g. objects that
    slipped into the tree from Python code); the flattener skips those.
    """
    # bool is a subclass of int, so it has to be checked first
    if isinstance(value, bool):
        return Kind.BOOLEAN
    if value is None:
        return Kind.NULL
    if isinstance(value, str):
        return Kind.STRING
    if isinstance(value, (int, float)):
        return Kind.NUMBER
    if isinstance(value, dict):
        return Kind.OBJECT
    if isinstance(value, list):
        return Kind.ARRAY
    return None


def is_container(value: Any) -> bool:
    kind = classify(value)
    return kind is not None and not kind.is_leaf
