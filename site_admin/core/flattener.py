import json
from typing import Any, Dict, Mapping, Optional

from site_admin.core.classifier import classify
from site_admin.core.errors import PathError
from site_admin.core.models import Kind, LeafPath, LeafValue
from site_admin.core.paths import is_index, join_path, split_path


def format_leaf(value: Any, kind: Kind) -> str:
    """Canonical editable text of a primitive value."""
    if kind is Kind.STRING:
        return value
    if kind is Kind.NULL:
        return ""
    if kind is Kind.BOOLEAN:
        return "true" if value else "false"
    return json.dumps(value)


def flatten(container: Any) -> Dict[LeafPath, LeafValue]:
    """Flatten a JSON object or array into ``path -> LeafValue``.

    Empty containers and non-JSON values produce no entries.
    """
    if classify(container) not in (Kind.OBJECT, Kind.ARRAY):
        raise TypeError(f"flatten expects an object or array, got {type(container).__name__}")
    out: Dict[LeafPath, LeafValue] = {}
    _walk(container, "", out)
    return out


def _walk(value: Any, path: str, out: Dict[LeafPath, LeafValue]) -> None:
    kind = classify(value)
    if kind is None:
        return
    if kind is Kind.OBJECT:
        for key, nested in value.items():
            _walk(nested, join_path(path, key), out)
    elif kind is Kind.ARRAY:
        for idx, nested in enumerate(value):
            _walk(nested, join_path(path, idx), out)
    else:
        out[path] = LeafValue(kind=kind, text=format_leaf(value, kind))


def container_kinds(container: Any) -> Dict[LeafPath, Kind]:
    """Map every container path (root is ``""``) to OBJECT or ARRAY.

    Feed it to ``unflatten`` to rebuild objects with digit keys as objects.
    """
    if classify(container) not in (Kind.OBJECT, Kind.ARRAY):
        raise TypeError(f"container_kinds expects an object or array, got {type(container).__name__}")
    out: Dict[LeafPath, Kind] = {}
    _walk_containers(container, "", out)
    return out


def _walk_containers(value: Any, path: str, out: Dict[LeafPath, Kind]) -> None:
    kind = classify(value)
    if kind is Kind.OBJECT:
        out[path] = kind
        for key, nested in value.items():
            _walk_containers(nested, join_path(path, key), out)
    elif kind is Kind.ARRAY:
        out[path] = kind
        for idx, nested in enumerate(value):
            _walk_containers(nested, join_path(path, idx), out)


def unflatten(leaves: Mapping[LeafPath, Any], kinds: Optional[Mapping[LeafPath, Kind]] = None) -> Any:
    """Rebuild a container from ``path -> JSON value``.

    ``kinds`` (from ``container_kinds``) says which containers are arrays.
    Without it, a container whose keys are exactly ``0..n-1`` becomes an
    array and everything else an object.
    """
    root: Dict[str, Any] = {}
    for path, value in leaves.items():
        segments = split_path(path)
        if not segments:
            raise PathError("Empty path")
        node = root
        for seg in segments[:-1]:
            node = node.setdefault(seg, {})
            if not isinstance(node, dict):
                raise PathError(f"{path!r} descends into a leaf")
        node[segments[-1]] = value
    return _rebuild(root, "", kinds)


def _rebuild(node: Any, path: str, kinds: Optional[Mapping[LeafPath, Kind]]) -> Any:
    if not isinstance(node, dict):
        return node
    items = {k: _rebuild(v, join_path(path, k), kinds) for k, v in node.items()}
    if kinds is not None and path in kinds:
        as_array = kinds[path] is Kind.ARRAY
    else:
        as_array = bool(items) and all(is_index(k) for k in items)
    if not as_array:
        return items
    if not all(is_index(k) for k in items):
        raise PathError(f"Array at {path!r} has non-index keys")
    expected = [str(i) for i in range(len(items))]
    if set(items) != set(expected):
        if kinds is not None and path in kinds:
            raise PathError(f"Array at {path!r} has gaps in its indices")
        return items
    return [items[k] for k in expected]
