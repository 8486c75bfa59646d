"""Leaf path encoding and navigation.

A leaf path joins object keys and array indices with ``.``. Keys that
contain ``.`` or ``\\`` are escaped with a backslash, so ``{"a.b": 1}``
flattens to ``a\\.b`` and never collides with ``{"a": {"b": 1}}``.
Plain keys are left as they are.
"""
from typing import Any, List

from site_admin.core.errors import PathError

SEPARATOR = "."
ESCAPE = "\\"


def escape_segment(segment: str) -> str:
    return segment.replace(ESCAPE, ESCAPE * 2).replace(SEPARATOR, ESCAPE + SEPARATOR)


def join_path(parent: str, segment: Any) -> str:
    seg = escape_segment(str(segment))
    return f"{parent}{SEPARATOR}{seg}" if parent else seg


def split_path(path: str) -> List[str]:
    if path == "":
        return []
    segments: List[str] = []
    buf: List[str] = []
    chars = iter(path)
    for ch in chars:
        if ch == ESCAPE:
            nxt = next(chars, None)
            if nxt is None:
                raise PathError(f"Dangling escape at end of path {path!r}")
            buf.append(nxt)
        elif ch == SEPARATOR:
            segments.append("".join(buf))
            buf = []
        else:
            buf.append(ch)
    segments.append("".join(buf))
    return segments


def is_index(segment: str) -> bool:
    return segment.isascii() and segment.isdigit()


def _index(container: list, segment: str, path: str) -> int:
    if not is_index(segment):
        raise PathError(f"Segment {segment!r} of {path!r} is not an array index")
    idx = int(segment)
    if idx >= len(container):
        raise PathError(f"Index {idx} out of range in {path!r}")
    return idx


def get_by_path(document: Any, path: str) -> Any:
    node = document
    for seg in split_path(path):
        if isinstance(node, dict):
            if seg not in node:
                raise PathError(f"Key {seg!r} not found in {path!r}")
            node = node[seg]
        elif isinstance(node, list):
            node = node[_index(node, seg, path)]
        else:
            raise PathError(f"Cannot descend into a scalar at {seg!r} in {path!r}")
    return node


def set_by_path(document: Any, path: str, value: Any) -> Any:
    """Write ``value`` at ``path`` inside ``document`` in place.

    Missing object keys along the way are created as empty objects. Arrays
    are never extended. Returns the document for chaining.
    """
    segments = split_path(path)
    if not segments:
        raise PathError("Empty path")
    node = document
    for seg in segments[:-1]:
        if isinstance(node, dict):
            nxt = node.get(seg)
            if not isinstance(nxt, (dict, list)):
                if nxt is not None:
                    raise PathError(f"Cannot descend into a scalar at {seg!r} in {path!r}")
                nxt = node[seg] = {}
            node = nxt
        elif isinstance(node, list):
            node = node[_index(node, seg, path)]
            if not isinstance(node, (dict, list)):
                raise PathError(f"Cannot descend into a scalar at {seg!r} in {path!r}")
        else:
            raise PathError(f"Cannot descend into a scalar in {path!r}")
    last = segments[-1]
    if isinstance(node, dict):
        node[last] = value
    elif isinstance(node, list):
        node[_index(node, last, path)] = value
    else:
        raise PathError(f"Cannot assign into a scalar in {path!r}")
    return document
