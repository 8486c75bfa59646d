import math
import re
from typing import Any

from site_admin.core.errors import ParseError
from site_admin.core.models import Kind

_NUMBER_RE = re.compile(r"-?(?:0|[1-9]\d*)(?P<frac>\.\d+)?(?P<exp>[eE][+-]?\d+)?")

_TRUE = ("true", "1")
_FALSE = ("false", "0")


def parse(text: str, kind: Kind) -> Any:
    """Turn an edited text back into a JSON value of the given kind.

    Only called at save time. Raises ParseError for malformed numbers and
    booleans. Null-kind text that is neither blank nor ``null`` is kept as a
    plain string.
    """
    kind = Kind(kind)
    if kind is Kind.STRING:
        return text
    if kind is Kind.NUMBER:
        return _parse_number(text)
    if kind is Kind.BOOLEAN:
        norm = text.strip().lower()
        if norm in _TRUE:
            return True
        if norm in _FALSE:
            return False
        raise ParseError(f"Expected true/false, got {text!r}")
    if kind is Kind.NULL:
        if not text.strip() or text.strip().lower() == "null":
            return None
        return text
    raise ParseError(f"Cannot parse a value of kind {kind.value!r}")


def _parse_number(text: str) -> Any:
    raw = text.strip()
    m = _NUMBER_RE.fullmatch(raw)
    if not m:
        raise ParseError(f"Expected a number, got {text!r}")
    if m.group("frac") is None and m.group("exp") is None:
        return int(raw)
    value = float(raw)
    if not math.isfinite(value):
        raise ParseError(f"Number out of range: {text!r}")
    return value
