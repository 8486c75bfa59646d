from dataclasses import dataclass, field
from enum import Enum
from typing import Dict

LeafPath = str

LANGS = ("ru", "uz")


class Kind(str, Enum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    # containers are never leaves
    OBJECT = "object"
    ARRAY = "array"

    @property
    def is_leaf(self) -> bool:
        return self not in (Kind.OBJECT, Kind.ARRAY)


class FieldStatus(str, Enum):
    IDLE = "idle"
    SAVING = "saving"
    SAVED = "saved"
    ERROR = "error"


@dataclass(frozen=True)
class LeafValue:
    kind: Kind
    text: str  # canonical editable form, parsed back with `kind` on save


@dataclass(frozen=True)
class SavedPair:
    ru: str
    uz: str


@dataclass(frozen=True)
class FieldRecord:
    ru: str
    uz: str
    ru_type: Kind = Kind.STRING
    uz_type: Kind = Kind.STRING
    # last values confirmed persisted
    saved: SavedPair = field(default_factory=lambda: SavedPair("", ""))
    status: FieldStatus = FieldStatus.IDLE
    error: str = ""

    def draft(self, lang: str) -> str:
        return self.ru if lang == "ru" else self.uz

    def kind(self, lang: str) -> Kind:
        return self.ru_type if lang == "ru" else self.uz_type

    def saved_text(self, lang: str) -> str:
        return self.saved.ru if lang == "ru" else self.saved.uz


FieldStore = Dict[LeafPath, FieldRecord]
