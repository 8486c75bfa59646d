"""Orchestrates loading and saving of the field store against the site API.

The controller is driven by UI events on a single thread. Every per-field
save runs to completion before the next one starts, so two writes never
interleave on the remote document. Saves are not cancellable; instead each
reload bumps ``generation`` and a save that finishes under an older
generation leaves the freshly loaded store alone.
"""
from dataclasses import replace
from typing import Any, Dict, List, Protocol

from loguru import logger

from site_admin.core import field_store
from site_admin.core.errors import LoadError, ParseError, SaveError
from site_admin.core.models import LANGS, FieldStatus, FieldStore, Kind, SavedPair
from site_admin.core.serializer import parse


class SiteClient(Protocol):
    def get_site(self) -> Dict[str, Any]: ...

    def patch_leaf(self, lang: str, path: str, value: Any) -> Any: ...


def extract_i18n(body: Any) -> Dict[str, Any]:
    """Pull ``{ru, uz}`` out of a ``GET /site`` body."""
    if not isinstance(body, dict):
        raise LoadError("Malformed site document: expected an object")
    site = body.get("site") or {}
    if not isinstance(site, dict):
        raise LoadError("Malformed site document: site is not an object")
    i18n = site.get("i18n") or {}
    if not isinstance(i18n, dict):
        raise LoadError("Malformed site document: i18n is not an object")
    trees = {}
    for lang in LANGS:
        tree = i18n.get(lang)
        if tree is None:
            tree = {}
        if not isinstance(tree, (dict, list)):
            raise LoadError(f"Malformed site document: i18n.{lang} is not an object")
        trees[lang] = tree
    return trees


class SyncController:
    def __init__(self, client: SiteClient) -> None:
        self.client = client
        self.fields: FieldStore = {}
        self.is_loading = False
        self.is_saving_all = False
        self.load_error = ""
        self.global_message = ""
        self.generation = 0

    # Load
    def reload(self) -> bool:
        """Replace the store with a fresh copy of the remote document.

        Unsaved drafts are dropped. On failure the store is left empty and
        the message is kept in ``load_error``.
        """
        self.generation += 1
        self.is_loading = True
        self.load_error = ""
        self.fields = {}
        logger.info("Loading site document (generation {})", self.generation)
        try:
            trees = extract_i18n(self.client.get_site())
            self.fields = field_store.build(trees["ru"], trees["uz"])
        except LoadError as e:
            self.load_error = str(e) or "Failed to load site data"
            logger.error("Site load failed: {}", self.load_error)
            return False
        finally:
            self.is_loading = False
        logger.info("Loaded {} fields", len(self.fields))
        return True

    # Edit
    def update_value(self, path: str, lang: str, text: str) -> None:
        self.fields = field_store.update(self.fields, path, lang, text)

    def is_dirty(self, path: str) -> bool:
        record = self.fields.get(path)
        return record is not None and field_store.is_dirty(record)

    @property
    def dirty_count(self) -> int:
        return field_store.dirty_count(self.fields)

    # Save
    def _set(self, path: str, **changes: Any) -> None:
        record = self.fields.get(path)
        if record is None:
            return
        new_fields = dict(self.fields)
        new_fields[path] = replace(record, **changes)
        self.fields = new_fields

    def save_field(self, path: str) -> bool:
        """Persist the changed languages of one field.

        Returns True only when every changed language was written. Failures
        are recorded on the field and never raised.
        """
        record = self.fields.get(path)
        if record is None or not field_store.is_dirty(record):
            return False
        generation = self.generation
        self._set(path, status=FieldStatus.SAVING, error="")
        logger.debug("Saving field {}", path)
        sent = {"ru": record.ru, "uz": record.uz}
        try:
            for lang in LANGS:
                if record.draft(lang) == record.saved_text(lang):
                    continue
                value = parse(record.draft(lang), record.kind(lang))
                if record.kind(lang) is Kind.NULL and value is not None:
                    logger.warning("Null leaf {}:{} edited to {!r}; saving as string", lang, path, value)
                self.client.patch_leaf(lang, path, value)
        except (ParseError, SaveError) as e:
            if self._is_stale(generation, path):
                return False
            message = str(e) or "Failed to save field"
            logger.warning("Saving {} failed: {}", path, message)
            self._set(path, status=FieldStatus.ERROR, error=message)
            return False
        if self._is_stale(generation, path):
            return False
        self._set(path, saved=SavedPair(**sent), status=FieldStatus.SAVED, error="")
        return True

    def _is_stale(self, generation: int, path: str) -> bool:
        if generation != self.generation:
            logger.warning("Discarding result for {}: store was reloaded during the save", path)
            return True
        return False

    def save_all(self) -> List[str]:
        """Save every dirty field one after another.

        A failing field does not stop the batch. Returns the snapshot of
        paths that were attempted.
        """
        self.is_saving_all = True
        self.global_message = ""
        paths = field_store.dirty_paths(self.fields)
        failed = 0
        try:
            for path in paths:
                self.save_field(path)
                record = self.fields.get(path)
                if record is not None and record.status is FieldStatus.ERROR:
                    failed += 1
        finally:
            self.is_saving_all = False
        self.global_message = f"Saved {len(paths)} changed field(s)." if paths else "No changes to save."
        logger.info("Save all: {} attempted, {} failed", len(paths), failed)
        return paths
