"""Whole-document editing: load the i18n tree, edit it in place, PUT it back."""
import copy
from typing import Any, Dict, Optional, Protocol

from loguru import logger

from site_admin.core.errors import LoadError, SaveError
from site_admin.core.paths import set_by_path
from site_admin.core.sync import extract_i18n
from site_admin.core.view import find_empty_fields

INCOMPLETE_MESSAGE = "Barcha matnlar rus va o'zbek tillarida to'ldirilishi kerak!"
SAVED_MESSAGE = "Ma'lumotlar muvaffaqiyatli saqlandi!"


class DocumentClient(Protocol):
    def get_site(self) -> Dict[str, Any]: ...

    def put_site(self, document: Dict[str, Any]) -> Dict[str, Any]: ...


class DocumentEditor:
    def __init__(self, client: DocumentClient) -> None:
        self.client = client
        self.data: Optional[Dict[str, Any]] = None
        self.error = ""
        self.message = ""
        self.sending = False

    def load(self) -> bool:
        self.error = ""
        try:
            trees = extract_i18n(self.client.get_site())
        except LoadError as e:
            self.error = str(e) or "Failed to load site data"
            logger.error("Document load failed: {}", self.error)
            return False
        self.data = {"i18n": copy.deepcopy(trees)}
        return True

    def set_value(self, path: str, value: Any) -> None:
        """Write ``value`` at ``path`` relative to the document root (``i18n.ru.hero.title``)."""
        if self.data is None:
            return
        set_by_path(self.data, path, value)

    def problems(self) -> list[str]:
        if self.data is None:
            return ["ru:", "uz:"]
        i18n = self.data.get("i18n") or {}
        return find_empty_fields(i18n.get("ru"), i18n.get("uz"))

    def save(self) -> bool:
        if self.data is None:
            return False
        if self.problems():
            self.message = INCOMPLETE_MESSAGE
            return False
        self.sending = True
        self.message = ""
        try:
            body = self.client.put_site(self.data)
            if not isinstance(body, dict) or not isinstance(body.get("site"), dict):
                raise SaveError("PUT /site response has no site document")
            trees = extract_i18n(body)
        except (SaveError, LoadError) as e:
            self.message = f"Xato: {e}"
            logger.warning("Document save failed: {}", e)
            return False
        finally:
            self.sending = False
        self.data = {"i18n": trees}
        self.message = SAVED_MESSAGE
        logger.info("Site document saved")
        return True
