from typing import Any, Dict, Optional

import requests

from site_admin.config import AdminConfig
from site_admin.core.errors import LoadError, SaveError


class ApiClient:
    """Thin client for the site content API.

    ``http`` may be any object with requests-style ``get``/``patch``/``put``
    (the ``requests`` module itself by default, FastAPI's ``TestClient`` in
    tests).
    """

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None, http: Any = None) -> None:
        cfg = AdminConfig()
        self.base_url = (base_url or cfg.api_base).rstrip("/")
        self.timeout = timeout if timeout is not None else cfg.request_timeout
        self.http = http or requests

    @staticmethod
    def _ok(r: Any) -> bool:
        return 200 <= r.status_code < 300

    def get_site(self) -> Dict[str, Any]:
        try:
            r = self.http.get(f"{self.base_url}/site", timeout=self.timeout)
        except requests.RequestException as e:
            raise LoadError(f"GET /site failed: {e}") from e
        if not self._ok(r):
            raise LoadError(f"GET /site failed with status {r.status_code}")
        try:
            return r.json()
        except ValueError as e:
            raise LoadError(f"GET /site returned invalid JSON: {e}") from e

    def patch_leaf(self, lang: str, path: str, value: Any) -> None:
        # The response body carries nothing we need; a 204 is as good as a 200
        body = {"path": f"site.i18n.{lang}.{path}", "value": value}
        try:
            r = self.http.patch(f"{self.base_url}/site", json=body, timeout=self.timeout)
        except requests.RequestException as e:
            raise SaveError(f"PATCH /site failed for {lang}:{path}: {e}") from e
        if not self._ok(r):
            raise SaveError(f"PATCH /site failed for {lang}:{path} with status {r.status_code}")

    def put_site(self, document: Dict[str, Any]) -> Dict[str, Any]:
        try:
            r = self.http.put(f"{self.base_url}/site", json=document, timeout=self.timeout)
        except requests.RequestException as e:
            raise SaveError(f"PUT /site failed: {e}") from e
        if not self._ok(r):
            raise SaveError(f"PUT /site failed with status {r.status_code}")
        try:
            return r.json()
        except ValueError as e:
            raise SaveError(f"PUT /site returned invalid JSON: {e}") from e
