import pytest
from fastapi.testclient import TestClient

from site_admin.api import app
from site_admin.core.errors import LoadError, SaveError
from site_admin.core.models import FieldStatus
from site_admin.core.sync import SyncController
from site_admin.store import audit as audit_mod
from site_admin.store.db import get_site, init_db, set_db_path
from ui.api_client import ApiClient


@pytest.fixture
def api(tmp_path):
    set_db_path(tmp_path / "site.db")
    audit_mod.set_audit_dir(tmp_path / "audit")
    init_db(seed={
        "i18n": {
            "ru": {"hero": {"title": "Привет", "visible": True}, "price": 100},
            "uz": {"hero": {"title": "Salom", "visible": True}, "price": 100},
        }
    })
    return ApiClient(base_url="http://testserver/", timeout=5, http=TestClient(app))


class StatusOnly:
    """Stands in for an HTTP session that always answers with one status."""

    def __init__(self, status):
        self.status = status

    def _resp(self, *a, **kw):
        return type("R", (), {"status_code": self.status, "json": lambda self: {}})()

    get = patch = put = _resp


def test_base_url_is_normalised(api):
    assert api.base_url == "http://testserver"


def test_get_site(api):
    body = api.get_site()
    assert body["site"]["i18n"]["ru"]["hero"]["title"] == "Привет"


def test_patch_leaf_scopes_path_to_language(api):
    api.patch_leaf("uz", "hero.title", "Assalomu alaykum")
    assert get_site()["i18n"]["uz"]["hero"]["title"] == "Assalomu alaykum"
    assert get_site()["i18n"]["ru"]["hero"]["title"] == "Привет"


def test_put_site(api):
    body = api.put_site({"i18n": {"ru": {"a": "b"}, "uz": {"a": "c"}}})
    assert body["site"]["i18n"]["uz"] == {"a": "c"}


def test_error_statuses_are_raised():
    client = ApiClient(base_url="http://example", http=StatusOnly(500))
    with pytest.raises(LoadError, match="GET /site failed with status 500"):
        client.get_site()
    with pytest.raises(SaveError, match="PATCH /site failed for ru:hero.title with status 500"):
        client.patch_leaf("ru", "hero.title", "x")
    with pytest.raises(SaveError, match="PUT /site failed with status 500"):
        client.put_site({"i18n": {}})


def test_patch_bad_path_is_save_error(api):
    with pytest.raises(SaveError, match="status 422"):
        api.patch_leaf("ru", "hero.title.deeper", "x")


def test_controller_end_to_end(api):
    ctl = SyncController(api)
    assert ctl.reload()
    ctl.update_value("hero.title", "ru", "Здравствуйте")
    ctl.update_value("price", "uz", "120.5")
    ctl.update_value("hero.visible", "uz", "0")
    ctl.save_all()
    assert ctl.dirty_count == 0
    assert all(r.status is FieldStatus.SAVED for p, r in ctl.fields.items())

    stored = get_site()["i18n"]
    assert stored["ru"]["hero"]["title"] == "Здравствуйте"
    assert stored["uz"]["price"] == 120.5
    assert stored["uz"]["hero"]["visible"] is False

    # a fresh load sees the persisted values as the new baseline
    assert ctl.reload()
    assert ctl.fields["price"].uz == "120.5"
    assert ctl.fields["hero.visible"].uz == "false"
    assert ctl.dirty_count == 0


def make_no_content_app(site):
    from fastapi import FastAPI, Response

    bare = FastAPI()

    @bare.get("/site")
    async def read():
        return {"site": site}

    @bare.patch("/site")
    async def patch(body: dict):
        if body["path"].endswith(".broken"):
            return Response(status_code=500)
        return Response(status_code=204)

    @bare.put("/site")
    async def put(body: dict):
        return Response(status_code=200, content="ok", media_type="text/plain")

    return bare


def test_no_content_patch_counts_as_saved():
    site = {"i18n": {"ru": {"a": "1", "broken": "2", "c": "3"}, "uz": {"a": "x", "broken": "y", "c": "z"}}}
    client = ApiClient(base_url="http://testserver", http=TestClient(make_no_content_app(site)))
    ctl = SyncController(client)
    assert ctl.reload()
    for path in ("a", "broken", "c"):
        ctl.update_value(path, "ru", "new")

    assert ctl.save_all() == ["a", "broken", "c"]
    assert ctl.fields["a"].status is FieldStatus.SAVED
    assert ctl.fields["broken"].status is FieldStatus.ERROR
    assert ctl.fields["c"].status is FieldStatus.SAVED
    assert ctl.global_message == "Saved 3 changed field(s)."


def test_put_with_non_json_body_is_save_error():
    client = ApiClient(base_url="http://testserver", http=TestClient(make_no_content_app({})))
    with pytest.raises(SaveError, match="invalid JSON"):
        client.put_site({"i18n": {"ru": {}, "uz": {}}})


def test_default_transport_is_requests_module():
    import requests

    assert ApiClient(base_url="http://example").http is requests
