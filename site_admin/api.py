from pathlib import Path
from typing import Any, Dict

from fastapi import FastAPI, HTTPException
from fastapi.responses import RedirectResponse, Response
from loguru import logger
from pydantic import BaseModel

from site_admin.config import AdminConfig
from site_admin.core.errors import PathError
from site_admin.core.models import LANGS
from site_admin.core.paths import set_by_path, split_path
from site_admin.logging_setup import configure_logging
from site_admin.store.audit import set_audit_dir, write_audit
from site_admin.store.db import get_site, init_db, save_site, set_db_path

cfg = AdminConfig()
configure_logging(cfg.log_level)
if cfg.db_path:
    set_db_path(Path(cfg.db_path))
if cfg.audit_dir:
    set_audit_dir(Path(cfg.audit_dir))

app = FastAPI(title="Site i18n Content API")
init_db()


class LeafPatch(BaseModel):
    path: str
    value: Any = None


class SiteDocumentIn(BaseModel):
    i18n: Dict[str, Any]


@app.get("/")
async def root() -> RedirectResponse:
    return RedirectResponse(url="/docs")


@app.get("/favicon.ico")
async def favicon() -> Response:
    return Response(status_code=204)


@app.get("/site")
async def read_site() -> Dict[str, Any]:
    return {"site": get_site()}


@app.patch("/site")
async def patch_site(body: LeafPatch) -> Dict[str, Any]:
    """Set one leaf of the site document.

    ``path`` is rooted at ``site``, e.g. ``site.i18n.ru.hero.title``.
    Missing intermediate objects are created; array indices must exist.
    """
    try:
        segments = split_path(body.path)
    except PathError as e:
        raise HTTPException(status_code=422, detail=str(e))
    if len(segments) < 2 or not body.path.startswith("site."):
        logger.warning("Rejected patch outside site: {}", body.path)
        raise HTTPException(status_code=422, detail="path must start with 'site.'")
    site = get_site()
    # re-join without the "site" prefix, keeping escapes intact
    inner = body.path[len("site."):]
    try:
        set_by_path(site, inner, body.value)
    except PathError as e:
        logger.warning("Rejected patch {}: {}", body.path, e)
        raise HTTPException(status_code=422, detail=str(e))
    save_site(site)
    write_audit({"type": "patch", "path": body.path, "value": body.value})
    logger.info("Patched {}", body.path)
    return {"ok": True, "path": body.path}


@app.put("/site")
async def put_site(body: SiteDocumentIn) -> Dict[str, Any]:
    """Replace the i18n subtree with a full document."""
    for lang in LANGS:
        tree = body.i18n.get(lang)
        if tree is not None and not isinstance(tree, (dict, list)):
            raise HTTPException(status_code=422, detail=f"i18n.{lang} must be an object")
    site = get_site()
    site["i18n"] = body.i18n
    save_site(site)
    write_audit({"type": "put", "languages": sorted(body.i18n)})
    logger.info("Replaced i18n document ({})", ", ".join(sorted(body.i18n)))
    return {"site": site}
