"""Load a site document JSON file into the reference backend store."""
import argparse, json, os, sys
from pathlib import Path
from typing import Any, Dict

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from site_admin.store.db import init_db, save_site, set_db_path


def unwrap_site(data: Dict[str, Any]) -> Dict[str, Any]:
    # Accept either a GET /site body or a bare site object
    if isinstance(data.get("site"), dict):
        return data["site"]
    return data


def main():
    p = argparse.ArgumentParser()
    p.add_argument('-File', type=str, required=True)
    p.add_argument('-Db', type=str, default=None)
    a = p.parse_args()

    if a.Db:
        set_db_path(Path(a.Db))
    with open(a.File, encoding='utf-8') as f:
        site = unwrap_site(json.load(f))
    if not isinstance(site.get("i18n"), dict):
        sys.exit(f"{a.File}: expected an i18n object")
    init_db(seed=site)
    save_site(site)
    langs = ", ".join(sorted(site["i18n"]))
    print(f"Seeded site document ({langs}) from {a.File}")


if __name__ == '__main__':
    main()
