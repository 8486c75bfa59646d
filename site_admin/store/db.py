import json
import sqlite3
from pathlib import Path
from typing import Any, Dict, Optional

DATA_DIR = (Path(__file__).parents[2] / "data")
DB_PATH: Path = DATA_DIR / "site.db"


def set_db_path(path: Path) -> None:
    global DB_PATH
    DB_PATH = Path(path)


def _conn() -> sqlite3.Connection:
    DB_PATH.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(DB_PATH)
    conn.row_factory = sqlite3.Row
    return conn


def default_site() -> Dict[str, Any]:
    return {
        "i18n": {
            "ru": {
                "hero": {"title": "Добро пожаловать", "subtitle": "Лучший сервис в городе"},
                "contacts": {"phone": "+998 90 000 00 00", "show_map": True},
                "menu": ["Главная", "О нас", "Контакты"],
            },
            "uz": {
                "hero": {"title": "Xush kelibsiz", "subtitle": "Shahardagi eng yaxshi xizmat"},
                "contacts": {"phone": "+998 90 000 00 00", "show_map": True},
                "menu": ["Bosh sahifa", "Biz haqimizda", "Aloqa"],
            },
        }
    }


def init_db(seed: Optional[Dict[str, Any]] = None) -> None:
    with _conn() as conn:
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS site_document (
                id INTEGER PRIMARY KEY CHECK (id = 1),
                payload TEXT NOT NULL,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
            """
        )
        row = conn.execute("SELECT id FROM site_document WHERE id=1").fetchone()
        if row is None:
            conn.execute(
                "INSERT INTO site_document(id, payload) VALUES(1, ?)",
                (json.dumps(seed if seed is not None else default_site(), ensure_ascii=False),),
            )
        conn.commit()


def get_site() -> Dict[str, Any]:
    with _conn() as conn:
        r = conn.execute("SELECT payload FROM site_document WHERE id=1").fetchone()
        return json.loads(r["payload"]) if r else {}


def save_site(site: Dict[str, Any]) -> None:
    with _conn() as conn:
        conn.execute(
            "INSERT INTO site_document(id, payload, updated_at) VALUES(1, ?, CURRENT_TIMESTAMP) "
            "ON CONFLICT(id) DO UPDATE SET payload=excluded.payload, updated_at=CURRENT_TIMESTAMP",
            (json.dumps(site, ensure_ascii=False),),
        )
        conn.commit()
