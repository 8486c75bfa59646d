import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict

AUDIT_DIR = Path(__file__).parents[2] / "audit"
AUDIT_FILE = AUDIT_DIR / "site_edits.jsonl"


def set_audit_dir(path: Path) -> None:
    global AUDIT_DIR, AUDIT_FILE
    AUDIT_DIR = Path(path)
    AUDIT_FILE = AUDIT_DIR / "site_edits.jsonl"


def write_audit(event: Dict[str, Any]) -> None:
    # append a JSONL entry
    AUDIT_DIR.mkdir(parents=True, exist_ok=True)
    entry = {"at": datetime.now(timezone.utc).isoformat(), **event}
    with AUDIT_FILE.open("a", encoding="utf-8") as f:
        f.write(json.dumps(entry, ensure_ascii=False) + "\n")
