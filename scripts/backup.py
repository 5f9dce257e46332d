"""Backup the roster and work days to a JSON file under backups/."""

from __future__ import annotations

import importlib
import json
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src" / "time_tracker"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from config import get_settings_module

from time_tracker.container import build_container


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(store_backend=settings.STORE_BACKEND, db_config=dict(settings.DB_CONFIG))

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"timetracker-backup-{ts}.json"
    out_file.write_text(json.dumps(container.backup_service.export(), ensure_ascii=False, indent=2), encoding="utf-8")
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
