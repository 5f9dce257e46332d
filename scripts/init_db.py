"""Create the MySQL database and tables from database/schema.sql."""

from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src" / "time_tracker"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from config import get_settings_module

from time_tracker.database.bootstrap import apply_schema, list_tables
from time_tracker.main import LOG_FORMAT


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"), format=LOG_FORMAT)
    db_config = dict(settings.DB_CONFIG)

    executed = apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
    tables = list_tables(db_config)
    print(f"OK: {executed} statements on {db_config.get('host')}/{db_config.get('database')}; tables: {', '.join(tables)}")


if __name__ == "__main__":
    main()
