from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src" / "employee_admin"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from dotenv import load_dotenv

from config import get_settings_module

from employee_admin.database.bootstrap import apply_schema, ensure_admin_user, list_tables
from employee_admin.database.connection import DBConfig, DatabaseConnection


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    conn = DatabaseConnection(DBConfig.from_dict(settings.DB_CONFIG))

    apply_schema(conn, schema_path=REPO_ROOT / "database" / "schema.sql")
    created = ensure_admin_user(
        conn,
        code=settings.ADMIN_CODE,
        name=getattr(settings, "ADMIN_NAME", "Administrator"),
        password=settings.ADMIN_PASSWORD,
    )
    tables = list_tables(conn)
    print(
        f"OK: Applied schema.sql -> {conn.config.describe()} (tables={len(tables)}, "
        f"admin {'created' if created else 'already present'})"
    )


if __name__ == "__main__":
    main()
