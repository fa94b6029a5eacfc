"""Employee administration package.

Organized by feature modules (employees, auth) with a thin Flask controller
layer over service/repository layers.
"""
from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import Container, build_container
from .database.bootstrap import apply_schema, ensure_admin_user, list_tables
from .auth.controller import register as register_auth
from .employees.controller import register as register_employees

logger = logging.getLogger(__name__)

REPO_ROOT = Path(__file__).resolve().parents[3]


def create_app(container: Optional[Container] = None) -> Flask:
    """Build the Flask app.

    When ``container`` is given it is used as-is and no database bootstrap
    runs; otherwise one is built from the active settings module.
    """
    load_dotenv(override=False)
    app = Flask(__name__, template_folder=str(REPO_ROOT / "templates"))

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        container = build_container(db_config=db_config)
        logger.info("settings=%s db=%s", settings_module, container.conn.config.describe())

        if getattr(settings, "AUTO_INIT_DB", False):
            apply_schema(container.conn, schema_path=REPO_ROOT / "database" / "schema.sql")
            ensure_admin_user(
                container.conn,
                code=getattr(settings, "ADMIN_CODE"),
                name=getattr(settings, "ADMIN_NAME", "Administrator"),
                password=getattr(settings, "ADMIN_PASSWORD"),
            )
            logger.info("schema ready (tables=%d)", len(list_tables(container.conn)))

    register_auth(app, container)
    register_employees(app, container)

    return app
