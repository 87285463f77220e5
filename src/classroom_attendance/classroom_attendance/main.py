from __future__ import annotations

import importlib
import logging
from typing import Any, Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import build_container
from .core.constants import DEFAULT_HOST, DEFAULT_PORT
from .database.bootstrap import apply_schema, ensure_user, list_tables


logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int = logging.INFO) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
    # basicConfig is a no-op once the root logger has handlers (e.g. under a WSGI
    # server), so also set the package logger for the submission log lines.
    logging.getLogger(__package__).setLevel(level)


def load_settings(overrides: Optional[dict] = None) -> dict[str, Any]:
    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    values = {name: getattr(settings, name) for name in dir(settings) if name.isupper()}
    values["SETTINGS_MODULE"] = settings_module
    values.update(overrides or {})
    return values


def create_app(overrides: Optional[dict] = None) -> Flask:
    """Build the Flask app.

    Raises ConfigurationError if the database config file cannot be used: a server
    that can never check a login should not start.
    """
    load_dotenv(override=False)
    settings = load_settings(overrides)
    configure_logging(settings.get("LOG_LEVEL", "INFO"))

    app = Flask(__name__)
    app.config["DEBUG"] = bool(settings.get("DEBUG", False))
    app.config["TESTING"] = bool(settings.get("TESTING", False))
    app.config["HOST"] = settings.get("HOST", DEFAULT_HOST)
    app.config["PORT"] = int(settings.get("PORT", DEFAULT_PORT))

    container = build_container(
        db_config_path=settings["DB_CONFIG_PATH"],
        attend_page_path=settings["ATTEND_PAGE_PATH"],
    )

    descriptor = container.descriptor_loader.load()
    target = descriptor.connect_kwargs()
    if app.config["DEBUG"]:
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings["SETTINGS_MODULE"],
            target.get("user"),
            target.get("host"),
            target.get("port"),
            target.get("database"),
        )

    if settings.get("AUTO_INIT_DB"):
        apply_schema(descriptor)
        logger.info("schema ready (tables=%d)", len(list_tables(descriptor)))
    if settings.get("AUTO_SEED_DB"):
        username = settings.get("DEMO_USERNAME", "teacher")
        ensure_user(descriptor, username=username, password=settings.get("DEMO_PASSWORD", "teacher123"))

    app.extensions["classroom_attendance"] = container
    register_attendance(app, container)

    return app


def main() -> None:
    load_dotenv(override=False)
    app = create_app()
    app.run(host=app.config["HOST"], port=app.config["PORT"], debug=app.config["DEBUG"], use_reloader=False)


if __name__ == "__main__":
    main()
