from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .employees.controller import register as register_employees
from .employees.seed import seed_demo_employees

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, str(level_name).upper(), logging.INFO)
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("employee_records").setLevel(level)


def create_app(settings_module: Optional[str] = None, **overrides) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["LOG_LEVEL"] = getattr(settings, "LOG_LEVEL", "INFO")
    app.config["ID_STRATEGY"] = getattr(settings, "ID_STRATEGY", "sequential")
    app.config["AUTO_SEED_DEMO"] = bool(getattr(settings, "AUTO_SEED_DEMO", False))
    app.config.update(overrides)

    _configure_logging(app.config["LOG_LEVEL"])
    app.logger.debug("settings=%s id_strategy=%s", settings_module, app.config["ID_STRATEGY"])

    container = build_container(id_strategy=app.config["ID_STRATEGY"])
    app.extensions["employee_records"] = container

    if app.config["AUTO_SEED_DEMO"]:
        added = seed_demo_employees(container.employee_service)
        app.logger.info("Seeded %d demo employees", added)

    register_employees(app, container)

    return app
