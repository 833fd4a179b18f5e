from __future__ import annotations

import importlib
from types import ModuleType

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .shifts.controller import register as register_shifts


def create_app(settings: ModuleType | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    if settings is None:
        settings = importlib.import_module(get_settings_module())
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    container = build_container(settings=settings)

    if app.config["DEBUG"]:
        shifts_file = getattr(settings, "SHIFTS_FILE", None)
        print(
            "[oncall-shifts] settings=", settings.__name__,
            " source=", shifts_file or "SHIFT_TIMES (inline)",
        )

    register_shifts(app, container)

    return app
