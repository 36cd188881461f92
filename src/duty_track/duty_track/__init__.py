"""Duty Track admin console.

This package is organized by feature modules (auth, persons, qr, dashboard)
with a thin Flask controller layer over services that call the Duty Track
REST backend through small repository classes.
"""
from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import Container, build_container
from .auth.controller import register as register_auth
from .dashboard.controller import register as register_dashboard
from .persons.controller import register as register_persons
from .qr.controller import register as register_qr


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates", static_folder="../../../static")

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["GEOCODE_API_KEY"] = getattr(settings, "GEOCODE_API_KEY", "")

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger = logging.getLogger(__name__)

    api_config = {
        "base_url": getattr(settings, "API_BASE_URL"),
        "timeout": getattr(settings, "REQUEST_TIMEOUT", 15),
        "geocode_api_key": app.config["GEOCODE_API_KEY"],
        "qr_fetch_workers": getattr(settings, "QR_FETCH_WORKERS", 8),
    }

    if app.config["DEBUG"]:
        logger.info("[duty-track] settings=%s api=%s", settings_module, api_config["base_url"])
    if not api_config["base_url"]:
        logger.warning("[duty-track] API_BASE_URL is not set; backend calls will fail")

    container = container or build_container(api_config=api_config)
    app.extensions["duty_track"] = container

    register_auth(app, container)
    register_persons(app, container)
    register_qr(app, container)
    register_dashboard(app, container)

    return app
