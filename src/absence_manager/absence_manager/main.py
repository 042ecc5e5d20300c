from __future__ import annotations

import importlib
import logging
from datetime import timedelta
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .absences.controller import register as register_absences
from .common.http import json_error
from .config import get_settings_module
from .container import Container, build_container
from .courses.controller import register as register_courses
from .departments.controller import register as register_departments
from .modules.controller import register as register_modules
from .reports.controller import register as register_reports
from .sessions.controller import register as register_sessions
from .students.controller import register as register_students
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    """Application factory.

    Pass a prebuilt ``container`` to share one store with the caller (tests do);
    otherwise a new store is built from the active settings module.
    """

    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["SESSION_COOKIE_SECURE"] = bool(getattr(settings, "SESSION_COOKIE_SECURE", False))
    app.permanent_session_lifetime = timedelta(hours=24)

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if container is None:
        container = build_container(seed_demo=bool(getattr(settings, "SEED_DEMO_USERS", False)))
    app.extensions["absence_manager"] = container

    register_users(app, container)
    register_departments(app, container)
    register_courses(app, container)
    register_modules(app, container)
    register_students(app, container)
    register_sessions(app, container)
    register_absences(app, container)
    register_reports(app, container)

    @app.errorhandler(404)
    def not_found(_e):
        return json_error("Not found", 404)

    @app.errorhandler(405)
    def method_not_allowed(_e):
        return json_error("Method not allowed", 405)

    logger.info("absence-manager ready (settings=%s, tables=%s)", settings_module, container.store.table_sizes())
    return app


def main() -> None:
    app = create_app()
    app.run(debug=app.config["DEBUG"])


if __name__ == "__main__":
    main()
