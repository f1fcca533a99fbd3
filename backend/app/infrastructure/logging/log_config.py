"""Logging levels for the billing backend.

Each `log_level_*` setting controls a group of logger names, so SQL echo
or uvicorn access lines can be turned down while service logs stay on.
`setup_logging()` runs once from the application lifespan.
"""

import logging
import sys

from app.config import get_settings


# settings field -> logger names it governs
_LEVEL_GROUPS: dict[str, list[str]] = {
    "log_level_sql": [
        "sqlalchemy.engine",
        "sqlalchemy.pool",
        "aiosqlite",
    ],
    "log_level_http": [
        "httpx",
        "httpcore",
    ],
    "log_level_uvicorn": [
        "uvicorn",
        "uvicorn.access",
        "uvicorn.error",
    ],
    "log_level_billing": [
        "app.application.services",
        "app.infrastructure.database.repositories",
        "app.infrastructure.storage",
    ],
}


def setup_logging() -> None:
    """Set the root level, attach a stderr handler if none exists, apply group levels."""
    settings = get_settings()
    root_level = _parse_level(settings.log_level)

    root = logging.getLogger()
    root.setLevel(root_level)

    # uvicorn installs its own handler; tests and scripts do not
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)-8s %(name)s: %(message)s"))
        root.addHandler(handler)

    for field_name, logger_names in _LEVEL_GROUPS.items():
        level = _parse_level(getattr(settings, field_name, "INFO"))
        for name in logger_names:
            logging.getLogger(name).setLevel(level)

    logging.getLogger(__name__).debug(
        "Log levels: root=%s, sql=%s, http=%s, uvicorn=%s, billing=%s",
        settings.log_level,
        settings.log_level_sql,
        settings.log_level_http,
        settings.log_level_uvicorn,
        settings.log_level_billing,
    )


def _parse_level(raw: str) -> int:
    """Map a level name such as "debug" to its logging constant; unknown names give INFO."""
    level = getattr(logging, raw.upper(), None)
    return level if isinstance(level, int) else logging.INFO
