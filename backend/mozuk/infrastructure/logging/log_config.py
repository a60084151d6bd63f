"""Logging setup driven by the ``LOG_LEVEL*`` settings.

Each category names the loggers it governs; ``setup_logging()`` is called
once from the FastAPI lifespan.
"""

import logging
import sys

from mozuk.config import Settings, get_settings

_LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

_CATEGORY_LOGGERS: dict[str, tuple[str, ...]] = {
    "log_level_sql": ("sqlalchemy.engine", "sqlalchemy.pool", "aiosqlite"),
    "log_level_uvicorn": ("uvicorn", "uvicorn.access", "uvicorn.error"),
    "log_level_storage": ("mozuk.infrastructure.storage",),
    "log_level_auth": (
        "mozuk.infrastructure.security",
        "mozuk.application.services.auth_service",
    ),
}


def category_levels(settings: Settings) -> dict[str, int]:
    """Resolve every governed logger name to its numeric level."""
    levels: dict[str, int] = {}
    for field_name, logger_names in _CATEGORY_LOGGERS.items():
        level = _to_level(getattr(settings, field_name))
        levels.update(dict.fromkeys(logger_names, level))
    return levels


def setup_logging(settings: Settings | None = None) -> None:
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(_to_level(settings.log_level))
    # uvicorn installs its own handlers; a bare process (scripts, tests) has none
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        root.addHandler(handler)

    for name, level in category_levels(settings).items():
        logging.getLogger(name).setLevel(level)

    logging.getLogger(__name__).debug(
        "Log levels: root=%s sql=%s uvicorn=%s storage=%s auth=%s",
        settings.log_level,
        settings.log_level_sql,
        settings.log_level_uvicorn,
        settings.log_level_storage,
        settings.log_level_auth,
    )


def _to_level(name: str) -> int:
    """Map a level name to its logging constant; unknown names fall back to INFO."""
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO
