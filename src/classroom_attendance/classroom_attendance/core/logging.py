from __future__ import annotations

import logging


def setup_logging(*, environment: str, level: str | None = None) -> None:
    """Configure application logging.

    - Dev/test: console logs, DEBUG level.
    - Prod: console logs, INFO level.

    Safe to call multiple times (won't double-add handlers).
    """

    root = logging.getLogger()
    if root.handlers:
        return

    env = (environment or "development").lower().strip()
    default_level = logging.INFO if env in {"prod", "production"} else logging.DEBUG
    numeric_level = getattr(logging, level.upper(), default_level) if level else default_level

    formatter = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S%z",
    )

    console = logging.StreamHandler()
    console.setLevel(numeric_level)
    console.setFormatter(formatter)

    logging.basicConfig(level=numeric_level, handlers=[console])

    # mysql-connector is chatty at DEBUG.
    logging.getLogger("mysql.connector").setLevel(max(numeric_level, logging.INFO))
