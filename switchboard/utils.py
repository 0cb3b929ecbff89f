# Switchboard — (c) 2025 rtj.dev LLC — MIT Licensed
"""Logging setup for the Switchboard command line."""
from __future__ import annotations

import logging
import os

import pythonjsonlogger.json
from rich.logging import RichHandler

from switchboard.console import error_console
from switchboard.logger import logger

CONTAINER_RUNTIMES = ("docker", "kubepods", "containerd", "podman")


def running_in_container() -> bool:
    try:
        with open("/proc/1/cgroup", "r", encoding="UTF-8") as cgroup:
            content = cgroup.read()
    except OSError:
        return False
    return any(runtime in content for runtime in CONTAINER_RUNTIMES)


def setup_logging(mode: str | None = None, level: int = logging.WARNING) -> None:
    """
    Send log records to stderr as rich console lines or as JSON objects.

    Args:
        mode (str | None): "cli" or "json". Falls back to `SWITCHBOARD_LOG_MODE`,
            then to "json" inside containers and "cli" everywhere else.
        level (int): Minimum level that reaches the handler.

    Raises:
        ValueError: If an invalid logging `mode` is passed.
    """
    mode = mode or os.getenv("SWITCHBOARD_LOG_MODE")
    if not mode:
        mode = "json" if running_in_container() else "cli"

    if mode == "cli":
        handler: logging.Handler = RichHandler(
            console=error_console,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    elif mode == "json":
        handler = logging.StreamHandler()
        handler.setFormatter(
            pythonjsonlogger.json.JsonFormatter(
                "%(asctime)s %(name)s %(levelname)s %(message)s"
            )
        )
    else:
        raise ValueError(f"Invalid log mode: {mode}")

    handler.setLevel(level)
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)
    root.addHandler(handler)
    logger.debug("Logging initialized in '%s' mode.", mode)
