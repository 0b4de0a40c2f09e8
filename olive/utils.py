# Olive Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py"""
from __future__ import annotations

import importlib
import logging
import os
from typing import Any

import pythonjsonlogger.json
from rich.logging import RichHandler

from olive.exceptions import ConfigurationError

CONTAINER_MARKERS = ("docker", "kubepods", "containerd", "podman")
LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def import_object(dotted_path: str) -> Any:
    """
    Import an object from a dotted path like 'my.module.func'.

    Raises:
        ConfigurationError: If the path is malformed, the module cannot be
            imported, or the attribute does not exist.
    """
    module_path, _, attr = dotted_path.rpartition(".")
    if not module_path or not attr:
        raise ConfigurationError(f"Invalid import path: '{dotted_path}'")
    try:
        module = importlib.import_module(module_path)
    except ModuleNotFoundError as error:
        raise ConfigurationError(
            f"Could not import '{dotted_path}': {error}. Ensure the module is "
            "installed and discoverable via PYTHONPATH."
        ) from error
    try:
        return getattr(module, attr)
    except AttributeError as error:
        raise ConfigurationError(
            f"Module '{module_path}' has no attribute '{attr}'"
        ) from error


def running_in_container() -> bool:
    """Check the init process's cgroups for a container runtime."""
    try:
        with open("/proc/1/cgroup", "r", encoding="UTF-8") as cgroup:
            content = cgroup.read()
    except OSError:
        return False
    return any(marker in content for marker in CONTAINER_MARKERS)


def setup_logging(
    mode: str | None = None,
    console_log_level: int = logging.WARNING,
) -> None:
    """
    Route Olive's debug output to the console.

    Args:
        mode (str | None): "cli" for Rich log lines or "json" for one JSON
            object per record. Falls back to `OLIVE_LOG_MODE`, then to "json"
            inside containers and "cli" elsewhere.
        console_log_level (int): Minimum level shown on the console.

    Raises:
        ValueError: If `mode` is not "cli" or "json".
    """
    mode = mode or os.getenv("OLIVE_LOG_MODE")
    if not mode:
        mode = "json" if running_in_container() else "cli"

    if mode == "cli":
        handler: logging.Handler = RichHandler(
            rich_tracebacks=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    elif mode == "json":
        handler = logging.StreamHandler()
        handler.setFormatter(pythonjsonlogger.json.JsonFormatter(LOG_FORMAT))
    else:
        raise ValueError(f"Invalid log mode: {mode}")
    handler.setLevel(console_log_level)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    root.handlers.clear()
    root.addHandler(handler)
    logging.getLogger("olive").debug("Logging initialized in '%s' mode.", mode)
