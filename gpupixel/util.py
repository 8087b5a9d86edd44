"""Small helpers: printf-style formatting, logging, clock and resource paths."""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass


@dataclass
class _Settings:
    resource_root: str = ""


_settings = _Settings()


def str_format(fmt: str | None, *args: object) -> str:
    """Format ``args`` with the printf-style template ``fmt``.

    Returns an empty string when ``fmt`` is None.
    """
    if fmt is None:
        return ""
    if not args:
        return fmt % ()
    return fmt % args


def log(tag: str, fmt: str, *args: object) -> None:
    """Write a formatted message line to standard output."""
    del tag  # the tag only matters to platform loggers
    sys.stdout.write(str_format(fmt, *args) + "\n")


def now_time_ms() -> int:
    """Milliseconds since the Unix epoch."""
    return time.time_ns() // 1_000_000


def set_resource_root(root: str) -> None:
    """Set the directory that resource names are resolved against."""
    _settings.resource_root = root


def get_resource_path(name: str) -> str:
    """Return the path of resource ``name`` under the resource root."""
    root = _settings.resource_root
    return name if not root else f"{root}/{name}"