"""Component-tagged loggers for the converter.

Every message is prefixed with ``[Component]`` so a mixed stderr stream
shows which stage (decoder, pairer, writer, ...) produced it.
"""

from __future__ import annotations

import logging
from typing import Optional

MODULE_LOGGER_NAMESPACE = "aag2courageous"
DEFAULT_COMPONENT = "Core"


def _normalize_logger_name(name: Optional[str]) -> str:
    if not name:
        return MODULE_LOGGER_NAMESPACE
    if name.startswith(MODULE_LOGGER_NAMESPACE):
        return name
    return f"{MODULE_LOGGER_NAMESPACE}.{name}"


def _derive_component(name: str) -> str:
    suffix = name[len(MODULE_LOGGER_NAMESPACE):].lstrip(".")
    return suffix or DEFAULT_COMPONENT


class StructuredLogger:
    """Wraps a stdlib logger and tags messages with a component name."""

    __slots__ = ("_logger", "_component")

    def __init__(self, logger: logging.Logger, component: Optional[str] = None) -> None:
        self._logger = logger
        self._component = component or _derive_component(logger.name)

    @property
    def name(self) -> str:
        return self._logger.name

    @property
    def component(self) -> str:
        return self._component

    def _emit(self, level: int, message: str, *args) -> None:
        # Skip formatting entirely for per-sentence debug chatter
        if not self._logger.isEnabledFor(level):
            return
        text = message % args if args else message
        self._logger.log(level, "[%s] %s", self._component, text)

    def debug(self, message: str, *args) -> None:
        self._emit(logging.DEBUG, message, *args)

    def info(self, message: str, *args) -> None:
        self._emit(logging.INFO, message, *args)

    def warning(self, message: str, *args) -> None:
        self._emit(logging.WARNING, message, *args)

    def error(self, message: str, *args) -> None:
        self._emit(logging.ERROR, message, *args)


def get_module_logger(name: Optional[str] = None) -> StructuredLogger:
    """Return a structured logger scoped to the aag2courageous namespace."""
    return StructuredLogger(logging.getLogger(_normalize_logger_name(name)))


__all__ = [
    "MODULE_LOGGER_NAMESPACE",
    "StructuredLogger",
    "get_module_logger",
]
