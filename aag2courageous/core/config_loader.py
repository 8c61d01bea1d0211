"""Reader for ``key = value`` text configuration files."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

from .logging_utils import get_module_logger

logger = get_module_logger(__name__)

_TRUE_WORDS = ('true', 'yes', 'on', '1')
_BOOL_WORDS = _TRUE_WORDS + ('false', 'no', 'off', '0')


class ConfigLoader:
    """Config file loader.

    Lines are ``key = value``; blank lines and ``#`` comments are skipped,
    and a trailing ``# ...`` after a value is stripped. Values for keys that
    appear in ``defaults`` are coerced to the default's type.
    """

    @staticmethod
    def load(
        config_path: Path,
        defaults: Optional[Dict[str, Any]] = None,
        strict: bool = False,
        required: bool = False,
    ) -> Dict[str, Any]:
        """Read ``config_path`` over ``defaults``.

        A missing or unreadable file yields the defaults, unless ``required``
        is set, in which case the ``OSError`` propagates.
        """
        config = defaults.copy() if defaults else {}

        if not config_path.exists():
            if required:
                raise FileNotFoundError(f"Config file not found at {config_path}")
            if defaults:
                logger.debug("Config file not found at %s, using defaults", config_path)
            else:
                logger.warning("Config file not found at %s and no defaults provided", config_path)
            return config

        logger.debug("Loading config from: %s", config_path)

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                for line_num, line in enumerate(f, 1):
                    line = line.strip()

                    if not line or line.startswith('#'):
                        continue

                    if '=' not in line:
                        logger.warning(
                            "Invalid config line %d (missing '='): %s",
                            line_num, line
                        )
                        continue

                    key, value = line.split('=', 1)
                    key = key.strip()
                    value = value.strip()

                    if '#' in value:
                        value = value.split('#', 1)[0].strip()

                    if strict and defaults is not None and key not in defaults:
                        logger.warning(
                            "Unknown config key '%s' (line %d) - ignored in strict mode",
                            key, line_num
                        )
                        continue

                    if defaults and key in defaults:
                        config[key] = ConfigLoader._parse_value_with_type(
                            value, defaults[key]
                        )
                    else:
                        config[key] = ConfigLoader._parse_value(value)

        except (OSError, UnicodeDecodeError) as e:
            if required:
                raise OSError(f"Failed to load config file {config_path}: {e}") from e
            logger.error("Failed to load config file %s: %s", config_path, e)
            return defaults.copy() if defaults else {}

        logger.info("Loaded config from %s (%d values)", config_path, len(config))
        return config

    @staticmethod
    def _parse_value(value: str) -> Any:
        value_lower = value.lower()
        if value_lower in _BOOL_WORDS:
            return value_lower in _TRUE_WORDS

        try:
            return int(value)
        except ValueError:
            pass

        try:
            return float(value)
        except ValueError:
            pass

        return value

    @staticmethod
    def _parse_value_with_type(value: str, default: Any) -> Any:
        target_type = type(default)
        if target_type is bool:
            value_lower = value.lower()
            if value_lower not in _BOOL_WORDS:
                logger.warning("Failed to parse '%s' as bool, using default", value)
                return default
            return value_lower in _TRUE_WORDS

        if target_type is int:
            try:
                return int(value, 0)
            except ValueError:
                logger.warning("Failed to parse '%s' as int, using default", value)
                return default

        if target_type is float:
            try:
                return float(value)
            except ValueError:
                logger.warning("Failed to parse '%s' as float, using default", value)
                return default

        return value


__all__ = ["ConfigLoader"]
