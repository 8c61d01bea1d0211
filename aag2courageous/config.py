"""Typed configuration for the converter."""

from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from pathlib import Path
from typing import Any, Optional

from aag2courageous.core.config_loader import ConfigLoader
from aag2courageous.core.logging_utils import get_module_logger
from aag2courageous.gps_core.constants import (
    DEFAULT_OUTPUT_EXTENSION,
    DEFAULT_RESYNC_WINDOW,
    DEFAULT_SYSTEM_NAME,
    DEFAULT_VENDOR_NAME,
    VENDOR_COMMENT_PREFIX,
)

logger = get_module_logger("ConverterConfig")

DEFAULTS = {
    # Output document
    "system_name": DEFAULT_SYSTEM_NAME,
    "vendor_name": DEFAULT_VENDOR_NAME,
    "prettyprint": False,
    "output_extension": DEFAULT_OUTPUT_EXTENSION,

    # Input decoding
    "comment_prefix": VENDOR_COMMENT_PREFIX,
    "validate_checksums": True,
    "resync_window": DEFAULT_RESYNC_WINDOW,

    # Logging
    "log_level": "info",
    "log_file": "",
}


@dataclass(slots=True)
class ConverterConfig:
    """Typed configuration for one conversion run."""

    # Output document
    system_name: str = DEFAULT_SYSTEM_NAME
    vendor_name: str = DEFAULT_VENDOR_NAME
    prettyprint: bool = False
    output_extension: str = DEFAULT_OUTPUT_EXTENSION

    # Input decoding
    comment_prefix: str = VENDOR_COMMENT_PREFIX
    validate_checksums: bool = True
    resync_window: int = DEFAULT_RESYNC_WINDOW

    # Logging
    log_level: str = "info"
    log_file: Optional[Path] = None

    def __post_init__(self) -> None:
        if self.resync_window < 1:
            raise ValueError(f"resync_window must be at least 1, got {self.resync_window}")

    @classmethod
    def from_file(
        cls, config_path: Optional[Path] = None, args: Any = None
    ) -> "ConverterConfig":
        """Build config from an optional config file with CLI overrides."""
        values = dict(DEFAULTS)
        if config_path is not None:
            values = ConfigLoader.load(
                Path(config_path), defaults=DEFAULTS, strict=True, required=True
            )

        config = cls(
            system_name=values["system_name"],
            vendor_name=values["vendor_name"],
            prettyprint=values["prettyprint"],
            output_extension=values["output_extension"],
            comment_prefix=values["comment_prefix"],
            validate_checksums=values["validate_checksums"],
            resync_window=values["resync_window"],
            log_level=values["log_level"],
            log_file=Path(values["log_file"]) if values["log_file"] else None,
        )

        if args is not None:
            config = config._apply_args_override(args)

        return config

    def _apply_args_override(self, args: Any) -> "ConverterConfig":
        """Apply CLI argument overrides; only arguments the user actually gave count."""
        overrides = {}
        for name in ("system_name", "vendor_name", "log_level", "log_file"):
            value = getattr(args, name, None)
            if value is not None:
                overrides[name] = value
        if getattr(args, "prettyprint", False):
            overrides["prettyprint"] = True

        if overrides:
            logger.debug("CLI overrides: %s", ", ".join(sorted(overrides)))
        return replace(self, **overrides)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


__all__ = ["ConverterConfig", "DEFAULTS"]
