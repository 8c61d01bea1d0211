"""JSON serialization of COURAGEOUS documents."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Optional

from aag2courageous.core.logging_utils import get_module_logger
from aag2courageous.gps_core.constants import DEFAULT_OUTPUT_EXTENSION
from .document import Document

logger = get_module_logger(__name__)


def default_output_path(input_path: Path, extension: str = DEFAULT_OUTPUT_EXTENSION) -> Path:
    """Return ``input_path`` with its extension replaced (or added)."""
    return Path(input_path).with_suffix(f".{extension.lstrip('.')}")


def dumps_document(document: Document, *, pretty: bool = False) -> str:
    """Serialize a document to a compact or indented JSON string."""
    if pretty:
        return json.dumps(document.to_dict(), indent=2)
    return json.dumps(document.to_dict(), separators=(",", ":"))


def write_document(document: Document, path: Path, *, pretty: bool = False) -> Path:
    """Atomically write ``document`` as JSON to ``path``.

    The payload goes to a temporary file next to ``path`` which then
    replaces the target, so a failed write never leaves a truncated
    document behind. OSError propagates to the caller.
    """
    path = Path(path)
    payload = dumps_document(document, pretty=pretty)

    tmp_path: Optional[Path] = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            dir=str(path.parent),
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
            encoding="utf-8",
        ) as tmp:
            tmp_path = Path(tmp.name)
            tmp.write(payload)
            tmp.flush()
            os.fsync(tmp.fileno())

        os.replace(tmp_path, path)
        tmp_path = None
    finally:
        if tmp_path is not None:
            try:
                tmp_path.unlink()
            except FileNotFoundError:
                pass

    logger.debug("Wrote %d bytes to %s", len(payload), path)
    return path


__all__ = ["default_output_path", "dumps_document", "write_document"]
