"""Allow ``python -m aag2courageous``."""

from __future__ import annotations

from aag2courageous.cli.convert import main


if __name__ == "__main__":
    raise SystemExit(main())
