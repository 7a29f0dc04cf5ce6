"""
Generate a pool file from the current settings, without overwriting an existing one.

Run as ``python -m shufflekey.keygen``. The destination comes from
``SHUFFLEKEY_POOL_PATH`` (default ``config/pool.json``); size and character
sets follow ``SHUFFLEKEY_DEFAULT_SIZE`` and ``SHUFFLEKEY_DEFAULT_CHARACTER_SETS``.
"""

from __future__ import annotations

import os
from pathlib import Path

from shufflekey.core.engine import ShuffleKey
from shufflekey.storage.pool_file import save_pool
from shufflekey.util.logger import logger


_DEFAULT_POOL_PATH = "config/pool.json"


def pool_path() -> Path:
    return Path(os.environ.get("SHUFFLEKEY_POOL_PATH", "").strip() or _DEFAULT_POOL_PATH)


def ensure_pool_file(path: Path | None = None, *, force: bool = False) -> Path | None:
    """Build a fresh pool and write it to *path*; returns ``None`` when nothing was written."""
    target = path or pool_path()
    if target.exists() and target.stat().st_size > 0 and not force:
        logger.info("keygen: %s already exists, skip", target)
        return None

    cipher = ShuffleKey()
    if not cipher.ids():
        raise RuntimeError(f"keygen: no mapping objects built ({'; '.join(map(str, cipher.diagnostics))})")

    written = save_pool(target, cipher.export_objects())
    logger.info("keygen: wrote %s mapping objects to %s", len(cipher.ids()), written)
    return written


def main() -> None:
    force = os.environ.get("SHUFFLEKEY_KEYGEN_FORCE", "false").strip().lower() in {"1", "true", "yes", "on"}
    ensure_pool_file(force=force)


if __name__ == "__main__":
    main()
