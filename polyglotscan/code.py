"""Checks for source code, delegated to an external interpreter."""

from __future__ import annotations

import os
import subprocess
import tempfile


def is_js(data: bytes) -> bool:
    """Return whether ``node -c`` accepts ``data`` as JavaScript syntax.

    Raises ``OSError`` (for instance ``FileNotFoundError``) when node
    cannot be started.
    """
    fd, path = tempfile.mkstemp(suffix=".js")
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)
        result = subprocess.run(
            ["node", "-c", path],
            capture_output=True,
            check=False,
        )
    finally:
        os.remove(path)
    return result.returncode == 0