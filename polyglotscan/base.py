"""The common shape of a format detector."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class Detector:
    """A named format check applied to the raw contents of a file."""

    name: str
    check: Callable[[bytes], bool]

    def detect(self, data: bytes, file_path: str) -> bool:
        """Return whether ``data`` is valid for this detector's format.

        ``file_path`` names where the data came from. The built-in checks
        look only at the bytes.
        """
        return bool(self.check(data))