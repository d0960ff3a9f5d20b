"""
Content-based MIME detection backed by libmagic.
"""

from __future__ import annotations

from typing import Optional, Protocol

import magic

from ..utils import get_logger, time_call


class MimeSniffer(Protocol):
    def detect(self, path: str) -> Optional[str]: ...


class MagicSniffer:
    """
    Detect a file's MIME type with python-magic.

    ``magic_file`` points libmagic at an alternative magic database. ``detect``
    returns ``None`` when libmagic cannot classify the file and lets
    ``OSError`` propagate so callers can report the file as unreadable.
    """

    def __init__(self, magic_file: Optional[str] = None, *, slow_read_ms: int = 50) -> None:
        self.magic_file = magic_file
        self.slow_read_ms = slow_read_ms
        self.logger = get_logger("file.sniffing")
        self._magic = magic.Magic(mime=True, magic_file=magic_file) if magic_file else None

    def detect(self, path: str) -> Optional[str]:
        with time_call("sniff.from_file", self.logger, path=path, threshold_ms=self.slow_read_ms):
            try:
                if self._magic is not None:
                    return self._magic.from_file(path) or None
                return magic.from_file(path, mime=True) or None
            except magic.MagicException as exc:
                self.logger.warning("libmagic could not classify %s: %s", path, exc, extra={"path": path})
                return None
