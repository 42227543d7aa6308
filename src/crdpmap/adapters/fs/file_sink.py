from __future__ import annotations
import logging
import os
import tempfile
from pathlib import Path
from typing import List, Optional, Union

log = logging.getLogger("crdpmap.sink")


def write_text_atomic(path: Union[str, Path], data: str) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp = tempfile.mkstemp(prefix=p.name + ".", dir=str(p.parent))
    try:
        # newline="" keeps "\n" endings on every platform
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(data)
        os.replace(tmp, p)
    finally:
        try:
            os.unlink(tmp)
        except FileNotFoundError:
            pass


class FileSink:
    """Writes the generated declaration file in one atomic step."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def write(self, text: str) -> None:
        write_text_atomic(self.path, text)
        log.debug("sink.written", extra={"extra": {"path": str(self.path), "bytes": len(text.encode("utf-8"))}})


class MemorySink:
    def __init__(self) -> None:
        self.writes: List[str] = []

    @property
    def text(self) -> Optional[str]:
        return self.writes[-1] if self.writes else None

    def write(self, text: str) -> None:
        self.writes.append(text)
