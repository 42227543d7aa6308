from __future__ import annotations
from pathlib import Path
from typing import Protocol, Union

from crdpmap.domain.nodes import SourceFile


class SchemaProvider(Protocol):
    def load(self, path: Union[str, Path]) -> SourceFile: ...


class OutputSink(Protocol):
    def write(self, text: str) -> None: ...
