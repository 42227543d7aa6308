"""Error hierarchy raised by the extraction pipeline."""

from __future__ import annotations

from typing import Optional


class CrdpMapError(RuntimeError):
    """Base class for every malformed-schema condition; none of them are retried."""


class MissingDeclaration(CrdpMapError):
    """A required declaration is absent or was found with the wrong declaration kind."""

    def __init__(self, name: str, detail: Optional[str] = None) -> None:
        self.name = name
        self.detail = detail
        message = f"declaration '{name}' not found"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class UnsupportedShape(CrdpMapError):
    """A declaration exists but its shape is outside the supported subset."""

    def __init__(self, subject: str, reason: str) -> None:
        self.subject = subject
        self.reason = reason
        super().__init__(f"{reason} in {subject}")


class SchemaSyntaxError(CrdpMapError):
    """The schema source could not be parsed into a declaration tree."""

    def __init__(self, path: str, line: int, detail: Optional[str] = None) -> None:
        self.path = path
        self.line = line
        message = f"syntax error in {path} at line {line}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


__all__ = [
    "CrdpMapError",
    "MissingDeclaration",
    "UnsupportedShape",
    "SchemaSyntaxError",
]
