"""Machine-readable export of an extracted mapping (JSON / YAML)."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from crdpmap.domain import ExtractedSchema, TypeRef


class EventEntry(BaseModel):
    key: str
    domain: str
    event: str
    payload: Optional[str] = None


class CommandEntry(BaseModel):
    key: str
    domain: str
    command: str
    params: Optional[str] = None
    weak_params: bool = False
    returns: Optional[str] = None


class ExportDocument(BaseModel):
    source: str
    domains: List[str] = Field(default_factory=list)
    events: List[EventEntry] = Field(default_factory=list)
    commands: List[CommandEntry] = Field(default_factory=list)


def _qualified(ref: Optional[TypeRef]) -> Optional[str]:
    return ref.qualified if ref is not None else None


def build_export(schema: ExtractedSchema, domains: List[str], source: str) -> ExportDocument:
    return ExportDocument(
        source=source,
        domains=list(domains),
        events=[EventEntry(key=k, domain=e.domain, event=e.event, payload=_qualified(e.payload)) for k, e in schema.events.items()],
        commands=[
            CommandEntry(
                key=k,
                domain=c.domain,
                command=c.command,
                params=_qualified(c.params),
                weak_params=c.weak_params,
                returns=_qualified(c.returns),
            )
            for k, c in schema.commands.items()
        ],
    )


def export_data(doc: ExportDocument) -> Dict[str, Any]:
    return doc.model_dump(mode="json")


__all__ = ["EventEntry", "CommandEntry", "ExportDocument", "build_export", "export_data"]
