# src/crdpmap/services/extractor.py
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from crdpmap.config import const
from crdpmap.domain import CrdpMapError, ExtractedSchema, UnsupportedShape
from crdpmap.domain.nodes import SourceFile
from crdpmap.services.commands import extract_commands
from crdpmap.services.domains import enumerate_domains
from crdpmap.services.events import extract_events

log = logging.getLogger("crdpmap.extractor")


@dataclass
class ExtractionResult:
    ok: bool
    domains: List[str] = field(default_factory=list)
    schema: Optional[ExtractedSchema] = None
    error: Optional[CrdpMapError] = None

    def unwrap(self) -> ExtractedSchema:
        if self.error is not None:
            raise self.error
        if self.schema is None:
            raise RuntimeError("extraction result carries neither schema nor error")
        return self.schema


def extract(tree: SourceFile, *, root_name: str = const.ROOT_CLIENT_NAME, strict_duplicates: bool = False) -> tuple[List[str], ExtractedSchema]:
    """Run the whole pipeline over ``tree``; the first malformed shape raises."""
    domains = enumerate_domains(tree, root_name)
    schema = ExtractedSchema()

    for domain in domains:
        for event in extract_events(tree, domain):
            if schema.add_event(event):
                _duplicate(event.key, "event", strict_duplicates)
    for domain in domains:
        for command in extract_commands(tree, domain):
            if schema.add_command(command):
                _duplicate(command.key, "command", strict_duplicates)

    log.debug(
        "extraction.done",
        extra={"extra": {"source": tree.path, "domains": len(domains), "events": len(schema.events), "commands": len(schema.commands)}},
    )
    return domains, schema.freeze()


def _duplicate(key: str, kind: str, strict: bool) -> None:
    if strict:
        raise UnsupportedShape(key, f"duplicate {kind} name")
    log.warning("extraction.duplicate", extra={"extra": {"kind": kind, "key": key}})


def run_extraction(tree: SourceFile, *, root_name: str = const.ROOT_CLIENT_NAME, strict_duplicates: bool = False) -> ExtractionResult:
    """Like :func:`extract`, but reports the first failure as a value instead of raising."""
    try:
        domains, schema = extract(tree, root_name=root_name, strict_duplicates=strict_duplicates)
    except CrdpMapError as e:
        log.error("extraction.failed", extra={"extra": {"source": tree.path, "error": str(e)}})
        return ExtractionResult(ok=False, error=e)
    return ExtractionResult(ok=True, domains=domains, schema=schema)
