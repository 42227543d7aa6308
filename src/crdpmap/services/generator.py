# src/crdpmap/services/generator.py
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Optional

from crdpmap.domain import CrdpMapError
from crdpmap.ports import OutputSink, SchemaProvider
from crdpmap.services.extractor import ExtractionResult, run_extraction
from crdpmap.services.renderer import RenderOptions, render
from crdpmap.services.settings import Settings

log = logging.getLogger("crdpmap.generator")


@dataclass
class GenerationResult:
    extraction: ExtractionResult
    text: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.extraction.ok

    @property
    def error(self) -> Optional[CrdpMapError]:
        return self.extraction.error


def extract_from(settings: Settings, provider: SchemaProvider) -> ExtractionResult:
    try:
        tree = provider.load(settings.schema_path)
    except CrdpMapError as e:
        log.error("schema.load_failed", extra={"extra": {"path": str(settings.schema_path), "error": str(e)}})
        return ExtractionResult(ok=False, error=e)
    return run_extraction(tree, root_name=settings.root_name, strict_duplicates=settings.strict_duplicates)


def generate(
    settings: Settings,
    provider: SchemaProvider,
    sink: Optional[OutputSink] = None,
    options: Optional[RenderOptions] = None,
) -> GenerationResult:
    """
    Load -> extract -> render -> write. The sink is touched only after the whole
    text has been rendered, so a failed run never leaves a partial file behind.
    """
    extraction = extract_from(settings, provider)
    if not extraction.ok:
        return GenerationResult(extraction=extraction)

    text = render(extraction.unwrap(), options)
    if sink is not None:
        sink.write(text)
    return GenerationResult(extraction=extraction, text=text)
