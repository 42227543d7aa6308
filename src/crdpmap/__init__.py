"""crdpmap: CRDP event/command mapping generator."""

__version__ = "0.1.0"
