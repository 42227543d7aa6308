from .provider import TreeSitterSchemaProvider, parse_source

__all__ = ["TreeSitterSchemaProvider", "parse_source"]
