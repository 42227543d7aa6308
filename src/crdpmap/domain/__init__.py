from .types import TypeRef, EventDescriptor, CommandDescriptor, ExtractedSchema
from .errors import CrdpMapError, MissingDeclaration, UnsupportedShape, SchemaSyntaxError

__all__ = [
    "TypeRef",
    "EventDescriptor",
    "CommandDescriptor",
    "ExtractedSchema",
    "CrdpMapError",
    "MissingDeclaration",
    "UnsupportedShape",
    "SchemaSyntaxError",
]
