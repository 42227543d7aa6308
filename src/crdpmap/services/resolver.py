# src/crdpmap/services/resolver.py
from __future__ import annotations

from crdpmap.domain import TypeRef, UnsupportedShape
from crdpmap.domain.nodes import Node, QualifiedName, TypeReference


def resolve_type_name(node: Node, context: str) -> TypeRef:
    """Return the ``Domain.Type`` pair named by a type reference node.

    ``context`` names the event/command being inspected and ends up in the error message.
    """
    if isinstance(node, TypeReference) and isinstance(node.type_name, QualifiedName):
        qualified = node.type_name
        if isinstance(qualified.left, QualifiedName):
            raise UnsupportedShape(context, "unsupported triple nested type name")
        return TypeRef(domain=qualified.left.text, type=qualified.right.text)

    raise UnsupportedShape(context, "unexpected type node")
