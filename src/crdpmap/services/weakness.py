# src/crdpmap/services/weakness.py
from __future__ import annotations

from crdpmap.domain import MissingDeclaration
from crdpmap.domain.nodes import InterfaceDeclaration, ModuleDeclaration, Node, PropertySignature
from crdpmap.services.domains import find_first_declaration


def is_weak_interface(root: Node, domain: str, type_name: str) -> bool:
    """
    True if every property of ``domain.type_name`` is optional, so the whole value may be
    omitted. The domain is expected to be a namespace somewhere under ``root`` and the
    interface to live inside it.
    """
    domain_decl = find_first_declaration(root, domain)
    if not isinstance(domain_decl, ModuleDeclaration):
        raise MissingDeclaration(domain, "domain namespace not found")

    target = find_first_declaration(domain_decl, type_name)
    if not isinstance(target, InterfaceDeclaration):
        raise MissingDeclaration(f"{domain}.{type_name}", f"interface not found within {domain} domain")

    return all(member.optional for member in target.members if isinstance(member, PropertySignature))
