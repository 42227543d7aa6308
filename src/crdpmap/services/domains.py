# src/crdpmap/services/domains.py
from __future__ import annotations
import logging
from typing import List, Optional

from crdpmap.config import const
from crdpmap.domain import MissingDeclaration
from crdpmap.domain.nodes import (
    Declaration,
    Identifier,
    InterfaceDeclaration,
    ModuleDeclaration,
    Node,
    PropertySignature,
    walk_declarations,
)

log = logging.getLogger("crdpmap.domains")


def find_first_declaration(root: Node, name: str) -> Optional[Declaration]:
    """First interface or module called ``name`` in depth-first order, ``root`` included."""
    for node in walk_declarations(root):
        if isinstance(node, (InterfaceDeclaration, ModuleDeclaration)) and node.name.text == name:
            return node
    return None


def enumerate_domains(root: Node, root_name: str = const.ROOT_CLIENT_NAME) -> List[str]:
    client = find_first_declaration(root, root_name)
    if client is None:
        raise MissingDeclaration(root_name, "no root client interface found in typing file")

    # a module-shaped root has statements, not members, so it exposes no domains
    members = client.members if isinstance(client, InterfaceDeclaration) else ()
    domains = [m.name.text for m in members if isinstance(m, PropertySignature) and isinstance(m.name, Identifier)]
    log.debug("domains.enumerated", extra={"extra": {"root": root_name, "count": len(domains)}})
    return domains
