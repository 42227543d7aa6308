# src/crdpmap/services/events.py
from __future__ import annotations
import logging
import re
from typing import List, Optional

from crdpmap.config import const
from crdpmap.domain import EventDescriptor, MissingDeclaration, UnsupportedShape
from crdpmap.domain.nodes import Identifier, InterfaceDeclaration, MethodSignature, Node
from crdpmap.services.domains import find_first_declaration
from crdpmap.services.resolver import resolve_type_name
from crdpmap.services.shape import listener_param_type

log = logging.getLogger("crdpmap.events")

_LISTENER_NAME = re.compile(r"^on[A-Z]")


def event_name_for(method_name: str, context: Optional[str] = None) -> str:
    """``onRequestWillBeSent`` -> ``requestWillBeSent``."""
    if not _LISTENER_NAME.match(method_name):
        raise UnsupportedShape(context or method_name, f"bad listener method name {method_name!r}")
    return method_name[2].lower() + method_name[3:]


def extract_events(root: Node, domain: str) -> List[EventDescriptor]:
    # the '<Domain>Client' interface sits next to the domain namespace
    interface_name = domain + const.EVENTS_SUFFIX
    events_decl = find_first_declaration(root, interface_name)
    if not isinstance(events_decl, InterfaceDeclaration):
        raise MissingDeclaration(interface_name, f"events interface not found for domain '{domain}'")

    out: List[EventDescriptor] = []
    for member in events_decl.members:
        if not isinstance(member, MethodSignature):
            continue
        if not isinstance(member.name, Identifier):
            raise UnsupportedShape(f"{interface_name}:{member.line}", f"bad event method name {member.name.text!r}")

        method_name = member.name.text
        context = f"{interface_name}.{method_name}"
        event = event_name_for(method_name, context)
        raw = listener_param_type(member, context)
        payload = resolve_type_name(raw, context) if raw is not None else None
        out.append(EventDescriptor(domain=domain, event=event, payload=payload))

    log.debug("events.extracted", extra={"extra": {"domain": domain, "count": len(out)}})
    return out
