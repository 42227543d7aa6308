# src/crdpmap/services/commands.py
from __future__ import annotations
import logging
from typing import List, Optional

from crdpmap.config import const
from crdpmap.domain import CommandDescriptor, MissingDeclaration, TypeRef, UnsupportedShape
from crdpmap.domain.nodes import (
    FunctionType,
    Identifier,
    InterfaceDeclaration,
    KeywordType,
    Node,
    PropertySignature,
    TypeReference,
)
from crdpmap.services.domains import find_first_declaration
from crdpmap.services.resolver import resolve_type_name
from crdpmap.services.shape import param_type
from crdpmap.services.weakness import is_weak_interface

log = logging.getLogger("crdpmap.commands")


def promised_return_type(fn: FunctionType, context: str) -> Optional[TypeRef]:
    """Unwrap ``Promise<T>``: ``void`` gives None, a qualified reference gives its TypeRef."""
    wrapper = fn.type
    if not isinstance(wrapper, TypeReference):
        raise UnsupportedShape(context, "unexpected return type")

    name = wrapper.type_name
    if not isinstance(name, Identifier) or name.text != const.PROMISE_WRAPPER or wrapper.type_arguments is None:
        raise UnsupportedShape(context, "unexpected return type")
    if len(wrapper.type_arguments) != 1:
        raise UnsupportedShape(context, f"unexpected {len(wrapper.type_arguments)} type argument(s) passed")

    payload = wrapper.type_arguments[0]
    if isinstance(payload, KeywordType) and payload.keyword == const.VOID:
        return None
    if isinstance(payload, TypeReference):
        return resolve_type_name(payload, context)
    raise UnsupportedShape(context, "unexpected return type")


def extract_commands(root: Node, domain: str) -> List[CommandDescriptor]:
    interface_name = domain + const.COMMANDS_SUFFIX
    commands_decl = find_first_declaration(root, interface_name)
    if not isinstance(commands_decl, InterfaceDeclaration):
        raise MissingDeclaration(interface_name, f"command interface not found for domain '{domain}'")

    out: List[CommandDescriptor] = []
    for member in commands_decl.members:
        if not isinstance(member, PropertySignature):
            continue
        if not isinstance(member.name, Identifier):
            raise UnsupportedShape(f"{interface_name}:{member.line}", f"bad command name {member.name.text!r}")

        context = f"{domain}.{member.name.text}"
        fn = member.type
        if not isinstance(fn, FunctionType):
            raise UnsupportedShape(context, "no assigned function")

        params: Optional[TypeRef] = None
        weak = False
        raw_params = param_type(fn, context)
        if raw_params is not None:
            params = resolve_type_name(raw_params, context)
            # all-optional params may be omitted entirely
            weak = is_weak_interface(root, params.domain, params.type)

        returns = promised_return_type(fn, context)
        out.append(CommandDescriptor(domain=domain, command=member.name.text, params=params, weak_params=weak, returns=returns))

    log.debug("commands.extracted", extra={"extra": {"domain": domain, "count": len(out)}})
    return out
