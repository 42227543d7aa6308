# src/crdpmap/adapters/typescript/provider.py
"""Parse a ``.d.ts`` file with tree-sitter and convert it to the declaration tree.

Only interfaces, namespaces/modules and the member/type shapes the extractors look at
are converted structurally; the rest is kept as opaque nodes tagged with the
tree-sitter node type.
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterator, List, Optional, Tuple, Union

import tree_sitter_typescript as tsts
from tree_sitter import Language, Node as TsNode, Parser

from crdpmap.domain import SchemaSyntaxError
from crdpmap.domain.nodes import (
    EntityName,
    FunctionType,
    Identifier,
    InterfaceDeclaration,
    KeywordType,
    LiteralName,
    Member,
    MemberName,
    MethodSignature,
    ModuleDeclaration,
    OpaqueMember,
    OpaqueStatement,
    OpaqueType,
    Parameter,
    PropertySignature,
    QualifiedName,
    SourceFile,
    Statement,
    TypeNode,
    TypeReference,
)

log = logging.getLogger("crdpmap.provider")

TS_LANGUAGE = Language(tsts.language_typescript())

# statement wrappers whose named children are flattened into the enclosing body
_TRANSPARENT = {"export_statement", "expression_statement", "statement_block"}


def get_node_text(node: TsNode) -> str:
    # stray non-UTF-8 bytes end up in ERROR nodes; keep them reportable
    return node.text.decode("utf-8", errors="replace") if node.text is not None else ""


def _line(node: TsNode) -> int:
    return node.start_point[0] + 1


def _named(node: TsNode) -> Iterator[TsNode]:
    for child in node.named_children:
        if child.type != "comment":
            yield child


def _has_token(node: TsNode, token: str) -> bool:
    return any(not child.is_named and child.type == token for child in node.children)


def _first_error(node: TsNode) -> Optional[TsNode]:
    if node.type == "ERROR" or node.is_missing:
        return node
    if not node.has_error:
        return None
    for child in node.children:
        found = _first_error(child)
        if found is not None:
            return found
    return node


# ---------------- names ----------------


def _entity_name(parts: List[str], line: int) -> EntityName:
    name: EntityName = Identifier(parts[0], line)
    for part in parts[1:]:
        name = QualifiedName(name, Identifier(part, line), line)
    return name


def _dotted(node: TsNode) -> List[str]:
    return [p.strip() for p in get_node_text(node).split(".") if p.strip()]


def _member_name(node: Optional[TsNode]) -> MemberName:
    if node is None:
        return LiteralName("", 0)
    if node.type == "property_identifier":
        return Identifier(get_node_text(node), _line(node))
    return LiteralName(get_node_text(node), _line(node))


# ---------------- types ----------------


def _annotation(node: Optional[TsNode]) -> Optional[TypeNode]:
    """``: T`` -> T; other annotation kinds (asserts, predicates) stay opaque."""
    if node is None:
        return None
    if node.type == "type_annotation":
        inner = next(_named(node), None)
        return convert_type(inner) if inner is not None else None
    return OpaqueType(node.type, get_node_text(node), _line(node))


def _parameters(node: Optional[TsNode]) -> Tuple[Parameter, ...]:
    if node is None:
        return ()
    params: List[Parameter] = []
    for child in _named(node):
        pattern = child.child_by_field_name("pattern")
        params.append(
            Parameter(
                name=get_node_text(pattern) if pattern is not None else get_node_text(child),
                type=_annotation(child.child_by_field_name("type")),
                optional=child.type == "optional_parameter",
                line=_line(child),
            )
        )
    return tuple(params)


def convert_type(node: TsNode) -> TypeNode:
    kind = node.type
    line = _line(node)
    if kind == "type_identifier":
        return TypeReference(Identifier(get_node_text(node), line), None, line)
    if kind == "nested_type_identifier":
        return TypeReference(_entity_name(_dotted(node), line), None, line)
    if kind == "generic_type":
        name_node = node.child_by_field_name("name")
        args_node = node.child_by_field_name("type_arguments")
        args = tuple(convert_type(a) for a in _named(args_node)) if args_node is not None else None
        return TypeReference(_entity_name(_dotted(name_node), line), args, line)
    if kind == "predefined_type":
        return KeywordType(get_node_text(node), line)
    if kind == "function_type":
        ret = node.child_by_field_name("return_type")
        return FunctionType(
            parameters=_parameters(node.child_by_field_name("parameters")),
            type=convert_type(ret) if ret is not None else None,
            line=line,
        )
    return OpaqueType(kind, get_node_text(node), line)


# ---------------- members ----------------


def convert_member(node: TsNode) -> Member:
    line = _line(node)
    if node.type == "property_signature":
        return PropertySignature(
            name=_member_name(node.child_by_field_name("name")),
            type=_annotation(node.child_by_field_name("type")),
            optional=_has_token(node, "?"),
            line=line,
        )
    if node.type == "method_signature":
        return MethodSignature(
            name=_member_name(node.child_by_field_name("name")),
            parameters=_parameters(node.child_by_field_name("parameters")),
            type=_annotation(node.child_by_field_name("return_type")),
            optional=_has_token(node, "?"),
            line=line,
        )
    return OpaqueMember(node.type, line)


# ---------------- statements ----------------


def _module(parts: List[str], body: Tuple[Statement, ...], line: int) -> ModuleDeclaration:
    # namespace A.B {} -> namespace A { namespace B {} }
    decl = ModuleDeclaration(Identifier(parts[-1], line), body, line)
    for part in reversed(parts[:-1]):
        decl = ModuleDeclaration(Identifier(part, line), (decl,), line)
    return decl


def _body(node: Optional[TsNode]) -> Tuple[Statement, ...]:
    if node is None:
        return ()
    return tuple(s for child in _named(node) for s in convert_statement(child))


def convert_statement(node: TsNode) -> Iterator[Statement]:
    kind = node.type
    line = _line(node)
    if kind == "interface_declaration":
        name = node.child_by_field_name("name")
        body = node.child_by_field_name("body")
        members = tuple(convert_member(m) for m in _named(body)) if body is not None else ()
        yield InterfaceDeclaration(Identifier(get_node_text(name), _line(name)), members, line)
    elif kind in ("internal_module", "module"):
        name = node.child_by_field_name("name")
        parts = [p.strip("'\"") for p in _dotted(name)] if name is not None else ["<anonymous>"]
        yield _module(parts, _body(node.child_by_field_name("body")), line)
    elif kind == "ambient_declaration":
        if _has_token(node, "global"):
            block = next((c for c in _named(node) if c.type == "statement_block"), None)
            yield ModuleDeclaration(Identifier("global", line), _body(block), line)
        else:
            for child in _named(node):
                yield from convert_statement(child)
    elif kind in _TRANSPARENT:
        for child in _named(node):
            yield from convert_statement(child)
    else:
        yield OpaqueStatement(kind, line)


def parse_source(source: Union[str, bytes], path: str = "<memory>") -> SourceFile:
    data = source.encode("utf-8") if isinstance(source, str) else source
    parser = Parser(TS_LANGUAGE)
    tree = parser.parse(data)
    root = tree.root_node

    bad = _first_error(root)
    if bad is not None:
        raise SchemaSyntaxError(path, _line(bad), get_node_text(bad)[:80] or bad.type)

    statements = tuple(s for child in _named(root) for s in convert_statement(child))
    return SourceFile(statements, path)


class TreeSitterSchemaProvider:
    """Schema provider reading TypeScript declaration files from disk."""

    def load(self, path: Union[str, Path]) -> SourceFile:
        p = Path(path)
        tree = parse_source(p.read_bytes(), str(p))
        log.debug("schema.parsed", extra={"extra": {"path": str(p), "statements": len(tree.statements)}})
        return tree
