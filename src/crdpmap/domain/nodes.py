# src/crdpmap/domain/nodes.py
"""Immutable declaration tree consumed by the extractors.

Only the subset of a TypeScript declaration file that the mapping cares about is
modelled explicitly; everything else survives as an ``Opaque*`` node so that shape
checks can still reject it by kind.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple, Union


@dataclass(frozen=True, slots=True)
class Identifier:
    text: str
    line: int = 0


@dataclass(frozen=True, slots=True)
class LiteralName:
    """String, numeric or computed member name (``'foo'``, ``0``, ``[Symbol.x]``)."""

    text: str
    line: int = 0


@dataclass(frozen=True, slots=True)
class QualifiedName:
    left: Union[Identifier, "QualifiedName"]
    right: Identifier
    line: int = 0

    @property
    def parts(self) -> Tuple[str, ...]:
        head = self.left.parts if isinstance(self.left, QualifiedName) else (self.left.text,)
        return head + (self.right.text,)


EntityName = Union[Identifier, QualifiedName]
MemberName = Union[Identifier, LiteralName]


@dataclass(frozen=True, slots=True)
class TypeReference:
    type_name: EntityName
    type_arguments: Optional[Tuple["TypeNode", ...]] = None
    line: int = 0


@dataclass(frozen=True, slots=True)
class Parameter:
    name: str
    type: Optional["TypeNode"] = None
    optional: bool = False
    line: int = 0


@dataclass(frozen=True, slots=True)
class FunctionType:
    parameters: Tuple[Parameter, ...] = ()
    type: Optional["TypeNode"] = None
    line: int = 0


@dataclass(frozen=True, slots=True)
class KeywordType:
    keyword: str  # void | string | number | boolean | any | ...
    line: int = 0


@dataclass(frozen=True, slots=True)
class OpaqueType:
    kind: str
    text: str = ""
    line: int = 0


TypeNode = Union[TypeReference, FunctionType, KeywordType, OpaqueType]


@dataclass(frozen=True, slots=True)
class PropertySignature:
    name: MemberName
    type: Optional[TypeNode] = None
    optional: bool = False
    line: int = 0


@dataclass(frozen=True, slots=True)
class MethodSignature:
    name: MemberName
    parameters: Tuple[Parameter, ...] = ()
    type: Optional[TypeNode] = None
    optional: bool = False
    line: int = 0


@dataclass(frozen=True, slots=True)
class OpaqueMember:
    kind: str
    line: int = 0


Member = Union[PropertySignature, MethodSignature, OpaqueMember]


@dataclass(frozen=True, slots=True)
class InterfaceDeclaration:
    name: Identifier
    members: Tuple[Member, ...] = ()
    line: int = 0


@dataclass(frozen=True, slots=True)
class ModuleDeclaration:
    """``namespace X {}``, ``module X {}`` or ``declare global {}``."""

    name: Identifier
    body: Tuple["Statement", ...] = ()
    line: int = 0


@dataclass(frozen=True, slots=True)
class OpaqueStatement:
    kind: str
    line: int = 0


Statement = Union[InterfaceDeclaration, ModuleDeclaration, OpaqueStatement]


@dataclass(frozen=True, slots=True)
class SourceFile:
    statements: Tuple[Statement, ...] = ()
    path: str = "<memory>"


Node = Union[SourceFile, Statement, Member, Parameter, TypeNode, Identifier, LiteralName, QualifiedName]
Declaration = Union[InterfaceDeclaration, ModuleDeclaration]


def declaration_children(node: Node) -> Iterator[Statement]:
    """Statements nested directly under ``node``; only files and modules contain any."""
    if isinstance(node, SourceFile):
        yield from node.statements
    elif isinstance(node, ModuleDeclaration):
        yield from node.body


def walk_declarations(node: Node) -> Iterator[Node]:
    """Depth-first pre-order walk starting with ``node`` itself."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(tuple(declaration_children(current))))


__all__ = [
    "Identifier",
    "LiteralName",
    "QualifiedName",
    "EntityName",
    "MemberName",
    "TypeReference",
    "Parameter",
    "FunctionType",
    "KeywordType",
    "OpaqueType",
    "TypeNode",
    "PropertySignature",
    "MethodSignature",
    "OpaqueMember",
    "Member",
    "InterfaceDeclaration",
    "ModuleDeclaration",
    "OpaqueStatement",
    "Statement",
    "SourceFile",
    "Node",
    "Declaration",
    "declaration_children",
    "walk_declarations",
]
