"""tree-sitter based .d.ts parsing."""

from __future__ import annotations

import pytest

from protocol_fixture import EXPECTED_OUTPUT
from crdpmap.adapters.typescript import TreeSitterSchemaProvider, parse_source
from crdpmap.domain import SchemaSyntaxError, TypeRef, UnsupportedShape
from crdpmap.domain.nodes import (
    FunctionType,
    InterfaceDeclaration,
    KeywordType,
    LiteralName,
    MethodSignature,
    ModuleDeclaration,
    OpaqueMember,
    OpaqueStatement,
    PropertySignature,
    QualifiedName,
    TypeReference,
)
from crdpmap.services.domains import find_first_declaration
from crdpmap.services.extractor import extract
from crdpmap.services.renderer import render
from crdpmap.services.resolver import resolve_type_name


def test_sample_renders_golden(sample_schema):
    tree = TreeSitterSchemaProvider().load(sample_schema)
    assert tree.path == str(sample_schema)
    assert render(extract(tree)[1]) == EXPECTED_OUTPUT


def test_namespaces_and_interfaces():
    tree = parse_source("export namespace Crdp { export interface A { x: string; } }\n")
    (crdp,) = tree.statements
    assert isinstance(crdp, ModuleDeclaration) and crdp.name.text == "Crdp"
    (iface,) = crdp.body
    assert isinstance(iface, InterfaceDeclaration) and iface.name.text == "A"


def test_dotted_namespace_becomes_nested_modules():
    tree = parse_source("declare namespace Crdp.Network { interface Event { id: string } }\n")
    outer = tree.statements[0]
    assert outer.name.text == "Crdp"
    inner = outer.body[0]
    assert isinstance(inner, ModuleDeclaration) and inner.name.text == "Network"
    assert find_first_declaration(tree, "Event") is inner.body[0]


def test_declare_global_block():
    tree = parse_source("declare global { interface CrdpClient { Page: PageClient; } }\nexport {}\n")
    glob = find_first_declaration(tree, "global")
    assert isinstance(glob, ModuleDeclaration)
    assert isinstance(find_first_declaration(glob, "CrdpClient"), InterfaceDeclaration)


def test_member_shapes():
    src = """
    interface PageCommands {
        enable: () => Promise<void>;
        'quoted': string;
        optionalFlag?: boolean;
        onLoad(listener: (params: Page.LoadEvent) => void): void;
        [key: string]: any;
    }
    """
    (iface,) = parse_source(src).statements
    enable, quoted, flag, on_load, index = iface.members

    assert isinstance(enable, PropertySignature) and enable.name.text == "enable"
    assert isinstance(enable.type, FunctionType)
    assert enable.type.parameters == ()
    wrapper = enable.type.type
    assert isinstance(wrapper, TypeReference) and wrapper.type_name.text == "Promise"
    (arg,) = wrapper.type_arguments
    assert isinstance(arg, KeywordType) and arg.keyword == "void"

    assert isinstance(quoted.name, LiteralName)
    assert flag.optional is True and enable.optional is False

    assert isinstance(on_load, MethodSignature)
    (param,) = on_load.parameters
    assert param.name == "listener"
    assert isinstance(param.type, FunctionType)
    payload = param.type.parameters[0].type
    assert resolve_type_name(payload, "onLoad") == TypeRef("Page", "LoadEvent")

    assert isinstance(index, OpaqueMember)


def test_comments_are_ignored():
    src = """
    // leading
    interface A {
        /** doc */
        x: string; // trailing
    }
    """
    (iface,) = parse_source(src).statements
    assert [m.name.text for m in iface.members] == ["x"]


def test_triple_qualified_reference_kept_for_resolver():
    (iface,) = parse_source("interface A { f: (p: Crdp.Network.Req) => Promise<void>; }").statements
    ref = iface.members[0].type.parameters[0].type
    assert isinstance(ref.type_name, QualifiedName)
    assert ref.type_name.parts == ("Crdp", "Network", "Req")
    with pytest.raises(UnsupportedShape, match="triple nested"):
        resolve_type_name(ref, "A.f")


def test_other_statements_are_opaque():
    tree = parse_source("type Id = string;\nenum Kind { A, B }\n")
    assert all(isinstance(s, OpaqueStatement) for s in tree.statements)


def test_syntax_error_reports_line():
    with pytest.raises(SchemaSyntaxError) as exc:
        parse_source("interface A {\n  x: string;\n  y: = ;\n}\n", "broken.d.ts")
    assert exc.value.path == "broken.d.ts"
    assert exc.value.line >= 1


def test_non_utf8_bytes_reported_as_syntax_error():
    with pytest.raises(SchemaSyntaxError) as exc:
        parse_source(b"interface CrdpClient { P\xff: X; }\n", "bad.d.ts")
    assert exc.value.path == "bad.d.ts"
    assert exc.value.line == 1
