from __future__ import annotations

import pytest

from builders import interface, literal_prop, method, namespace, prop, ref, source
from crdpmap.domain import MissingDeclaration
from crdpmap.domain.nodes import InterfaceDeclaration, ModuleDeclaration
from crdpmap.services.domains import enumerate_domains, find_first_declaration


def test_domains_in_declaration_order(protocol_tree):
    assert enumerate_domains(protocol_tree) == ["Network", "Page"]


def test_only_identifier_properties_count():
    tree = source(
        interface(
            "CrdpClient",
            prop("Network", ref("NetworkClient")),
            method("close"),
            literal_prop("quoted"),
            prop("Page", ref("PageClient")),
        )
    )
    assert enumerate_domains(tree) == ["Network", "Page"]


def test_root_found_inside_namespace():
    tree = source(namespace("Crdp", interface("CrdpClient", prop("Runtime", ref("RuntimeClient")))))
    assert enumerate_domains(tree) == ["Runtime"]


def test_missing_root_client():
    with pytest.raises(MissingDeclaration) as exc:
        enumerate_domains(source(interface("Other")))
    assert exc.value.name == "CrdpClient"


def test_find_first_is_depth_first():
    inner = interface("Target")
    later = interface("Target")
    tree = source(namespace("A", namespace("B", inner)), later)
    assert find_first_declaration(tree, "Target") is inner


def test_find_first_includes_start_node_and_modules():
    ns = namespace("Network")
    assert find_first_declaration(ns, "Network") is ns
    found = find_first_declaration(source(ns), "Network")
    assert isinstance(found, ModuleDeclaration)


def test_find_first_returns_none():
    assert find_first_declaration(source(interface("A")), "B") is None
    assert isinstance(find_first_declaration(source(interface("A")), "A"), InterfaceDeclaration)
