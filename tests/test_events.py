from __future__ import annotations

import pytest

from builders import STRING, fn, interface, listener, literal_prop, method, namespace, prop, ref, source
from crdpmap.domain import EventDescriptor, MissingDeclaration, TypeRef, UnsupportedShape
from crdpmap.domain.nodes import LiteralName, MethodSignature
from crdpmap.services.events import event_name_for, extract_events


def test_network_example(protocol_tree):
    events = extract_events(protocol_tree, "Network")
    assert events == [EventDescriptor("Network", "requestWillBeSent", TypeRef("Network", "RequestWillBeSentEvent"))]
    assert events[0].key == "Network.requestWillBeSent"


def test_payloadless_listener(protocol_tree):
    events = extract_events(protocol_tree, "Page")
    assert [e.key for e in events] == ["Page.frameNavigated", "Page.loadEventFired"]
    assert events[1].payload is None


@pytest.mark.parametrize(
    "method_name, event",
    [("onRequestWillBeSent", "requestWillBeSent"), ("onX", "x"), ("onDOMContentLoaded", "dOMContentLoaded")],
)
def test_event_name_lowercases_first_letter_only(method_name, event):
    assert event_name_for(method_name) == event


@pytest.mark.parametrize("bad", ["on", "onload", "handleEvent", "On"])
def test_bad_listener_names(bad):
    tree = source(interface("PageClient", listener(bad)))
    with pytest.raises(UnsupportedShape, match="bad listener method name"):
        extract_events(tree, "Page")


def test_non_method_members_skipped():
    tree = source(interface("PageClient", prop("enabled"), literal_prop("x"), listener("onLoad")))
    assert [e.event for e in extract_events(tree, "Page")] == ["load"]


def test_non_identifier_method_name_rejected():
    bad = MethodSignature(LiteralName("'onQuoted'"), (), None)
    with pytest.raises(UnsupportedShape, match="bad event method name"):
        extract_events(source(interface("PageClient", bad)), "Page")


def test_missing_client_interface():
    with pytest.raises(MissingDeclaration, match="events interface not found for domain 'Page'"):
        extract_events(source(), "Page")


def test_client_must_be_interface():
    with pytest.raises(MissingDeclaration):
        extract_events(source(namespace("PageClient")), "Page")


def test_two_listener_arguments_name_count():
    tree = source(interface("PageClient", method("onLoad", fn(), fn())))
    with pytest.raises(UnsupportedShape, match="found 2 parameters passed in PageClient.onLoad"):
        extract_events(tree, "Page")


def test_payload_must_be_qualified():
    tree = source(interface("PageClient", listener("onLoad", ref("LoadEvent"))))
    with pytest.raises(UnsupportedShape, match="unexpected type node"):
        extract_events(tree, "Page")


def test_payload_must_be_reference():
    tree = source(interface("PageClient", listener("onLoad", STRING)))
    with pytest.raises(UnsupportedShape, match="unexpected param"):
        extract_events(tree, "Page")


def test_duplicate_listener_names_are_both_emitted():
    # the extractor reports both; ExtractedSchema decides which one wins
    tree = source(interface("PageClient", listener("onLoad", ref("Page.A")), listener("onLoad", ref("Page.B"))))
    events = extract_events(tree, "Page")
    assert [e.payload.type for e in events] == ["A", "B"]
