from __future__ import annotations

import yaml

from crdpmap.services.exporter import ExportDocument, build_export, export_data
from crdpmap.services.extractor import extract


def test_export_document(protocol_tree):
    domains, schema = extract(protocol_tree)
    doc = build_export(schema, domains, "crdp.d.ts")
    assert isinstance(doc, ExportDocument)
    assert doc.domains == ["Network", "Page"]
    assert [e.key for e in doc.events] == list(schema.events)

    reload = doc.commands[-1]
    assert reload.key == "Page.reload"
    assert reload.params == "Page.ReloadRequest"
    assert reload.weak_params is True
    assert reload.returns is None


def test_export_data_is_plain(protocol_tree):
    domains, schema = extract(protocol_tree)
    data = export_data(build_export(schema, domains, "crdp.d.ts"))
    assert data["source"] == "crdp.d.ts"
    assert data["events"][0] == {
        "key": "Network.requestWillBeSent",
        "domain": "Network",
        "event": "requestWillBeSent",
        "payload": "Network.RequestWillBeSentEvent",
    }
    # yaml must accept it without custom representers
    assert yaml.safe_load(yaml.safe_dump(data)) == data
