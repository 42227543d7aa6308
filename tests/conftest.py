# tests/conftest.py
from __future__ import annotations
import logging
from pathlib import Path

import pytest

from protocol_fixture import SAMPLE_DTS, build_protocol_tree


@pytest.fixture
def protocol_tree():
    return build_protocol_tree()


@pytest.fixture
def sample_schema(tmp_path) -> Path:
    p = tmp_path / "crdp.d.ts"
    p.write_text(SAMPLE_DTS, encoding="utf-8")
    return p


# ---------- фикстура CLI-приложения ----------
@pytest.fixture
def cli_app():
    from crdpmap.apps.cli.app import app

    return app


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    # никаких CRDPMAP_* из окружения разработчика
    for key in (
        "CRDPMAP_SCHEMA",
        "CRDPMAP_OUTPUT",
        "CRDPMAP_LOG_LEVEL",
        "CRDPMAP_LOG_FILE",
        "CRDPMAP_STRICT_DUPLICATES",
        "CRDPMAP_ROOT",
        "CRDPMAP_CLI_DEBUG",
    ):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _reset_logging():
    # setup_logging() detaches the package logger from root; undo that between tests
    yield
    logger = logging.getLogger("crdpmap")
    for h in logger.handlers:
        h.close()
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
