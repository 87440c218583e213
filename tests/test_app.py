import json
from pathlib import Path

import pytest

pytest.importorskip("streamlit")

import app  # noqa: E402
from internmatch.engine import Matcher  # noqa: E402
from internmatch.errors import DatasetError  # noqa: E402

APP_PATH = str(Path(__file__).resolve().parent.parent / "app.py")


def _payload(*ids):
    return json.dumps([{"id": i, "skills": ["Go"]} for i in ids]).encode()


def test_upload_clears_initial_load_error():
    state = {"load_error": "Dataset load error: boom", "results": ["stale"]}
    m = Matcher()
    assert app.apply_upload(state, m, "f1", "d.json", _payload(1, 2))
    assert "load_error" not in state
    assert "results" not in state
    assert "2 internships" in state["notice"]
    assert len(m.catalog) == 2


def test_same_upload_is_loaded_once():
    state = {}
    m = Matcher()
    assert app.apply_upload(state, m, "f1", "d.json", _payload(1))
    first = m.catalog
    assert not app.apply_upload(state, m, "f1", "d.json", _payload(1))
    assert m.catalog is first


def test_changed_file_with_same_name_is_reloaded():
    state = {}
    m = Matcher()
    app.apply_upload(state, m, "f1", "d.json", _payload(1))
    assert app.apply_upload(state, m, "f2", "d.json", _payload(1, 2, 3))
    assert len(m.catalog) == 3


def test_bad_upload_keeps_catalog_and_error():
    state = {"load_error": "Dataset load error: boom"}
    m = Matcher()
    m.load_records([{"id": 1}])
    before = m.catalog
    with pytest.raises(DatasetError):
        app.apply_upload(state, m, "f1", "bad.json", b"{nope")
    assert m.catalog is before
    assert state["load_error"] == "Dataset load error: boom"


def test_initial_load_error_is_shown(monkeypatch, tmp_path):
    from streamlit.testing.v1 import AppTest

    monkeypatch.delenv("INTERNMATCH_DATASET_URL", raising=False)
    monkeypatch.setenv("INTERNMATCH_DATASET_PATH", str(tmp_path / "missing.json"))
    at = AppTest.from_file(APP_PATH).run()
    assert any("Dataset load error" in e.value for e in at.error)
