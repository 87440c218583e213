import json

import pytest

from internmatch.cli import run

from conftest import SAMPLE


@pytest.fixture
def dataset_file(tmp_path):
    p = tmp_path / "dataset.json"
    p.write_text(json.dumps(SAMPLE), encoding="utf-8")
    return p


@pytest.fixture(autouse=True)
def _no_env_dataset(monkeypatch):
    monkeypatch.delenv("INTERNMATCH_DATASET_URL", raising=False)
    monkeypatch.delenv("INTERNMATCH_DATASET_PATH", raising=False)


def test_cli_prints_ranked_matches(dataset_file, tmp_path, capsys):
    out = tmp_path / "top.json"
    code = run([
        "--dataset", str(dataset_file), "--profile", str(tmp_path / "none.yaml"),
        "--skills", "react", "--education", "B.Tech", "--sector", "IT",
        "--export", str(out),
    ])
    assert code == 0
    printed = capsys.readouterr().out
    assert printed.index("Remote Dev") < printed.index("Dev Intern @")
    assert [r["id"] for r in json.loads(out.read_text(encoding="utf-8"))] == [2, 1]


def test_cli_profile_file_with_overrides(dataset_file, tmp_path, capsys):
    profile = tmp_path / "profile.yaml"
    profile.write_text("skills: [node]\nlocation: Bangalore\n", encoding="utf-8")
    code = run(["--dataset", str(dataset_file), "--profile", str(profile), "--location", "", "--top", "1"])
    assert code == 0
    assert "Dev Intern" in capsys.readouterr().out


def test_cli_empty_query_fails(dataset_file, tmp_path):
    assert run(["--dataset", str(dataset_file), "--profile", str(tmp_path / "none.yaml")]) == 1


def test_cli_missing_dataset_fails(tmp_path):
    assert run(["--dataset", str(tmp_path / "missing.json"), "--skills", "python"]) == 1
