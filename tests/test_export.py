import json

from internmatch.export import build_report, results_to_json, write_report, write_results
from internmatch.models import UserProfile


def _results(matcher):
    return matcher.find(UserProfile(skills=("react",), education="B.Tech", sector="IT"))


def test_results_to_json_shape(matcher):
    data = json.loads(results_to_json(_results(matcher)))
    assert len(data) == 5
    top = data[0]
    assert top["id"] == 2
    assert top["title"] == "Remote Dev"
    assert top["skills"] == ["React"]
    assert set(top["breakdown"]) == {"skills", "location", "education", "sector"}
    assert top["breakdown"]["skills"] == 1.0
    assert top["score"] > 1.0


def test_results_to_json_limit(matcher):
    assert len(json.loads(results_to_json(_results(matcher), limit=2))) == 2
    assert json.loads(results_to_json([])) == []


def test_write_results(tmp_path, matcher):
    path = write_results(_results(matcher), tmp_path / "out" / "matches.json")
    assert path.exists()
    assert json.loads(path.read_text(encoding="utf-8"))[0]["id"] == 2


def test_build_report(matcher):
    profile = UserProfile(skills=("react",), education="B.Tech", sector="IT")
    report = build_report(matcher.find(profile), profile)
    assert "**Skills:** react" in report
    assert "### Remote Dev @ Unknown" in report
    assert "skills 100%, location 100%, education 100%, sector 100%" in report
    assert "## Quick Reference" in report


def test_build_report_without_results():
    report = build_report([], UserProfile(location="Pune"))
    assert "No internships" in report
    assert "Quick Reference" not in report


def test_write_report(tmp_path):
    path = write_report("# hi", directory=tmp_path)
    assert path.name.startswith("matches_")
    assert path.read_text(encoding="utf-8") == "# hi"
