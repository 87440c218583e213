"""Serialize ranked results: JSON download and a Markdown summary report."""
from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Sequence

from internmatch.config import REPORTS_DIR
from internmatch.log import get_logger
from internmatch.models import ScoredResult, UserProfile

log = get_logger(__name__)

EXPORT_LIMIT = 10
EXPORT_FILENAME = "matched_internships.json"


def _pct(value: float) -> str:
    return f"{round(value * 100)}%"


def _clip(text: str, width: int) -> str:
    return text[:width] + ("…" if len(text) > width else "")


def results_to_json(results: Sequence[ScoredResult], limit: int = EXPORT_LIMIT) -> str:
    return json.dumps([r.to_dict() for r in results[:limit]], indent=2, ensure_ascii=False)


def write_results(
    results: Sequence[ScoredResult],
    path: Path | str | None = None,
    limit: int = EXPORT_LIMIT,
) -> Path:
    path = Path(path) if path else REPORTS_DIR / EXPORT_FILENAME
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(results_to_json(results, limit), encoding="utf-8")
    log.info("Exported %d result(s) → %s", min(limit, len(results)), path)
    return path


def _describe_profile(profile: UserProfile) -> list[str]:
    lines = []
    if profile.skills:
        lines.append(f"- **Skills:** {', '.join(profile.skills)}")
    for label, value in (("Education", profile.education), ("Sector", profile.sector), ("Location", profile.location)):
        if value:
            lines.append(f"- **{label}:** {value}")
    return lines


def build_report(results: Sequence[ScoredResult], profile: UserProfile, top: int = 5) -> str:
    date = datetime.now(timezone.utc).strftime("%Y-%m-%d")
    lines: list[str] = [f"# Internship Matches — {date}", ""]
    lines.extend(_describe_profile(profile))
    lines.append("")
    lines.append(f"**{len(results)}** internships ranked")
    lines.append("")

    if not results:
        lines.append("_No internships in the current dataset._")
        log.info("Built report: no results")
        return "\n".join(lines)

    lines.append("## Top Matches")
    lines.append("")
    for s in results[:top]:
        r = s.record
        b = s.breakdown
        lines.append(f"### {r.title} @ {r.company}")
        lines.append(f"- **Score:** {s.percent}%")
        lines.append(f"- **Location:** {r.location} | **Duration:** {r.duration or '—'}")
        lines.append(f"- **Stipend:** {r.stipend or '—'}")
        if r.skills:
            lines.append(f"- **Skills:** {', '.join(r.skills[:8])}")
        lines.append(
            f"- **Breakdown:** skills {_pct(b.skills)}, location {_pct(b.location)}, "
            f"education {_pct(b.education)}, sector {_pct(b.sector)}"
        )
        if r.description:
            lines.append("")
            lines.append(_clip(r.description, 280))
        lines.append("")

    lines.append("---")
    lines.append("")
    lines.append("## Quick Reference")
    lines.append("")
    lines.append("| # | Internship | Company | Location | Score |")
    lines.append("|--:|------------|---------|----------|------:|")
    for i, s in enumerate(results[:20], 1):
        r = s.record
        lines.append(f"| {i} | {_clip(r.title, 40)} | {_clip(r.company, 22)} | {_clip(r.location, 18)} | {s.percent}% |")
    lines.append("")

    log.info("Built report: %d result(s)", len(results))
    return "\n".join(lines)


def write_report(content: str, directory: Path | None = None) -> Path:
    directory = directory or REPORTS_DIR
    directory.mkdir(parents=True, exist_ok=True)
    date = datetime.now(timezone.utc).strftime("%Y-%m-%d")
    path = directory / f"matches_{date}.md"
    path.write_text(content, encoding="utf-8")
    log.info("Report written → %s", path)
    return path
