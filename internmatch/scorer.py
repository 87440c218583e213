"""Score and rank internship records against a user profile.

Four weighted factors (skills, location, education, sector) plus a tiny
deterministic tie-break derived from the profile skills and the record id.
"""
from __future__ import annotations

from typing import Iterable, Mapping, Sequence

from internmatch.config import DEFAULT_WEIGHTS
from internmatch.log import get_logger
from internmatch.models import Breakdown, Record, RecordId, ScoredResult, UserProfile
from internmatch.normalize import normalize

log = get_logger(__name__)

_TIE_MODULUS = 100_000
# max tie-break is 99 / 10_000 = 0.0099
_TIE_BUCKETS = 100
_TIE_SCALE = 10_000


def expand_token(token: str, vocabulary: Iterable[str]) -> set[str]:
    """Vocabulary entries related to *token* by substring in either direction.

    The raw token itself is always part of the result.
    """
    n = normalize(token)
    out = {token}
    if not n:
        return out
    for v in vocabulary:
        nv = normalize(v)
        if nv and (n in nv or nv in n):
            out.add(v)
    return out


def expand_skills(skills: Iterable[str], vocabulary: Sequence[str]) -> set[str]:
    """Normalized union of every profile token's expansion; blanks dropped."""
    expanded: set[str] = set()
    for tok in skills:
        if not normalize(tok):
            continue
        expanded.update(normalize(x) for x in expand_token(tok, vocabulary))
    expanded.discard("")
    return expanded


def skills_score(record_skills: Sequence[str], candidates: set[str]) -> float:
    if not candidates:
        return 0.0
    matches = 0
    for skill in record_skills:
        ds = normalize(skill)
        if any(ds in c or c in ds for c in candidates):
            matches += 1
    return min(1.0, matches / max(1, len(record_skills)))


def location_score(record_location: str, profile_location: str) -> float:
    dl = normalize(record_location)
    ul = normalize(profile_location)
    if not ul or dl == "remote" or ul == "remote" or dl == ul:
        return 1.0
    if ul in dl or dl in ul:
        return 0.8
    return 0.0


def education_score(record_education: str, profile_education: str) -> float:
    ue = normalize(profile_education)
    if not ue:
        return 0.0
    return 1.0 if normalize(record_education).startswith(ue) else 0.0


def sector_score(record_sector: str, profile_sector: str) -> float:
    us = normalize(profile_sector)
    if not us:
        return 0.0
    ds = normalize(record_sector)
    if ds == us:
        return 1.0
    if us in ds:
        return 0.75
    return 0.0


def tie_break(skills: Sequence[str], record_id: RecordId) -> float:
    """Small reproducible offset in [0, 0.0099] for (profile skills, record id)."""
    seed = "|".join(normalize(s) for s in skills if normalize(s)) + "::" + str(record_id)
    h = 0
    for ch in seed:
        h = (h * 31 + ord(ch)) % _TIE_MODULUS
    return (h % _TIE_BUCKETS) / _TIE_SCALE


def score_record(
    record: Record,
    profile: UserProfile,
    candidates: set[str],
    weights: Mapping[str, float] = DEFAULT_WEIGHTS,
) -> ScoredResult:
    breakdown = Breakdown(
        skills=skills_score(record.skills, candidates),
        location=location_score(record.location, profile.location),
        education=education_score(record.education, profile.education),
        sector=sector_score(record.sector, profile.sector),
    )
    total = (
        breakdown.skills * weights["skills"]
        + breakdown.location * weights["location"]
        + breakdown.education * weights["education"]
        + breakdown.sector * weights["sector"]
        + tie_break(profile.skills, record.id)
    )
    return ScoredResult(record=record, score=total, breakdown=breakdown)


def score_records(
    profile: UserProfile,
    records: Sequence[Record],
    skill_vocabulary: Sequence[str],
    weights: Mapping[str, float] = DEFAULT_WEIGHTS,
) -> list[ScoredResult]:
    """One result per record, in input order."""
    candidates = expand_skills(profile.skills, skill_vocabulary)
    log.debug("Expanded %d profile skill(s) into %d candidate(s)", len(profile.skills), len(candidates))
    return [score_record(r, profile, candidates, weights) for r in records]


def rank(results: Iterable[ScoredResult]) -> list[ScoredResult]:
    return sorted(results, key=lambda s: s.score, reverse=True)


def score_and_rank(
    profile: UserProfile,
    records: Sequence[Record],
    skill_vocabulary: Sequence[str],
    weights: Mapping[str, float] = DEFAULT_WEIGHTS,
    limit: int | None = None,
) -> list[ScoredResult]:
    ranked = rank(score_records(profile, records, skill_vocabulary, weights))
    if limit is not None:
        ranked = ranked[:limit]
    log.info("Scored %d record(s) → returning %d", len(records), len(ranked))
    return ranked
