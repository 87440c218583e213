"""Vocabulary lists and the token -> record-id inverted index."""
from __future__ import annotations

from typing import Iterable

from internmatch.log import get_logger
from internmatch.models import Record, RecordId, Vocabulary
from internmatch.normalize import normalize

log = get_logger(__name__)

InvertedIndex = dict[str, frozenset]

SUGGEST_DEFAULT = 30
SUGGEST_LIMIT = 40


def _sorted_distinct(values: Iterable[str]) -> tuple[str, ...]:
    distinct = {v for v in values if v}
    return tuple(sorted(distinct, key=lambda v: (v.casefold(), v)))


def build_vocabulary(records: Iterable[Record]) -> Vocabulary:
    records = list(records)
    return Vocabulary(
        educations=_sorted_distinct(r.education for r in records),
        sectors=_sorted_distinct(r.sector for r in records),
        locations=_sorted_distinct(r.location for r in records),
        skills=_sorted_distinct(s for r in records for s in r.skills),
    )


def build_index(records: Iterable[Record]) -> InvertedIndex:
    """Map each normalized skill/education/location/sector to the ids carrying it."""
    index: dict[str, set[RecordId]] = {}
    for r in records:
        for value in (*r.skills, r.education, r.location, r.sector):
            key = normalize(value)
            if key:
                index.setdefault(key, set()).add(r.id)
    log.debug("Built inverted index with %d token(s)", len(index))
    return {k: frozenset(v) for k, v in index.items()}


def lookup(index: InvertedIndex, token: str) -> frozenset:
    return index.get(normalize(token), frozenset())


def suggest(vocabulary: Vocabulary, category: str, text: str = "", limit: int = SUGGEST_LIMIT) -> list[str]:
    """Autocomplete candidates for a partially typed value.

    Education matches on prefix so "b" finds "B.Tech" and "BE"; the other
    categories match anywhere in the value.
    """
    values = vocabulary.category(category)
    q = normalize(text)
    if not q:
        return list(values[:SUGGEST_DEFAULT])
    if category == "educations":
        hits = [v for v in values if normalize(v).startswith(q)]
    else:
        hits = [v for v in values if q in normalize(v)]
    return hits[:limit]
