"""Dataset snapshot and the controller that owns it.

The scoring functions are pure; ``Matcher`` is the single place holding
mutable state (the current ``Catalog``). A new catalog is built fully
before it replaces the old one, so a failed load never leaves a partial
dataset behind and a running query always sees one consistent snapshot.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Sequence

from internmatch import config
from internmatch.dataset import fetch_dataset, load_dataset, parse_dataset, read_dataset
from internmatch.errors import EmptyQueryError, NotReadyError
from internmatch.log import get_logger
from internmatch.models import Record, ScoredResult, UserProfile, Vocabulary
from internmatch.scorer import score_and_rank
from internmatch.vocabulary import InvertedIndex, build_index, build_vocabulary

log = get_logger(__name__)


@dataclass(frozen=True)
class Catalog:
    records: tuple[Record, ...]
    vocabulary: Vocabulary
    index: InvertedIndex = field(repr=False)
    source: str = ""

    def __len__(self) -> int:
        return len(self.records)


def build_catalog(records: Sequence[Record], source: str = "") -> Catalog:
    records = tuple(records)
    return Catalog(
        records=records,
        vocabulary=build_vocabulary(records),
        index=build_index(records),
        source=source,
    )


class Matcher:
    """Holds the current catalog and answers profile queries against it."""

    def __init__(
        self,
        weights: Mapping[str, float] | None = None,
        limit: int | None = None,
        max_records: int | None = None,
    ) -> None:
        self.weights = dict(weights or config.DEFAULT_WEIGHTS)
        self.limit = limit if limit is not None else config.DEFAULT_RESULT_LIMIT
        self.max_records = max_records
        self._catalog: Catalog | None = None

    @property
    def catalog(self) -> Catalog | None:
        return self._catalog

    @property
    def ready(self) -> bool:
        return self._catalog is not None

    def _swap(self, records: Sequence[Record], source: str) -> Catalog:
        catalog = build_catalog(records, source)
        self._catalog = catalog
        log.info(
            "Catalog ready from %s: %d record(s), %d skill(s), %d index token(s)",
            source or "memory", len(catalog), len(catalog.vocabulary.skills), len(catalog.index),
        )
        return catalog

    # Each loader raises DatasetError before _swap runs, keeping the old catalog.
    def load_records(self, raw: Sequence[Any], source: str = "memory") -> Catalog:
        return self._swap(load_dataset(raw), source)

    def load_text(self, text: str | bytes, source: str = "upload") -> Catalog:
        return self._swap(parse_dataset(text), source)

    def load_file(self, path: Path | str) -> Catalog:
        return self._swap(read_dataset(path), str(path))

    def load_url(self, url: str) -> Catalog:
        return self._swap(fetch_dataset(url), url)

    def find(self, profile: UserProfile, limit: int | None = None) -> list[ScoredResult]:
        catalog = self._catalog
        if catalog is None:
            raise NotReadyError("Dataset still loading. Wait a moment.")
        if profile.is_empty():
            raise EmptyQueryError("Enter at least skills or education or sector or location.")

        records: Sequence[Record] = catalog.records
        if self.max_records is not None and len(records) > self.max_records:
            log.warning("Scoring only the first %d of %d record(s)", self.max_records, len(records))
            records = records[: self.max_records]

        return score_and_rank(
            profile,
            records,
            catalog.vocabulary.skills,
            self.weights,
            limit=self.limit if limit is None else limit,
        )
