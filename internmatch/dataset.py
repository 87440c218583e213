"""Turn loosely-shaped internship postings into canonical records.

Raw postings come from a JSON file, an uploaded JSON blob or an HTTP
endpoint. Field names vary between sources, so every canonical field is
read from a short list of aliases and falls back to a fixed default.
"""
from __future__ import annotations

import json
import re
from collections import Counter
from pathlib import Path
from typing import Any, Iterable, Mapping, Sequence

import requests

from internmatch.errors import DatasetError
from internmatch.log import get_logger
from internmatch.models import Record, RecordId
from internmatch.retry import retry

log = get_logger(__name__)

_SKILL_SPLIT_RE = re.compile(r"[,;|]")

# canonical field -> (aliases in lookup order, fallback)
FIELD_ALIASES: dict[str, tuple[tuple[str, ...], str]] = {
    "title": (("title", "job_title"), "Untitled"),
    "company": (("company", "org"), "Unknown"),
    "location": (("location", "city"), "Remote"),
    "sector": (("sector", "domain"), ""),
    "education": (("education", "min_education"), ""),
    "description": (("description", "summary"), ""),
    "stipend": (("stipend", "salary"), ""),
    "duration": (("duration",), ""),
}

# wrapper keys accepted when a file holds an object instead of a bare list
_CONTAINER_KEYS = ("data", "internships")


def _first_present(raw: Mapping[str, Any], keys: Iterable[str]) -> Any:
    for key in keys:
        value = raw.get(key)
        if value is not None:
            return value
    return None


def coerce_skills(value: Any) -> tuple[str, ...]:
    """Sequence -> as-is (stringified); delimited string -> split and trimmed."""
    if isinstance(value, str):
        return tuple(part.strip() for part in _SKILL_SPLIT_RE.split(value) if part.strip())
    if isinstance(value, (list, tuple)):
        return tuple(str(s) for s in value if s is not None)
    return ()


def _record_id(rid: Any, position: int) -> RecordId:
    if rid is None:
        return position
    if isinstance(rid, (int, str)):
        return rid
    log.warning("Entry %d has a non-scalar id %r; using it as text", position, rid)
    return json.dumps(rid, sort_keys=True, default=str)


def to_record(raw: Mapping[str, Any], position: int) -> Record:
    fields: dict[str, Any] = {}
    for name, (aliases, fallback) in FIELD_ALIASES.items():
        value = _first_present(raw, aliases)
        fields[name] = fallback if value is None else str(value)

    return Record(
        id=_record_id(raw.get("id"), position),
        skills=coerce_skills(raw.get("skills")),
        **fields,
    )


def load_dataset(raw: Sequence[Any]) -> list[Record]:
    """Map raw postings to records. Non-mapping entries are skipped and logged."""
    records: list[Record] = []
    skipped = 0
    for position, item in enumerate(raw):
        if not isinstance(item, Mapping):
            skipped += 1
            log.warning("Skipping entry %d: expected an object, got %s", position, type(item).__name__)
            continue
        records.append(to_record(item, position))

    dupes = [rid for rid, n in Counter(str(r.id) for r in records).items() if n > 1]
    if dupes:
        log.warning("Dataset has %d duplicate id(s), e.g. %s", len(dupes), dupes[0])

    log.info("Loaded %d record(s)%s", len(records), f", skipped {skipped}" if skipped else "")
    return records


def _unwrap(data: Any) -> list[Any]:
    if isinstance(data, list):
        return data
    if isinstance(data, dict):
        for key in _CONTAINER_KEYS:
            if isinstance(data.get(key), list):
                return data[key]
    raise DatasetError(f"Expected a JSON array of internships, got {type(data).__name__}")


def parse_dataset(text: str | bytes) -> list[Record]:
    """Parse JSON text (e.g. an uploaded file) into records."""
    try:
        data = json.loads(text)
    except (ValueError, UnicodeDecodeError) as exc:
        raise DatasetError(f"Invalid JSON file: {exc}") from exc
    return load_dataset(_unwrap(data))


def read_dataset(path: Path | str) -> list[Record]:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        raise DatasetError(f"Cannot read dataset {path}: {exc}") from exc
    log.info("Reading dataset from %s", path)
    return parse_dataset(text)


@retry(max_attempts=3, base_delay=1.0, retryable=(requests.ConnectionError, requests.Timeout))
def _get(url: str, timeout: float) -> requests.Response:
    r = requests.get(url, timeout=timeout)
    r.raise_for_status()
    return r


def fetch_dataset(url: str, timeout: float = 15.0) -> list[Record]:
    """Download a JSON dataset. Any failure surfaces as DatasetError."""
    try:
        r = _get(url, timeout)
    except requests.RequestException as exc:
        raise DatasetError(f"Failed to fetch dataset: {exc}") from exc
    log.info("Fetched dataset from %s (%d bytes)", url, len(r.content))
    return parse_dataset(r.content)
