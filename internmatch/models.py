"""Data models for internship postings, queries and scored results."""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Union

RecordId = Union[int, str]


@dataclass(frozen=True)
class Record:
    id: RecordId
    title: str = "Untitled"
    company: str = "Unknown"
    location: str = "Remote"
    sector: str = ""
    education: str = ""
    skills: tuple[str, ...] = ()
    description: str = ""
    stipend: str = ""
    duration: str = ""

    def to_dict(self) -> dict[str, Any]:
        d = asdict(self)
        d["skills"] = list(self.skills)
        return d


@dataclass(frozen=True)
class Vocabulary:
    """Distinct display values per category, sorted case-insensitively."""

    educations: tuple[str, ...] = ()
    sectors: tuple[str, ...] = ()
    locations: tuple[str, ...] = ()
    skills: tuple[str, ...] = ()

    def category(self, name: str) -> tuple[str, ...]:
        if name not in ("educations", "sectors", "locations", "skills"):
            raise KeyError(name)
        return getattr(self, name)

    def to_dict(self) -> dict[str, list[str]]:
        return {k: list(v) for k, v in asdict(self).items()}


@dataclass(frozen=True)
class UserProfile:
    skills: tuple[str, ...] = ()
    education: str = ""
    sector: str = ""
    location: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "UserProfile":
        data = data or {}
        raw_skills = data.get("skills") or []
        if isinstance(raw_skills, str):
            raw_skills = raw_skills.split(",")
        skills = tuple(str(s).strip() for s in raw_skills if s is not None and str(s).strip())
        return cls(
            skills=tuple(dict.fromkeys(skills)),
            education=str(data.get("education") or "").strip(),
            sector=str(data.get("sector") or "").strip(),
            location=str(data.get("location") or "").strip(),
        )

    def is_empty(self) -> bool:
        return not (
            any(s.strip() for s in self.skills)
            or self.education.strip()
            or self.sector.strip()
            or self.location.strip()
        )


@dataclass(frozen=True)
class Breakdown:
    skills: float = 0.0
    location: float = 0.0
    education: float = 0.0
    sector: float = 0.0


@dataclass(frozen=True)
class ScoredResult:
    record: Record
    score: float
    breakdown: Breakdown = field(default_factory=Breakdown)

    @property
    def percent(self) -> int:
        """Score as a display percentage; may read 100 for a score just above 1."""
        return round(self.score * 100)

    def to_dict(self) -> dict[str, Any]:
        d = self.record.to_dict()
        d["score"] = self.score
        d["breakdown"] = asdict(self.breakdown)
        return d
