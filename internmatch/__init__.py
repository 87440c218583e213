"""Rank internship postings by fit to a user's skills, education, sector and location."""
from internmatch.engine import Catalog, Matcher, build_catalog
from internmatch.models import Breakdown, Record, ScoredResult, UserProfile, Vocabulary

__version__ = "0.1.0"

__all__ = [
    "Breakdown", "Catalog", "Matcher", "Record", "ScoredResult",
    "UserProfile", "Vocabulary", "build_catalog",
]
