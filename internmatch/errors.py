"""Exceptions raised by the matching engine and its loaders."""
from __future__ import annotations


class InternMatchError(Exception):
    """Base class for every error the package raises on purpose."""


class DatasetError(InternMatchError):
    """A dataset could not be fetched, read or parsed. Nothing was loaded."""


class EmptyQueryError(InternMatchError):
    """The profile has no skills, education, sector or location."""


class NotReadyError(InternMatchError):
    """A query arrived before any dataset was loaded."""


class ConfigError(InternMatchError):
    """A YAML configuration file is present but unusable."""
