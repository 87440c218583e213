"""Logging setup shared by the engine, CLI and UI.

Console output always goes to stdout. A daily file is added under
``INTERNMATCH_LOG_DIR`` (default ``logs/`` next to the package); setting the
variable to an empty string turns file logging off.
"""
from __future__ import annotations

import logging
import os
import sys
from datetime import date
from pathlib import Path

DEFAULT_LOG_DIR = Path(__file__).resolve().parent.parent / "logs"
_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s"
_DATE_FMT = "%Y-%m-%d %H:%M:%S"
# marks handlers we installed so configure() can replace them
_OWNED = "_internmatch_handler"
_configured = False


def get_logger(name: str) -> logging.Logger:
    """Return a named logger; root handlers are installed on the first call."""
    if not _configured:
        configure()
    return logging.getLogger(name)


def _log_dir_from_env() -> Path | None:
    raw = os.environ.get("INTERNMATCH_LOG_DIR")
    if raw is None:
        return DEFAULT_LOG_DIR
    return Path(raw) if raw.strip() else None


def log_file_for(log_dir: Path, day: date | None = None) -> Path:
    day = day or date.today()
    return log_dir / f"internmatch_{day:%Y-%m-%d}.log"


def configure(level: str | None = None, log_dir: Path | None = None, *, to_file: bool = True) -> None:
    """(Re)install the package handlers on the root logger.

    Handlers added by someone else (pytest, Streamlit) are left alone; when
    any are present only the level is applied.
    """
    global _configured
    _configured = True

    level_name = (level or os.environ.get("LOG_LEVEL", "INFO")).upper()
    lvl = getattr(logging, level_name, logging.INFO)

    root = logging.getLogger()
    root.setLevel(lvl)

    for h in [h for h in root.handlers if getattr(h, _OWNED, False)]:
        root.removeHandler(h)
        h.close()
    if root.handlers:
        return

    formatter = logging.Formatter(_FORMAT, datefmt=_DATE_FMT)
    console = logging.StreamHandler(sys.stdout)
    console.setLevel(lvl)
    console.setFormatter(formatter)
    setattr(console, _OWNED, True)
    root.addHandler(console)

    target = log_dir if log_dir is not None else _log_dir_from_env()
    if not to_file or target is None:
        return
    try:
        target.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_file_for(target), encoding="utf-8")
    except OSError as exc:
        root.warning("File logging disabled, cannot write to %s: %s", target, exc)
        return
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(formatter)
    setattr(fh, _OWNED, True)
    root.addHandler(fh)
