"""
Command-line matching against a local or remote internship dataset.

Examples:
    internmatch --skills "python, sql" --location Bangalore
    internmatch --profile config/profile.yaml --url https://example.com/dataset.json --report
    internmatch --dataset data/dataset.json --education B.Tech --export top10.json
"""
from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path

from internmatch import config
from internmatch.engine import Matcher
from internmatch.errors import InternMatchError
from internmatch.export import build_report, write_report, write_results
from internmatch.log import configure as configure_logging, get_logger
from internmatch.models import ScoredResult, UserProfile

log = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="internmatch",
        description="Rank internships by fit to your skills, education, sector and location",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--dataset", "-d", help="Path to a JSON dataset")
    source.add_argument("--url", help="URL of a JSON dataset")
    parser.add_argument("--profile", "-p", help="Saved profile (YAML)")
    parser.add_argument("--skills", "-s", help="Comma-separated skills")
    parser.add_argument("--education", "-e", help="Education, e.g. B.Tech")
    parser.add_argument("--sector", help="Sector, e.g. IT Services")
    parser.add_argument("--location", "-l", help="Location or Remote")
    parser.add_argument("--top", "-t", type=int, default=5, help="Matches to print")
    parser.add_argument("--limit", "-n", type=int, default=None, help="Max ranked results kept")
    parser.add_argument("--export", "-o", help="Write top results to this JSON file")
    parser.add_argument("--report", action="store_true", help="Write a Markdown report to reports/")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING ... (default: $LOG_LEVEL or INFO)")
    parser.add_argument("--log-dir", help="Directory for the daily log file; empty string disables it")
    return parser


def resolve_profile(args: argparse.Namespace) -> UserProfile:
    """Saved profile first, then command-line fields on top of it."""
    profile = config.load_profile(Path(args.profile) if args.profile else None)
    overrides = UserProfile.from_dict({
        "skills": args.skills,
        "education": args.education,
        "sector": args.sector,
        "location": args.location,
    })
    changes = {}
    if args.skills is not None:
        changes["skills"] = overrides.skills
    for name in ("education", "sector", "location"):
        if getattr(args, name) is not None:
            changes[name] = getattr(overrides, name)
    return replace(profile, **changes)


def _print_results(results: list[ScoredResult], top: int) -> None:
    if not results:
        print("No internships matched.")
        return
    for i, s in enumerate(results[:top], 1):
        r = s.record
        b = s.breakdown
        print(f"{i:>2}. {r.title} @ {r.company} ({r.location})  {s.percent}%")
        print(
            f"    skills {b.skills:.0%} | location {b.location:.0%} | "
            f"education {b.education:.0%} | sector {b.sector:.0%}"
        )


def run(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.log_level or args.log_dir is not None:
        configure_logging(
            args.log_level,
            Path(args.log_dir) if args.log_dir else None,
            to_file=args.log_dir != "",
        )
    try:
        matcher = Matcher(
            weights=config.load_weights(),
            limit=args.limit if args.limit is not None else config.result_limit(),
        )
        url = args.url or (None if args.dataset else config.dataset_url())
        if url:
            matcher.load_url(url)
        else:
            matcher.load_file(args.dataset or config.dataset_path())

        profile = resolve_profile(args)
        results = matcher.find(profile)
    except InternMatchError as exc:
        log.error("%s", exc)
        return 1

    _print_results(results, args.top)
    if args.export:
        write_results(results, args.export)
    if args.report:
        write_report(build_report(results, profile))
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
