"""CLI entry point for the applicant screening engine."""

import argparse
import logging
import sys

from src.core.config import Settings
from src.core.loader import find_job, load_job_openings
from src.core.schemas import CandidateProfile, JobOpening
from src.pipeline.completion import calculate_profile_completion
from src.pipeline.criteria import FilterCriteria
from src.pipeline.exporter import format_applied_date
from src.pipeline.orchestrator import ScreeningResult, export_results_csv, screen_all_jobs


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        default="config/settings.yaml",
        help="Path to settings YAML file (default: config/settings.yaml)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Applicant screening - filter job applicants and export them to CSV",
    )
    subparsers = parser.add_subparsers(dest="command")

    # --- filter subcommand ---
    filter_parser = subparsers.add_parser("filter", help="Filter applicants of one or all jobs")
    filter_parser.add_argument(
        "--data",
        required=True,
        help="Path to the applications JSON/YAML file",
    )
    filter_parser.add_argument(
        "--job",
        help="Only screen this job (id or title)",
    )
    filter_parser.add_argument("--search", default="", help="Match name or email")
    filter_parser.add_argument(
        "--status",
        default="all",
        help="all, pending, accepted or rejected (default: all)",
    )
    filter_parser.add_argument(
        "--skill",
        action="append",
        default=[],
        help="Skill to match (repeatable, any one suffices)",
    )
    filter_parser.add_argument(
        "--project-type",
        action="append",
        default=[],
        help="Project type to match (repeatable, any one suffices)",
    )
    filter_parser.add_argument("--min-exp", default="", help="Minimum years of experience")
    filter_parser.add_argument("--max-exp", default="", help="Maximum years of experience")
    filter_parser.add_argument(
        "--export",
        choices=["csv"],
        help="Export matching applicants to format (csv)",
    )
    _add_common_arguments(filter_parser)

    # --- completion subcommand ---
    completion_parser = subparsers.add_parser(
        "completion",
        help="Show profile completion for every applicant",
    )
    completion_parser.add_argument(
        "--data",
        required=True,
        help="Path to the applications JSON/YAML file",
    )
    _add_common_arguments(completion_parser)

    # --- tags subcommand ---
    tags_parser = subparsers.add_parser(
        "tags",
        help="List the skill and project-type tags offered by the filter panel",
    )
    _add_common_arguments(tags_parser)

    args = parser.parse_args(argv)
    if args.command is None:
        parser.error("a command is required: filter, completion or tags")
    return args


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def criteria_from_args(args: argparse.Namespace) -> FilterCriteria:
    return FilterCriteria(
        search_term=args.search,
        status_filter=args.status,
        selected_skills=tuple(args.skill),
        selected_project_types=tuple(args.project_type),
        min_experience=args.min_exp,
        max_experience=args.max_exp,
    )


def print_result(result: ScreeningResult) -> None:
    print(f"\n{result.job.title} [{result.job.job_id}]: {result.description}")
    s = result.summary
    if s.total:
        print(f"  Pending: {s.pending}, Accepted: {s.accepted}, Rejected: {s.rejected}")
    for a in result.matched:
        p = a.profile
        print(
            f"  - {p.name or 'N/A'} <{p.email or 'N/A'}> {a.status}, "
            f"{p.experience_years} yrs, applied {format_applied_date(a.applied_at)}"
        )


def cmd_filter(args: argparse.Namespace, settings: Settings) -> None:
    """Handle filter subcommand."""
    jobs = load_job_openings(args.data)
    if args.job:
        jobs = [find_job(jobs, args.job)]

    criteria = criteria_from_args(args)
    print(f"Active filters: {criteria.active_filter_count()}")

    results = screen_all_jobs(jobs, criteria, settings)
    for r in results:
        print_result(r)

    if args.export == "csv":
        paths = export_results_csv(results, settings)
        if not paths:
            print("\nNo applicants to export")
        for path in paths:
            print(f"\nExported to {path}")


def cmd_completion(args: argparse.Namespace) -> None:
    """Handle completion subcommand."""
    jobs = load_job_openings(args.data)
    for key, profile in _distinct_profiles(jobs):
        completion = calculate_profile_completion(profile)
        print(f"{profile.name or key}: {completion.percentage}% "
              f"({completion.completed}/{completion.total} complete)")
        if completion.missing:
            print(f"  Missing: {', '.join(completion.missing)}")


def cmd_tags(settings: Settings) -> None:
    """Handle tags subcommand."""
    print("Skills:")
    for tag in settings.filters.skill_tags:
        print(f"  {tag}")
    print("Project types:")
    for tag in settings.filters.project_type_tags:
        print(f"  {tag}")


def _distinct_profiles(jobs: list[JobOpening]) -> list[tuple[str, CandidateProfile]]:
    """Profiles of all applicants, once per candidate (keyed by email, else applicant id)."""
    seen: set[str] = set()
    profiles: list[tuple[str, CandidateProfile]] = []
    for job in jobs:
        for a in job.applicants:
            key = a.profile.email.lower() or a.applicant_id
            if key not in seen:
                seen.add(key)
                profiles.append((key, a.profile))
    return profiles


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    setup_logging(args.verbose)

    try:
        settings = Settings.from_yaml(args.config)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        if args.command == "completion":
            cmd_completion(args)
        elif args.command == "tags":
            cmd_tags(settings)
        else:
            cmd_filter(args, settings)
    except (FileNotFoundError, LookupError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
