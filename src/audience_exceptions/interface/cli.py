"""CLI commands for resolving and inspecting exception values."""

import argparse
import json
import sys
from pathlib import Path

from ..config.runtime import get_settings
from ..domain.exception_record import ExceptionRecord, decode_prior_value
from ..domain.options import select_options, to_options
from ..domain.summary import describe_whitelist
from ..observability import configure_logging
from ..reference.loader import ReferenceDataError
from ..services.exception_service import ExceptionService
from ..wiring import build_exception_service


def _build_service(reference: Path | None) -> ExceptionService:
    try:
        return build_exception_service(reference_path=str(reference) if reference else None)
    except ReferenceDataError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def _print_record(record: ExceptionRecord) -> None:
    print(json.dumps(record.model_dump(), indent=2))
    print(f"Whitelist: {describe_whitelist(record)}")


def resolve_geographic_command(args: argparse.Namespace) -> ExceptionRecord:
    svc = _build_service(args.reference)
    regions = to_options(svc.reference.world_regions)
    countries = to_options(svc.reference.countries)
    record = svc.update_geographic(
        include_regions=select_options(args.include_region, regions),
        exclude_regions=select_options(args.exclude_region, regions),
        include_countries=select_options(args.include_country, countries),
        exclude_countries=select_options(args.exclude_country, countries),
    )
    _print_record(record)
    return record


def resolve_usergroups_command(args: argparse.Namespace) -> ExceptionRecord:
    svc = _build_service(args.reference)
    groups = to_options(svc.reference.usergroups)
    record = svc.update_usergroups(
        include_groups=select_options(args.include, groups),
        exclude_groups=select_options(args.exclude, groups),
    )
    _print_record(record)
    return record


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(description="Resolve include/exclude exceptions into whitelists")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    reference_help = "Reference data JSON (default: REFERENCE_DATA_PATH or the bundled data/reference.json)"

    # Geographic command
    geo_parser = subparsers.add_parser("geographic", help="Resolve world region and country selections")
    geo_parser.add_argument("--reference", type=Path, default=None, help=reference_help)
    geo_parser.add_argument("--include-region", action="append", default=[], help="World region id to include")
    geo_parser.add_argument("--exclude-region", action="append", default=[], help="World region id to exclude")
    geo_parser.add_argument("--include-country", action="append", default=[], help="Country id to include")
    geo_parser.add_argument("--exclude-country", action="append", default=[], help="Country id to exclude")

    # Usergroups command
    ug_parser = subparsers.add_parser("usergroups", help="Resolve user group selections")
    ug_parser.add_argument("--reference", type=Path, default=None, help=reference_help)
    ug_parser.add_argument("--include", action="append", default=[], help="User group id to include")
    ug_parser.add_argument("--exclude", action="append", default=[], help="User group id to exclude")

    # Describe command
    describe_parser = subparsers.add_parser("describe", help="Summarize a persisted exception value")
    describe_parser.add_argument("--value", type=str, required=True, help="Serialized exception record")

    args = parser.parse_args(argv)
    configure_logging(get_settings().log_level)

    if args.command == "geographic":
        resolve_geographic_command(args)
    elif args.command == "usergroups":
        resolve_usergroups_command(args)
    elif args.command == "describe":
        record = decode_prior_value(args.value)
        print(f"Include: {', '.join(record.include) or '-'}")
        print(f"Exclude: {', '.join(record.exclude) or '-'}")
        print(f"Whitelist: {describe_whitelist(record)}")
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
