# ruff: noqa: T201

from __future__ import annotations

import argparse
import json
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from capmap.app import (
    filter_catalogue,
    load_catalogue,
    unassigned_artifact_ids,
    visible_artifact_ids,
)
from capmap.config import ConfigurationError, configure_logging, resolve_log_level
from capmap.domain.filtering import FilterSelection

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from types import FrameType

    from capmap.domain.filtering import FilterableArtifacts

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Filter a capability-map catalogue snapshot")
    parser.add_argument(
        "--snapshot",
        type=str,
        help="Path to the catalogue snapshot JSON (defaults to CAPMAP_SNAPSHOT_PATH)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    filter_parser = subparsers.add_parser("filter", help="Print the visible artifacts")
    _add_domain_arguments(filter_parser)
    filter_parser.add_argument(
        "--creator",
        action="append",
        default=[],
        help="Creator id to keep (repeatable)",
    )
    filter_parser.add_argument(
        "--no-hierarchy",
        action="store_true",
        help="Do not add ancestors of visible capabilities",
    )
    filter_parser.add_argument(
        "--json",
        action="store_true",
        help="Print visible artifact ids per collection as JSON",
    )

    visible = subparsers.add_parser("visible-ids", help="Print ids visible under a domain filter")
    _add_domain_arguments(visible)

    subparsers.add_parser("unassigned", help="Print ids that belong to no business domain")

    return parser.parse_args(list(argv))


def _add_domain_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--domain",
        action="append",
        default=[],
        help="Business domain id to keep (repeatable)",
    )
    parser.add_argument(
        "--unassigned",
        action="store_true",
        help="Also keep artifacts that belong to no business domain",
    )


def _selection_from_args(args: argparse.Namespace) -> FilterSelection:
    return FilterSelection.build(
        creator_ids=getattr(args, "creator", ()),
        domain_ids=args.domain,
        include_unassigned=args.unassigned,
    )


def _print_ids(ids: Iterable[str]) -> None:
    for artifact_id in sorted(ids):
        print(artifact_id)


def _print_artifacts(artifacts: FilterableArtifacts, *, as_json: bool) -> None:
    if as_json:
        document = {
            str(kind): [item.id for item in items] for kind, items in artifacts.items()
        }
        print(json.dumps(document, indent=2))
        return

    for kind, items in artifacts.items():
        print(f"{kind} ({len(items)})")
        for item in items:
            print(f"  {item.id}  {item.name}")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
        configure_logging(level=resolve_log_level(verbose=parsed_args.verbose))
        selection = None
        if parsed_args.command in {"filter", "visible-ids"}:
            selection = _selection_from_args(parsed_args)
        snapshot = load_catalogue(parsed_args.snapshot)
    except (ValueError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)
    except Exception:
        log.exception("Failed to load catalogue snapshot")
        sys.exit(1)

    try:
        if parsed_args.command == "filter":
            result = filter_catalogue(
                selection or FilterSelection(),
                snapshot=snapshot,
                preserve_hierarchy=not parsed_args.no_hierarchy,
            )
            _print_artifacts(result, as_json=parsed_args.json)
        elif parsed_args.command == "visible-ids":
            _print_ids(visible_artifact_ids(selection or FilterSelection(), snapshot=snapshot))
        elif parsed_args.command == "unassigned":
            _print_ids(unassigned_artifact_ids(snapshot=snapshot))
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except Exception:
        log.exception("Fatal error during filtering")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
