"""CLI commands for managing the ad catalog."""

import argparse
import json
import sys
from pathlib import Path

from .config.runtime import get_settings
from .errors import CatalogError
from .mcp.tools import catalog_list_payload, create_creative_payload, create_placement_payload
from .models import AdFormat
from .services.ad_service import AdService
from .services.seeding import DEFAULT_SAMPLE_CATALOG_PATH, seed_from_file
from .wiring import build_cache

_FORMATS = [f.value for f in AdFormat]


def _print_json(payload: dict) -> None:
    print(json.dumps(payload, indent=2))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="adserver", description="Manage the ad catalog")
    parser.add_argument("--db", type=str, default=None, help="SQLite catalog path (default: from settings)")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("init", help="Create the catalog tables")

    seed_parser = subparsers.add_parser("seed", help="Load placements and creatives from a JSON file")
    seed_parser.add_argument(
        "--file",
        type=Path,
        default=None,
        help=f"Path to catalog JSON (default: {DEFAULT_SAMPLE_CATALOG_PATH})",
    )

    placement_parser = subparsers.add_parser("add-placement", help="Insert one ad placement")
    placement_parser.add_argument("placement_id")
    placement_parser.add_argument("--format", choices=_FORMATS, required=True)
    placement_parser.add_argument("--width", type=int, required=True)
    placement_parser.add_argument("--height", type=int, required=True)

    creative_parser = subparsers.add_parser("add-creative", help="Insert one creative")
    creative_parser.add_argument("creative_id")
    creative_parser.add_argument("--format", choices=_FORMATS, required=True)
    creative_parser.add_argument("--width", type=int, required=True)
    creative_parser.add_argument("--height", type=int, required=True)
    creative_parser.add_argument("--price", type=float, required=True)
    creative_parser.add_argument("--content", type=str, default="")

    subparsers.add_parser("list", help="Print every placement and creative")
    subparsers.add_parser("serve", help="Run the MCP server (same as adserver-mcp)")

    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return 1

    settings = get_settings()
    if args.db:
        settings = settings.model_copy(update={"catalog_db_path": args.db})

    if args.command == "serve":
        from .main import run_server

        run_server(settings)
        return 0

    try:
        store, cache = build_cache(settings)
    except CatalogError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    try:
        service = AdService(cache)
        if args.command == "init":
            print(f"Catalog ready at {settings.catalog_db_path}")
        elif args.command == "seed":
            try:
                report = seed_from_file(cache, args.file)
            except (FileNotFoundError, ValueError) as exc:
                print(f"Error: {exc}", file=sys.stderr)
                return 1
            print(
                f"Inserted {report.inserted_placements} placements and "
                f"{report.inserted_creatives} creatives; skipped {len(report.skipped)} existing."
            )
        elif args.command == "add-placement":
            payload = create_placement_payload(service, args.placement_id, args.format, args.width, args.height)
            _print_json(payload)
            if not payload["ok"]:
                return 1
        elif args.command == "add-creative":
            payload = create_creative_payload(
                service,
                args.creative_id,
                args.format,
                args.width,
                args.height,
                args.content,
                args.price,
            )
            _print_json(payload)
            if not payload["ok"]:
                return 1
        elif args.command == "list":
            _print_json(catalog_list_payload(service))
    finally:
        store.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
