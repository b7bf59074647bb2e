#!/usr/bin/env python3
"""
Fintech Checker CLI — registry search, Excel export, and API server.

USAGE:
  python -m fincheck.cli search "kredit"                          # Free-text search
  python -m fincheck.cli search --company "PT A" --website .id    # Per-field filters
  python -m fincheck.cli search --from 2021-01-01 --to 2021-12-31 # Registration date range
  python -m fincheck.cli search                                   # Registry summary

  python -m fincheck.cli export "kredit" --output hasil.xlsx      # Excel report of a search

  python -m fincheck.cli serve                                    # Start API server
  python -m fincheck.cli serve --port 8000
"""
from __future__ import annotations

import argparse
import datetime as dt
import os
import sys
from pathlib import Path

# Ensure project root is on path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from fincheck.config import (
    DATA_FILE, EXPORTS_FOLDER, DISPLAY_COLUMNS, UNLISTED_TIP,
    VERDICT_IDLE, VERDICT_UNLISTED,
)
from fincheck.data.store import RecordStore
from fincheck.data.schemas import FilterSpec


def _iso_date(value: str) -> dt.date:
    try:
        return dt.date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date '{value}' (expected YYYY-MM-DD)")


def _build_filter(args) -> FilterSpec:
    """Build a FilterSpec from CLI args."""
    return FilterSpec(
        query=args.query or "",
        company=args.company or "",
        system=args.system or "",
        license=args.license or "",
        business_type=args.business_type or "",
        website=args.website or "",
        date_from=args.date_from,
        date_to=args.date_to,
    )


def _print_table(rows: list[dict], limit: int) -> None:
    widths = [6, 34, 28, 30, 18, 22, 30]
    header = "".join(f"{label[:w - 2]:<{w}}" for (_, _, label), w in zip(DISPLAY_COLUMNS, widths))
    print(header)
    print("-" * len(header))
    for row in rows[:limit]:
        cells = []
        for (key, _, _), w in zip(DISPLAY_COLUMNS, widths):
            val = row.get(key)
            text = "-" if val is None else str(val)
            cells.append(f"{text[:w - 2]:<{w}}")
        print("".join(cells))
    if len(rows) > limit:
        print(f"... {len(rows) - limit:,} more (use --limit to show more)")


def cmd_search(args):
    """Search the registry and print the verdict."""
    from fincheck.reports.search_report import generate_json

    store = RecordStore.from_file(args.data)
    spec = _build_filter(args)
    data = generate_json(store, spec)

    print("\n" + "=" * 70)
    print("  FINTECH CHECKER — REGISTRY SEARCH")
    print("=" * 70)

    if data["verdict"] == VERDICT_IDLE:
        print(f"\n  Total registered fintech companies: {data['total']:,}")
        print(f"  Registration dates: {data['date_range']}")
        print(f"  {data['message']}\n")
        return

    print(f"\n  Criteria: {data['criteria']}")
    if data["verdict"] == VERDICT_UNLISTED:
        print(f"\n  ❌ {data['message']}")
        print(f"  {UNLISTED_TIP}\n")
        return

    print(f"\n  Found {data['matched']:,} result(s) of {data['total']:,} records.\n")
    _print_table(data["rows"], args.limit)
    print()


def cmd_export(args):
    """Export a search result to Excel."""
    from fincheck.reports.search_report import generate_excel

    store = RecordStore.from_file(args.data)
    spec = _build_filter(args)

    output = Path(args.output) if args.output else EXPORTS_FOLDER / f"Registry_Search_{dt.datetime.now():%Y%m%d_%H%M%S}.xlsx"
    path = generate_excel(store, output, spec)
    result = store.search(spec)
    print(f"\n  {result.message}")
    print(f"  {result.matched:,} of {result.total:,} records → {path}\n")


def cmd_serve(args):
    """Start the API server."""
    import uvicorn
    print(f"\nStarting Fintech Checker API on port {args.port}...")
    uvicorn.run("fincheck.main:app", host="0.0.0.0", port=args.port, reload=args.reload,
                timeout_keep_alive=65)


def _add_filter_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("query", nargs="?", default="", help="Free-text search")
    parser.add_argument("--company", help="Nama Perusahaan contains")
    parser.add_argument("--system", help="Nama Sistem Elektronik contains")
    parser.add_argument("--license", help="Surat Tanda Berizin/Terdaftar contains")
    parser.add_argument("--business-type", dest="business_type", help="Jenis Usaha contains")
    parser.add_argument("--website", help="Alamat Website contains")
    parser.add_argument("--from", dest="date_from", type=_iso_date, help="Registered on/after (YYYY-MM-DD)")
    parser.add_argument("--to", dest="date_to", type=_iso_date, help="Registered on/before (YYYY-MM-DD)")
    parser.add_argument("--data", type=Path, default=DATA_FILE, help=f"Registry file (default {DATA_FILE})")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Fintech Checker — registry lookup; not found means possibly unlisted",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command")

    # search subcommand
    search_parser = subparsers.add_parser("search", help="Search the registry")
    _add_filter_args(search_parser)
    search_parser.add_argument("--limit", type=int, default=50, help="Max rows to print (default 50)")
    search_parser.set_defaults(func=cmd_search)

    # export subcommand
    export_parser = subparsers.add_parser("export", help="Export a search result to Excel")
    _add_filter_args(export_parser)
    export_parser.add_argument("--output", help="Output .xlsx path")
    export_parser.set_defaults(func=cmd_export)

    # serve subcommand
    serve_parser = subparsers.add_parser("serve", help="Start API server")
    serve_parser.add_argument("--port", type=int, default=int(os.environ.get("PORT", "8000")), help="Port (default 8000)")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    serve_parser.set_defaults(func=cmd_serve)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return

    args.func(args)


if __name__ == "__main__":
    main()
