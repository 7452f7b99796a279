# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Command-line interface for MISR identifiers and orbit listings.

Usage:
    # Canonical forms
    misrkit --encode path 4                 # P004
    misrkit --encode path 4 --no-prefix     # 004
    misrkit --decode orbit " o 68050 "      # O068050

    # Orbits per path from a local catalog table
    misrkit --paths 168 169 --dates 2010-01-01 2010-01-31 --catalog orbits.json

    # Orbits per path from the MISR Toolkit (requires MisrToolkit)
    misrkit --paths 168 169 --dates 2010-01-01 2010-01-31 --mtk
    misrkit --paths 168 169 --dates 2010-01-01 2010-01-31 --mtk --export-json out.json
"""
import argparse
import logging
import sys

from misrkit.domain.codec import decode, encode, encode_orbit, encode_path
from misrkit.domain.identifiers import IdentifierKind
from misrkit.domain.orbit_listing import OrbitListing, assemble_orbit_listing
from misrkit.domain.time_range import MISSION_EPOCH
from misrkit.adapters.json_io import JsonListingWriter
from misrkit.adapters.table_catalog import TableOrbitCatalog
from misrkit.ports.orbit_catalog import OrbitCatalog


def _parse_number(kind: IdentifierKind, text: str) -> int:
    try:
        return int(text)
    except ValueError:
        raise ValueError(f"{kind.label} must be an integer, got {text!r}") from None


def run_encode(kind_label: str, value: str, prefix: bool = True) -> str:
    """Canonical string for a numeric identifier given on the command line."""
    kind = IdentifierKind.from_label(kind_label)
    # Only paths have a digits-only form.
    prefix = prefix or kind is not IdentifierKind.PATH
    return encode(kind, _parse_number(kind, value), prefix=prefix)


def run_decode(kind_label: str, text: str) -> str:
    """Canonical string for any tolerated spelling of an identifier."""
    kind = IdentifierKind.from_label(kind_label)
    return encode(kind, decode(kind, text))


def run_listing(
    catalog: OrbitCatalog,
    paths: list[str],
    dates: list[str],
) -> OrbitListing:
    """Assemble an orbit listing for two path bounds and two dates."""
    return assemble_orbit_listing(catalog, paths[0], paths[1], dates[0], dates[1])


def format_listing(listing: OrbitListing) -> list[str]:
    """Human-readable lines, one per path."""
    date_range = listing.date_range
    lines = [f"Orbits from {date_range.start_timestamp} to {date_range.end_timestamp}"]
    if date_range.clamped:
        lines.append(
            f"Note: start date clamped to mission epoch {MISSION_EPOCH.isoformat()}"
        )
    for entry in listing.entries:
        orbit_text = " ".join(encode_orbit(o) for o in entry.orbits)
        lines.append(f"{encode_path(entry.path)}: {entry.count} orbits  {orbit_text}".rstrip())
    lines.append(f"Total: {listing.total_count} orbits over {len(listing)} paths")
    return lines


def _make_catalog(args) -> OrbitCatalog:
    if args.mtk:
        from misrkit.adapters.mtk_catalog import MtkOrbitCatalog
        return MtkOrbitCatalog()
    return TableOrbitCatalog.from_json(
        args.catalog, orbit_period_minutes=args.orbit_period,
    )


def main():
    parser = argparse.ArgumentParser(
        description="MISR path/block/orbit identifiers and per-path orbit listings"
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true', default=False,
        help="Log normalization and catalog queries to stderr"
    )

    codec_group = parser.add_argument_group('identifiers')
    codec_group.add_argument(
        '--encode', nargs=2, metavar=('KIND', 'NUMBER'),
        help="Print the canonical form of a number (KIND: path, block, orbit)"
    )
    codec_group.add_argument(
        '--decode', nargs=2, metavar=('KIND', 'TEXT'),
        help="Print the canonical form of a tolerated spelling (e.g. ' p 4 ')"
    )
    codec_group.add_argument(
        '--no-prefix', action='store_true', default=False,
        help="Encode paths as digits only (used with --encode path)"
    )

    listing_group = parser.add_argument_group('orbit listing')
    listing_group.add_argument(
        '--paths', nargs=2, metavar=('PATH1', 'PATH2'),
        help="Path bounds in either order (e.g. 168 169 or P168 P169)"
    )
    listing_group.add_argument(
        '--dates', nargs=2, metavar=('DATE1', 'DATE2'),
        help="Dates as YYYY-MM-DD in either order"
    )
    listing_group.add_argument(
        '--catalog',
        help="JSON orbit table (list of {orbit, path, start_time[, end_time]})"
    )
    listing_group.add_argument(
        '--mtk', action='store_true', default=False,
        help="Query the MISR Toolkit instead of a catalog table"
    )
    listing_group.add_argument(
        '--orbit-period', type=float, default=98.88,
        help="Orbit span in minutes for table rows without end_time (default: 98.88)"
    )
    listing_group.add_argument(
        '--export-json',
        help="Also write the listing to a JSON file"
    )

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    if not (args.encode or args.decode or args.paths):
        parser.error("one of --encode, --decode or --paths is required")

    try:
        if args.encode:
            print(run_encode(args.encode[0], args.encode[1], prefix=not args.no_prefix))
            return

        if args.decode:
            print(run_decode(args.decode[0], args.decode[1]))
            return

        if not args.dates:
            parser.error("the following arguments are required with --paths: --dates")
        if not args.catalog and not args.mtk:
            parser.error("--paths needs a catalog source: --catalog FILE or --mtk")

        catalog = _make_catalog(args)
        listing = run_listing(catalog, args.paths, args.dates)
        for line in format_listing(listing):
            print(line)

        if args.export_json:
            n = JsonListingWriter().write_listing(listing, args.export_json)
            print(f"Exported {n} orbits to {args.export_json}")

    except FileNotFoundError as e:
        print(
            f"Error: Catalog file not found: {e.filename or args.catalog}\n"
            f"Expected a JSON list of orbit records.",
            file=sys.stderr,
        )
        sys.exit(1)
    except (ImportError, ValueError, ConnectionError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
