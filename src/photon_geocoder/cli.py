"""
Command-line interface for the Photon geocoder.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

import requests

from photon_geocoder import __version__
from photon_geocoder.api import PhotonApi
from photon_geocoder.config import get_settings
from photon_geocoder.exceptions import PhotonError
from photon_geocoder.schemas import BoundingBox, Feature, Layer


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="photon-geocoder",
        description="Forward and reverse geocoding with the Photon API",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--base-url",
        type=str,
        default=None,
        help="Photon server URL (default: base_url from settings)",
    )
    parser.add_argument(
        "--insecure",
        action="store_true",
        help="Send requests over plain HTTP",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # 'search' command - forward geocoding
    search_parser = subparsers.add_parser("search", help="Find places matching a text query")
    search_parser.add_argument("text", type=str, help="Free-text query")
    search_parser.add_argument(
        "--lat", type=float, default=None, help="Bias results near latitude"
    )
    search_parser.add_argument(
        "--lon", type=float, default=None, help="Bias results near longitude"
    )
    search_parser.add_argument(
        "--bbox",
        type=BoundingBox.from_string,
        default=None,
        metavar="MINLON,MINLAT,MAXLON,MAXLAT",
        help="Restrict results to this bounding box",
    )
    _add_common_arguments(search_parser)

    # 'reverse' command - reverse geocoding
    reverse_parser = subparsers.add_parser("reverse", help="Find places near a coordinate")
    reverse_parser.add_argument("lat", type=float, help="Latitude")
    reverse_parser.add_argument("lon", type=float, help="Longitude")
    reverse_parser.add_argument("--radius", type=int, default=None, help="Search radius in meters")
    _add_common_arguments(reverse_parser)

    # 'info' command
    subparsers.add_parser("info", help="Show application info")

    return parser


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--limit", type=int, default=None, help="Maximum number of results")
    parser.add_argument(
        "--lang", type=str, default=None, help="ISO-639-1 language code (en, de, fr, it)"
    )
    parser.add_argument(
        "--layer",
        type=Layer,
        choices=list(Layer),
        default=None,
        help="Only return results of this layer",
    )
    parser.add_argument("--json", action="store_true", help="Print raw feature JSON")


def _make_api(args: argparse.Namespace) -> PhotonApi:
    settings = get_settings()
    if args.base_url:
        settings = settings.model_copy(update={"base_url": args.base_url})
    return PhotonApi.from_settings(settings)


def _print_features(features: list[Feature], as_json: bool) -> None:
    if as_json:
        print(json.dumps([f.to_json() for f in features], indent=2, ensure_ascii=False))
        return
    if not features:
        print("No results.")
        return
    for feature in features:
        print(f"{feature.display_name} ({feature.latitude}, {feature.longitude})")


def cmd_search(args: argparse.Namespace) -> int:
    """Handle the 'search' command."""
    settings = get_settings()
    try:
        with _make_api(args) as api:
            features = api.forward_search(
                args.text,
                limit=args.limit if args.limit is not None else settings.limit,
                latitude=args.lat,
                longitude=args.lon,
                lang_code=args.lang or settings.lang,
                bounding_box=args.bbox,
                layer=args.layer,
                secure=settings.secure and not args.insecure,
            )
    except PhotonError as e:
        print(f"Error ({e.status_code}): {e}", file=sys.stderr)
        return 1
    except requests.RequestException as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    _print_features(features, args.json)
    return 0


def cmd_reverse(args: argparse.Namespace) -> int:
    """Handle the 'reverse' command."""
    settings = get_settings()
    try:
        with _make_api(args) as api:
            features = api.reverse_search(
                args.lat,
                args.lon,
                limit=args.limit if args.limit is not None else settings.limit,
                lang_code=args.lang or settings.lang,
                radius=args.radius,
                layer=args.layer,
                secure=settings.secure and not args.insecure,
            )
    except PhotonError as e:
        print(f"Error ({e.status_code}): {e}", file=sys.stderr)
        return 1
    except requests.RequestException as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    _print_features(features, args.json)
    return 0


def cmd_info(args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Base URL: {getattr(args, 'base_url', None) or settings.base_url}")
    print(f"Secure: {settings.secure and not getattr(args, 'insecure', False)}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    level = logging.DEBUG if args.debug or settings.debug else settings.log_level.upper()
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "search": cmd_search,
        "reverse": cmd_reverse,
        "info": cmd_info,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
