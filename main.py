#!/usr/bin/env python3
"""
Bus Route Finder - Unified CLI
==============================
Location autocomplete and direct-route search over a bus dataset.

Usage:
    python main.py search FROM TO [--data SRC] [--html PATH]
    python main.py suggest TEXT [--data SRC]
    python main.py info [--data SRC]
    python main.py interactive [--data SRC]

Examples:
    python main.py search gabtoli farmgate
    python main.py search gabtoli farmgate --html outputs/results.html
    python main.py suggest mir --data https://example.org/bus.json

Interactive commands (one per line):
    from type <text>     to type <text>      replace the field text
    from down | up | enter | esc | toggle    keyboard and toggle button
    from pick <n>        mouse-down on candidate n
    click <target>       pointer press (from, to-suggestions, outside, ...)
    search               run the route search
    quit
"""

import argparse
import logging
import sys
from typing import Iterable, List, Optional

from routefinder.config import LOG_FORMAT, VERBOSE_LOG_FORMAT

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure root logging once for the CLI."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=VERBOSE_LOG_FORMAT if verbose else LOG_FORMAT
    )


def print_header(title: str) -> None:
    """Print a styled header."""
    print("\n" + "=" * 60)
    print(f"  {title}")
    print("=" * 60)


def load_catalog(args):
    """Load the catalog from --data, or the default dataset."""
    from routefinder.data import BusDataLoader

    return BusDataLoader(args.data).load_catalog()


def print_results(records) -> None:
    if not records:
        print("No direct routes found")
        return
    print(f"Available Routes ({len(records)}):")
    for record in records:
        local_name = f" ({record.local_name})" if record.local_name else ""
        print(f"  🚌 {record.display_name}{local_name}: {record.route_text}")


def cmd_search(args) -> int:
    """Find direct routes between two locations."""
    from routefinder.errors import InputError
    from routefinder.search import RouteMatcher
    from routefinder.generators import ResultsPageGenerator

    catalog = load_catalog(args)

    try:
        records = RouteMatcher(catalog).find_routes(args.from_location, args.to_location)
    except InputError as e:
        print(e.message)
        return 2

    print_results(records)

    if args.html:
        output_path = ResultsPageGenerator(args.from_location, args.to_location, catalog).save(args.html)
        print(f"\n   ✅ Saved: {output_path}")

    return 0


def cmd_suggest(args) -> int:
    """Show autocomplete suggestions for a partial location name."""
    from routefinder.search import LocationIndex

    catalog = load_catalog(args)
    for name in LocationIndex(catalog).search(args.text):
        print(name)
    return 0


def cmd_info(args) -> int:
    """Show dataset information."""
    catalog = load_catalog(args)

    print_header("Bus Dataset Info")

    frame = catalog.to_frame()
    print("\n📊 Dataset size:")
    print(f"   Services:   {len(catalog):,}")
    print(f"   Locations:  {len(catalog.locations()):,}")
    if not frame.empty:
        print(f"   Avg stops:  {frame['stop_count'].mean():.1f}")
        print(f"   No stops:   {int((frame['stop_count'] == 0).sum()):,}")

        print("\n🚌 Service types:")
        for service_type, count in catalog.service_type_counts().items():
            print(f"   {service_type}: {count:,}")

    return 0


def describe_field(name: str, session) -> str:
    """One-line view of a field: text, visibility and candidates."""
    line = f"{name}: {session.value!r}"
    if not session.visible:
        return line + " [closed]"
    items = []
    for idx, candidate in enumerate(session.candidates):
        items.append(f"[{candidate}]" if idx == session.active_index else candidate)
    return line + " [open] " + " | ".join(items)


def run_interactive(finder, lines: Iterable[str]) -> None:
    """Drive a RouteFinder from text commands."""
    from routefinder.errors import InputError

    key_events = {
        'down': 'ArrowDown',
        'up': 'ArrowUp',
        'enter': 'Enter',
        'esc': 'Escape',
    }

    for line in lines:
        parts = line.strip().split(maxsplit=2)
        if not parts:
            continue
        command = parts[0].lower()

        if command == 'quit':
            break

        if command == 'search':
            try:
                print_results(finder.search())
            except InputError as e:
                print(e.message)
            continue

        if command == 'click':
            finder.pointer_down(parts[1] if len(parts) > 1 else 'outside')
        elif command in finder.fields and len(parts) > 1:
            session = finder.field(command)
            event = parts[1].lower()
            if event == 'type':
                session.text_changed(parts[2] if len(parts) > 2 else '')
            elif event in key_events:
                session.handle_key(key_events[event])
            elif event == 'toggle':
                session.toggle()
            elif event == 'pick' and len(parts) > 2 and parts[2].isdigit():
                session.pointer_select(int(parts[2]))
            else:
                print(f"Unknown event: {event}")
                continue
        else:
            print(f"Unknown command: {line.strip()}")
            continue

        for name, session in finder.fields.items():
            print(describe_field(name, session))


def cmd_interactive(args) -> int:
    """Run an interactive two-field session."""
    from routefinder.finder import RouteFinder

    finder = RouteFinder(load_catalog(args))
    print_header("Bus Route Finder")
    print("Type 'quit' to exit.")
    run_interactive(finder, sys.stdin)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Bus Route Finder - find direct bus routes between two locations',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')

    # Shared --data option
    data_parser = argparse.ArgumentParser(add_help=False)
    data_parser.add_argument('--data', default=None, help='Path or URL of bus.json (default: data/bus.json)')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # Search command
    search_parser = subparsers.add_parser('search', parents=[data_parser], help='Find direct routes')
    search_parser.add_argument('from_location', metavar='FROM', help='Origin (partial name)')
    search_parser.add_argument('to_location', metavar='TO', help='Destination (partial name)')
    search_parser.add_argument('--html', default=None, help='Also write an HTML results page to this path')
    search_parser.set_defaults(func=cmd_search)

    # Suggest command
    suggest_parser = subparsers.add_parser('suggest', parents=[data_parser], help='Autocomplete a location name')
    suggest_parser.add_argument('text', help='Partial location name')
    suggest_parser.set_defaults(func=cmd_suggest)

    # Info command
    info_parser = subparsers.add_parser('info', parents=[data_parser], help='Show dataset information')
    info_parser.set_defaults(func=cmd_info)

    # Interactive command
    interactive_parser = subparsers.add_parser('interactive', parents=[data_parser], help='Interactive session')
    interactive_parser.set_defaults(func=cmd_interactive)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    setup_logging(args.verbose)
    return args.func(args)


if __name__ == '__main__':
    sys.exit(main())
