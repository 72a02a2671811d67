"""eCardShop management CLI.

Creates and drops the ordering database schema, and checks a catalogue file
before it is deployed.

Usage:
    python src/manage.py setup-db                     # Create all tables
    python src/manage.py drop-db                      # Drop all tables
    python src/manage.py check-catalogue stores.json  # Validate a catalogue file
"""

import argparse
import sys
from pathlib import Path


def setup_database():
    """Create the ordering database schema."""
    from ordering.domain import ordering
    from ordering.utils.db import setup_db

    print("Initializing ordering domain...")
    ordering.init()
    print("Creating ordering database schema...")
    setup_db(ordering)
    print("Done.")


def drop_database():
    """Drop the ordering database schema."""
    from ordering.domain import ordering
    from ordering.utils.db import drop_db

    print("Initializing ordering domain...")
    ordering.init()
    print("Dropping ordering database schema...")
    drop_db(ordering)
    print("Done.")


def check_catalogue(path):
    """Load a catalogue file and report its stores. Returns a process exit code."""
    from catalogue.loading import load_catalogue
    from catalogue.store import CatalogueError

    try:
        catalogue = load_catalogue(Path(path) if path else None)
    except CatalogueError as exc:
        print(f"Invalid catalogue: {exc}", file=sys.stderr)
        return 1

    for store in catalogue.stores:
        print(f"  {store.name}: {len(store.products)} products")
    print("Catalogue OK.")
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(description="eCardShop management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    check_parser = subparsers.add_parser("check-catalogue", help="Validate a store catalogue file")
    check_parser.add_argument(
        "path",
        nargs="?",
        help="JSON catalogue file (default: the bundled catalogue)",
    )

    args = parser.parse_args(argv)

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "check-catalogue":
        sys.exit(check_catalogue(args.path))
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
