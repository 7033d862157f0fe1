"""Fulfilment Warehousing database management CLI.

Creates and drops the database schema of the warehousing domain. Only
relational providers (sqlite, postgresql) have a schema; with the memory
provider both commands are no-ops.

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
"""

import argparse
import sys


def setup_database():
    from warehousing.domain import warehousing
    from warehousing.utils.db import setup_db

    print("Initializing warehousing domain...")
    warehousing.init()
    print("Creating warehousing database schema...")
    setup_db(warehousing)
    print("Done.")


def drop_database():
    from warehousing.domain import warehousing
    from warehousing.utils.db import drop_db

    print("Initializing warehousing domain...")
    warehousing.init()
    print("Dropping warehousing database schema...")
    drop_db(warehousing)
    print("Done.")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Fulfilment Warehousing database management")
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    args = parser.parse_args(argv)

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
