"""ShoppingMall database management CLI.

Creates and drops the SQL schema for the shoppingmall domain. Only the SQL
providers (sqlite, postgresql) are touched; the memory provider needs no
schema.

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
"""

import argparse
import sys


def setup_database():
    from shoppingmall.domain import shoppingmall
    from shoppingmall.utils.db import setup_db

    print("Initializing shoppingmall domain...")
    shoppingmall.init()
    print("Creating shoppingmall database schema...")
    setup_db(shoppingmall)
    print("Done.")


def drop_database():
    from shoppingmall.domain import shoppingmall
    from shoppingmall.utils.db import drop_db

    print("Initializing shoppingmall domain...")
    shoppingmall.init()
    print("Dropping shoppingmall database schema...")
    drop_db(shoppingmall)
    print("Done.")


def main():
    parser = argparse.ArgumentParser(description="ShoppingMall database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
