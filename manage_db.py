"""
Database maintenance: migrate, show schema version, wipe data, prune activity.

    python manage_db.py migrate
    python manage_db.py version
    python manage_db.py wipe --yes
    python manage_db.py cleanup --months 6
"""
import argparse
import logging
import sys

from creativityhub.application.database_manager import DatabaseManager
from creativityhub.config import get_settings


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="CreativityHub database maintenance")
    parser.add_argument("--url", help="SQLAlchemy URL (defaults to the configured store)")
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("migrate", help="apply pending migrations")
    sub.add_parser("version", help="print the current schema version")
    wipe = sub.add_parser("wipe", help="delete all data, keep schema and settings")
    wipe.add_argument("--yes", action="store_true", help="confirm the wipe")
    cleanup = sub.add_parser("cleanup", help="delete old activity log entries")
    cleanup.add_argument("--months", type=int, default=None)
    args = parser.parse_args(argv)

    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    manager = DatabaseManager(url=args.url, settings=settings)
    try:
        if args.command == "version":
            print(f"Schema version: {manager.current_schema_version()}")
            return 0

        result = manager.bootstrap()
        if args.command == "migrate":
            print(f"{result.status.value}: {result.from_version} -> {result.to_version}")
            return 0 if result.ok else 1
        if not result.ok:
            print(f"✗ Migration failed: {result.error}")
            return 1

        if args.command == "wipe":
            if not args.yes:
                print("Refusing to wipe without --yes")
                return 2
            ok = manager.delete_all_data()
            print("✓ All data deleted" if ok else "✗ Some tables could not be emptied")
            return 0 if ok else 1

        removed = manager.activity.cleanup_older_than(months=args.months)
        print(f"✓ Removed {removed} activity log entries")
        return 0
    finally:
        manager.close()


if __name__ == "__main__":
    sys.exit(main())
