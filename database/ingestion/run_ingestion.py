"""
Master ingestion script - load permitted routes and segments in order
"""

from pathlib import Path

from database.config import init_db, reset_db
from database.config import SessionLocal
from database.ingestion.ingest_permitted_routes import ingest_permitted_routes
from database.ingestion.ingest_segments import ingest_segments
from database.models import PermittedRoute, Segment


def main(argv=None):
    """
    Run complete ingestion pipeline
    """
    import argparse

    script_dir = Path(__file__).parent
    data_dir = script_dir.parent.parent / 'data'

    parser = argparse.ArgumentParser(description='Load permitted routes and segments')
    parser.add_argument('--reset', action='store_true', help='Reset database before ingestion')
    parser.add_argument('--yes', action='store_true', help='Do not ask for confirmation on --reset')
    parser.add_argument('--routes', default=str(data_dir / 'permitted_routes.json'),
                        help='Permitted routes JSON file')
    parser.add_argument('--segments', default=str(data_dir / 'segments.csv'),
                        help='Segments CSV file')
    args = parser.parse_args(argv)

    print("\n" + "=" * 70)
    print(" " * 20 + "ITINERARY SEARCH DATA INGESTION")
    print("=" * 70 + "\n")

    # Step 0: Initialize or reset database
    if args.reset:
        print("⚠️  Resetting database (all existing data will be deleted)...")
        response = 'yes' if args.yes else input("Are you sure? (yes/no): ")
        if response.lower() == 'yes':
            reset_db()
        else:
            print("Aborting reset")
            return
    else:
        print("Initializing database...")
        init_db()

    db = SessionLocal()
    try:
        # Step 1: Permitted routes
        print("\nSTEP 1: Ingesting Permitted Routes")
        print("-" * 70)
        routes_file = Path(args.routes)
        if routes_file.exists():
            ingest_permitted_routes(str(routes_file), db)
        else:
            print(f"⚠️  Routes file not found at {routes_file}")

        # Step 2: Segments
        print("\nSTEP 2: Ingesting Segments")
        print("-" * 70)
        segments_file = Path(args.segments)
        if segments_file.exists():
            ingest_segments(str(segments_file), db)
        else:
            print(f"⚠️  Segments file not found at {segments_file}")

        print("\n" + "=" * 70)
        print(" " * 20 + "INGESTION COMPLETED SUCCESSFULLY")
        print("=" * 70 + "\n")

        print("Database Summary:")
        print(f"  Permitted routes: {db.query(PermittedRoute).count()}")
        print(f"  Segments:         {db.query(Segment).count()}")
    finally:
        db.close()

    print("\n" + "=" * 70 + "\n")


if __name__ == "__main__":
    main()
