"""
Add performance indexes for itinerary search queries

This migration adds composite indexes to optimize:
1. The bulk segment preload (airline + origin IN (...) + std window)
2. Per-leg lookups by origin/destination pair

Safe to run repeatedly against databases created before the indexes
were declared on the models.
"""

from sqlalchemy import text

from database.config import engine as default_engine


INDEXES = [
    (
        "idx_segments_route_lookup",
        "CREATE INDEX IF NOT EXISTS idx_segments_route_lookup "
        "ON segments(airline, origin_iata, destination_iata, std)"
    ),
    (
        "idx_segments_airline_origin_std",
        "CREATE INDEX IF NOT EXISTS idx_segments_airline_origin_std "
        "ON segments(airline, origin_iata, std)"
    ),
]


def upgrade(engine=None):
    """Add performance indexes"""
    engine = engine or default_engine

    with engine.connect() as conn:
        print("Adding performance indexes...")

        for name, statement in INDEXES:
            print(f"Creating {name}...")
            conn.execute(text(statement))
            conn.commit()

        print("✅ All performance indexes created successfully!")


def downgrade(engine=None):
    """Remove performance indexes"""
    engine = engine or default_engine

    with engine.connect() as conn:
        print("Removing performance indexes...")

        for name, _ in INDEXES:
            conn.execute(text(f"DROP INDEX IF EXISTS {name}"))
        conn.commit()

        print("✅ All performance indexes removed!")


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Add performance indexes")
    parser.add_argument(
        "--downgrade",
        action="store_true",
        help="Remove the indexes instead of adding them"
    )

    args = parser.parse_args()

    if args.downgrade:
        downgrade()
    else:
        upgrade()
