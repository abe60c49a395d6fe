"""
Database configuration and connection management
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.core.config import settings

# Database URL - comes from the application settings (environment or .env)
DATABASE_URL = settings.DATABASE_URL

# Create engine
engine = create_engine(
    DATABASE_URL,
    echo=False,  # Set to True for SQL query logging
    pool_pre_ping=True,  # Verify connections before using
    pool_recycle=3600,  # Recycle connections after 1 hour
)

# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind=None):
    """
    Initialize database - create all tables
    """
    from .models.schema import Base
    Base.metadata.create_all(bind=bind or engine)
    print("Database initialized successfully")


def drop_db(bind=None):
    """
    Drop all tables - use with caution!
    """
    from .models.schema import Base
    Base.metadata.drop_all(bind=bind or engine)
    print("All tables dropped")


def reset_db(bind=None):
    """
    Reset database - drop and recreate all tables
    """
    drop_db(bind)
    init_db(bind)
    print("Database reset successfully")
