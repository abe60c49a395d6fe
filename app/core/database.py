"""
Database dependencies for FastAPI
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from database.config import SessionLocal
from app.services.search.store import RouteStore, SqlAlchemyRouteStore


def get_db():
    """
    Database dependency for FastAPI routes
    Yields a database session and ensures it's closed after use
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_route_store(db: Session = Depends(get_db)) -> RouteStore:
    """Store capability used by the search endpoint, bound to the request's session"""
    return SqlAlchemyRouteStore(db)
