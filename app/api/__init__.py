"""
API routes package
"""

from fastapi import APIRouter
from .search import router as search_router
from .imports import router as imports_router

api_router = APIRouter()
api_router.include_router(search_router)
api_router.include_router(imports_router)

__all__ = ['api_router']
