"""
Service layer package
"""

from .search_service import FlightSearchService
from .import_service import ImportService, ImportResult

__all__ = ['FlightSearchService', 'ImportService', 'ImportResult']
