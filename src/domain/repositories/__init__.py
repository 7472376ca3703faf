"""Repository interfaces for data access.

This package defines abstract interfaces for data access operations,
following the Repository pattern to decouple business logic from
data storage implementations.
"""

from .document_repository import DocumentRepository

__all__ = [
    'DocumentRepository'
]
