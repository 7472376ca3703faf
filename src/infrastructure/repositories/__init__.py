"""Infrastructure layer repository implementations.

This package contains concrete implementations of repository interfaces
using specific storage technologies.
"""

from .file_document_repository import FileDocumentRepository

__all__ = [
    'FileDocumentRepository'
]
