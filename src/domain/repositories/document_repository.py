"""Abstract document access - Repository pattern for tutorial articles."""
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List


class DocumentRepository(ABC):
    """Abstract interface for reading documentation sources.

    This repository defines the contract for locating and reading tutorial
    articles, allowing the integrity checks to run against the file system
    or an in-memory fixture alike.
    """

    @property
    @abstractmethod
    def root(self) -> Path:
        """Directory that relative document paths are resolved against."""
        pass

    @abstractmethod
    def list_documents(self) -> List[Path]:
        """List all markdown documents.

        Returns:
            Paths of every document, sorted.
        """
        pass

    @abstractmethod
    def read_document(self, path: Path) -> str:
        """Read the text of a document.

        Args:
            path: Path of the document to read

        Returns:
            Document contents

        Raises:
            FileNotFoundError: If the document does not exist
        """
        pass

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """Check if a file (document, image or any other asset) exists.

        Args:
            path: Path to check

        Returns:
            True if the file exists, False otherwise
        """
        pass
