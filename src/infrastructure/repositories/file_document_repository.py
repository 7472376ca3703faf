"""File system document repository implementation."""
import fnmatch
from pathlib import Path
from typing import Iterable, List, Optional, Union

from src.domain.repositories.document_repository import DocumentRepository


class FileDocumentRepository(DocumentRepository):
    """File system implementation of the document repository.

    Discovers markdown articles under a root directory. Hidden directories
    (``.git``, ``.venv``, ...) are skipped, as is anything matching one of
    the ``ignore`` glob patterns (matched against the root-relative path).
    """

    def __init__(self, root: Union[str, Path], pattern: str = "*.md",
                 recursive: bool = True, ignore: Optional[Iterable[str]] = None):
        """Initialize the file system document repository.

        Args:
            root: Directory containing the documentation
            pattern: Glob pattern selecting documents
            recursive: Whether to descend into subdirectories
            ignore: Glob patterns of root-relative paths to skip
        """
        self._root = Path(root)
        self.pattern = pattern
        self.recursive = recursive
        self.ignore = list(ignore or [])

    @property
    def root(self) -> Path:
        return self._root

    def list_documents(self) -> List[Path]:
        """List markdown documents sorted by path."""
        if not self._root.is_dir():
            raise FileNotFoundError(f"Documentation directory not found: {self._root}")

        candidates = self._root.rglob(self.pattern) if self.recursive else self._root.glob(self.pattern)
        documents = []
        for path in candidates:
            if not path.is_file():
                continue
            relative = path.relative_to(self._root)
            if any(part.startswith('.') for part in relative.parts[:-1]):
                continue
            if self._is_ignored(relative):
                continue
            documents.append(path)
        return sorted(documents)

    def read_document(self, path: Path) -> str:
        """Read a document as UTF-8 text."""
        try:
            with open(path, 'r', encoding='utf-8') as f:
                return f.read()
        except FileNotFoundError:
            raise FileNotFoundError(f"Document not found: {path}")

    def exists(self, path: Path) -> bool:
        """Check if a file or directory exists at path."""
        return Path(path).exists()

    def _is_ignored(self, relative: Path) -> bool:
        text = relative.as_posix()
        return any(fnmatch.fnmatch(text, pattern) for pattern in self.ignore)
