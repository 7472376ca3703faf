"""Documentation integrity service - checks links, images, code and reading order."""
import logging
import os
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union
from urllib.parse import unquote

from src.domain.entities.document import Article, Link
from src.domain.entities.integrity_report import IntegrityIssue, IntegrityReport
from src.domain.repositories.document_repository import DocumentRepository
from src.infrastructure.markdown.parser import parse_markdown
from src.infrastructure.validators.code_block_validator import CodeBlockValidator

logger = logging.getLogger(__name__)


def _normalize(path: Path) -> Path:
    return Path(os.path.normpath(str(path)))


class DocumentationIntegrityService:
    """Checks that a documentation set is internally consistent.

    For every markdown document in the repository:

    - internal links point at files that exist (external URLs are not fetched);
    - ``#anchors`` match a heading in the target document (warning);
    - images exist;
    - fenced code in a supported language parses;
    - no code fence is left open.

    When a first article is configured, the "next tutorial" chain starting
    there must not loop, and must follow ``reading_order`` when one is given.
    """

    def __init__(self, repository: DocumentRepository,
                 validator: Optional[CodeBlockValidator] = None,
                 first_article: Optional[str] = None,
                 reading_order: Optional[Iterable[str]] = None,
                 require_complete_chain: bool = False):
        """Initialize the integrity service.

        Args:
            repository: Source of documents and asset existence checks
            validator: Code block validator (a default one is created when None)
            first_article: Root-relative path where the reading chain starts
            reading_order: Expected root-relative order of the reading chain
            require_complete_chain: Warn about documents the chain never reaches
        """
        self.repository = repository
        self.validator = validator or CodeBlockValidator()
        self.reading_order = list(reading_order or [])
        self.first_article = first_article or (self.reading_order[0] if self.reading_order else None)
        self.require_complete_chain = require_complete_chain
        self._articles: Dict[Path, Article] = {}
        self._unreadable: Dict[Path, UnicodeDecodeError] = {}

    def check(self) -> IntegrityReport:
        """Check every document and the reading chain."""
        self._reset()
        documents = [_normalize(p) for p in self.repository.list_documents()]
        issues: List[IntegrityIssue] = []
        for path in documents:
            doc_issues = self._document_issues(path)
            logger.debug("%s: %d issue(s)", path, len(doc_issues))
            issues.extend(doc_issues)
        issues.extend(self._check_reading_order(documents))

        report = IntegrityReport(documents_checked=len(documents), issues=issues)
        logger.info("Checked %d document(s): %d error(s), %d warning(s)",
                    report.documents_checked, len(report.errors), len(report.warnings))
        return report

    def check_document(self, path: Union[str, Path]) -> IntegrityReport:
        """Check a single document (the reading chain is not followed)."""
        self._reset()
        return IntegrityReport(documents_checked=1, issues=self._document_issues(_normalize(Path(path))))

    def _reset(self) -> None:
        self._articles = {}
        self._unreadable = {}

    def _document_issues(self, path: Path) -> List[IntegrityIssue]:
        article = self._article(path)
        if article is None:
            error = self._unreadable[path]
            return [IntegrityIssue(path, 0, 'unreadable',
                                   f"not valid UTF-8: {error.reason} at byte {error.start}")]
        return self._check_article(article)

    def _article(self, path: Path) -> Optional[Article]:
        """Parsed article, or None when the file is not valid UTF-8."""
        if path in self._unreadable:
            return None
        if path not in self._articles:
            try:
                text = self.repository.read_document(path)
            except UnicodeDecodeError as e:
                logger.warning("Cannot decode %s: %s", path, e)
                self._unreadable[path] = e
                return None
            self._articles[path] = parse_markdown(text, path)
        return self._articles[path]

    def _resolve(self, article: Article, target: str) -> Path:
        target = unquote(target)
        if target.startswith('/'):
            return _normalize(self.repository.root / target.lstrip('/'))
        return _normalize(article.path.parent / target)

    def _check_article(self, article: Article) -> List[IntegrityIssue]:
        issues: List[IntegrityIssue] = []
        path = article.path

        for link in article.links:
            if link.is_external:
                continue
            if link.is_anchor:
                issue = self._check_anchor(article, article, link)
                if issue:
                    issues.append(issue)
                continue
            target = self._resolve(article, link.path)
            if not self.repository.exists(target):
                issues.append(IntegrityIssue(path, link.line, 'broken_link',
                                             f"link target does not exist: {link.target}"))
                continue
            if link.anchor and target.suffix.lower() == '.md' and target.is_file():
                target_article = self._article(target)
                # an undecodable target is reported on its own
                if target_article is not None:
                    issue = self._check_anchor(article, target_article, link)
                    if issue:
                        issues.append(issue)

        for image in article.images:
            if image.is_external:
                continue
            if not self.repository.exists(self._resolve(article, image.path)):
                issues.append(IntegrityIssue(path, image.line, 'missing_image',
                                             f"image not found: {image.target}"))

        for line in article.unterminated_fences:
            issues.append(IntegrityIssue(path, line, 'unterminated_fence',
                                         "code fence is never closed"))

        for block in article.code_blocks:
            error = self.validator.validate(block)
            if error:
                issues.append(IntegrityIssue(path, block.line, 'invalid_code',
                                             f"{block.language} block: {error}"))
        return issues

    def _check_anchor(self, source: Article, target: Article, link: Link) -> Optional[IntegrityIssue]:
        anchor = unquote(link.anchor or '').lower()
        if not anchor or anchor in target.anchors:
            return None
        return IntegrityIssue(source.path, link.line, 'missing_anchor',
                              f"no heading for anchor '#{anchor}' in {target.path.name}",
                              severity='warning')

    def _check_reading_order(self, documents: List[Path]) -> List[IntegrityIssue]:
        if not self.first_article:
            return []
        root = self.repository.root
        start = _normalize(root / self.first_article)
        known = set(documents)
        if start not in known:
            return [IntegrityIssue(start, 0, 'reading_order',
                                   f"first article is not a checked document: {self.first_article}")]

        issues: List[IntegrityIssue] = []
        visited: List[Path] = []
        current = start
        while True:
            visited.append(current)
            article = self._article(current)
            next_link = article.next_link if article is not None else None
            if next_link is None:
                break
            following = self._resolve(article, next_link.path)
            if following in visited:
                issues.append(IntegrityIssue(current, next_link.line, 'reading_order',
                                             f"next link loops back to {following.name}"))
                break
            if following not in known:
                # a missing target is already reported as a broken link
                if self.repository.exists(following):
                    issues.append(IntegrityIssue(current, next_link.line, 'reading_order',
                                                 f"next link leaves the documentation set: {next_link.target}"))
                break
            current = following

        if self.reading_order:
            expected = [_normalize(root / name) for name in self.reading_order]
            if visited != expected:
                issues.append(IntegrityIssue(
                    start, 0, 'reading_order',
                    "reading chain is " + " -> ".join(p.name for p in visited)
                    + "; expected " + " -> ".join(p.name for p in expected),
                    severity='warning'))

        if self.require_complete_chain:
            required = [_normalize(root / name) for name in self.reading_order] or documents
            for path in required:
                if path not in visited:
                    issues.append(IntegrityIssue(path, 0, 'reading_order',
                                                 "document is not reachable through next links",
                                                 severity='warning'))
        return issues
