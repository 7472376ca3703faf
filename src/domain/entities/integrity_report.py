"""Integrity report entity - findings of a documentation integrity check."""
from collections import OrderedDict
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

ISSUE_KINDS = (
    "broken_link",
    "missing_image",
    "missing_anchor",
    "invalid_code",
    "unterminated_fence",
    "reading_order",
    "unreadable",
)
SEVERITIES = ("error", "warning")


@dataclass(frozen=True)
class IntegrityIssue:
    """A single documentation integrity finding.

    Attributes:
        path: Document the issue was found in
        line: 1-based line number (0 when the issue concerns the whole document)
        kind: One of ISSUE_KINDS
        message: Human readable description
        severity: "error" or "warning"
    """
    path: Path
    line: int
    kind: str
    message: str
    severity: str = "error"

    def __post_init__(self):
        """Validate issue fields after initialization."""
        if self.kind not in ISSUE_KINDS:
            raise ValueError(f"unknown issue kind: {self.kind}")
        if self.severity not in SEVERITIES:
            raise ValueError(f"severity must be one of: {', '.join(SEVERITIES)}")

    def format(self) -> str:
        location = f"{self.path}:{self.line}" if self.line else str(self.path)
        return f"{location}: {self.severity}: [{self.kind}] {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'path': str(self.path),
            'line': self.line,
            'kind': self.kind,
            'message': self.message,
            'severity': self.severity,
        }


@dataclass
class IntegrityReport:
    """Outcome of checking a set of documents."""
    documents_checked: int = 0
    issues: List[IntegrityIssue] = field(default_factory=list)

    def __post_init__(self):
        self.issues = sorted(self.issues, key=lambda i: (str(i.path), i.line, i.kind))

    @property
    def errors(self) -> List[IntegrityIssue]:
        return [i for i in self.issues if i.severity == "error"]

    @property
    def warnings(self) -> List[IntegrityIssue]:
        return [i for i in self.issues if i.severity == "warning"]

    @property
    def ok(self) -> bool:
        """True when no error-level issue was found."""
        return not self.errors

    def by_document(self) -> Dict[Path, List[IntegrityIssue]]:
        """Group issues by document, preserving report order."""
        grouped: Dict[Path, List[IntegrityIssue]] = OrderedDict()
        for issue in self.issues:
            grouped.setdefault(issue.path, []).append(issue)
        return grouped

    def to_dict(self) -> Dict[str, Any]:
        return {
            'documents_checked': self.documents_checked,
            'ok': self.ok,
            'error_count': len(self.errors),
            'warning_count': len(self.warnings),
            'issues': [i.to_dict() for i in self.issues],
        }
