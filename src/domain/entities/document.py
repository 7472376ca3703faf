"""Document entities - the parsed structure of a tutorial article."""
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple
from urllib.parse import urlsplit

EXTERNAL_SCHEMES = ("http", "https", "mailto", "ftp")


def _split_target(target: str) -> Tuple[str, Optional[str]]:
    """Split a link target into (path, anchor), dropping any query string."""
    path, _, anchor = target.partition('#')
    path = path.split('?', 1)[0]
    return path, (anchor or None)


@dataclass(frozen=True)
class Heading:
    """A markdown ATX heading."""
    level: int
    text: str
    line: int


@dataclass(frozen=True)
class Link:
    """An inline markdown link ``[text](target)``."""
    text: str
    target: str
    line: int

    @property
    def is_external(self) -> bool:
        return urlsplit(self.target).scheme.lower() in EXTERNAL_SCHEMES

    @property
    def is_anchor(self) -> bool:
        """True for same-document links such as ``#usage``."""
        return self.target.startswith('#')

    @property
    def path(self) -> str:
        return _split_target(self.target)[0]

    @property
    def anchor(self) -> Optional[str]:
        return _split_target(self.target)[1]


@dataclass(frozen=True)
class Image(Link):
    """An inline markdown image ``![alt](target)``; ``text`` holds the alt text."""

    @property
    def alt(self) -> str:
        return self.text


@dataclass(frozen=True)
class CodeBlock:
    """A fenced code block.

    Attributes:
        language: Lowercased first word of the info string ('' when undeclared)
        code: Block body without the fences
        line: 1-based line number of the opening fence
    """
    language: str
    code: str
    line: int


@dataclass
class Article:
    """A parsed markdown article."""
    path: Path
    title: str
    headings: List[Heading] = field(default_factory=list)
    links: List[Link] = field(default_factory=list)
    images: List[Image] = field(default_factory=list)
    code_blocks: List[CodeBlock] = field(default_factory=list)
    unterminated_fences: List[int] = field(default_factory=list)
    anchors: List[str] = field(default_factory=list)

    @property
    def internal_links(self) -> List[Link]:
        return [link for link in self.links if not link.is_external]

    @property
    def next_link(self) -> Optional[Link]:
        """The closing "next tutorial" cross-reference, if the article has one.

        This is the last internal, non-anchor link whose text starts with
        "Next" (case-insensitive).
        """
        candidates = [
            link for link in self.internal_links
            if not link.is_anchor and link.text.strip().lower().startswith('next')
        ]
        return candidates[-1] if candidates else None
