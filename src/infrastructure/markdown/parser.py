"""Markdown parsing - extracts headings, links, images and fenced code from articles.

Only the subset of CommonMark the tutorials use is understood: ATX headings,
inline links and images, inline code spans and fenced code blocks.
"""
import re
from pathlib import Path
from typing import Dict, List, Optional, Union

from src.domain.entities.document import Article, CodeBlock, Heading, Image, Link

_FENCE_OPEN_RE = re.compile(r"^ {0,3}(?P<fence>`{3,}|~{3,})(?P<info>.*)$")
_FENCE_CLOSE_RE = re.compile(r"^ {0,3}(?P<fence>`{3,}|~{3,})\s*$")
_HEADING_RE = re.compile(r"^ {0,3}(?P<hashes>#{1,6})\s+(?P<text>.+?)(?:\s+#+)?\s*$")
_CODE_SPAN_RE = re.compile(r"(`+)(?:.+?)\1")
_TARGET = r"\(\s*(?P<target><[^>]*>|[^)\s]+)(?:\s+(?:\"[^\"]*\"|'[^']*'|\([^)]*\)))?\s*\)"
_IMAGE_RE = re.compile(r"!\[(?P<text>[^\]]*)\]" + _TARGET)
_LINK_RE = re.compile(r"\[(?P<text>[^\]]*)\]" + _TARGET)
_INLINE_LINK_TEXT_RE = re.compile(r"!?\[([^\]]*)\]\([^)]*\)")
_SLUG_STRIP_RE = re.compile(r"[^\w\- ]", re.UNICODE)


def slugify(text: str) -> str:
    """Turn heading text into a GitHub-style anchor.

    >>> slugify("Using `argparse` (the basics)")
    'using-argparse-the-basics'
    """
    text = _INLINE_LINK_TEXT_RE.sub(r"\1", text)
    text = _SLUG_STRIP_RE.sub("", text.strip().lower())
    return text.replace(" ", "-")


def _unwrap(target: str) -> str:
    if target.startswith("<") and target.endswith(">"):
        return target[1:-1].strip()
    return target


class _OpenFence:
    def __init__(self, char: str, length: int, language: str, line: int):
        self.char = char
        self.length = length
        self.language = language
        self.line = line
        self.body: List[str] = []

    def closes_with(self, fence: str) -> bool:
        return fence[0] == self.char and len(fence) >= self.length

    def to_block(self) -> CodeBlock:
        return CodeBlock(language=self.language, code="\n".join(self.body), line=self.line)


def parse_markdown(text: str, path: Union[str, Path] = "<string>") -> Article:
    """Parse a markdown document into an Article.

    Args:
        text: Markdown source
        path: Path recorded on the article (also used for the fallback title)

    Returns:
        Article with headings, links, images, code blocks and heading anchors
    """
    path = Path(path)
    headings: List[Heading] = []
    links: List[Link] = []
    images: List[Image] = []
    blocks: List[CodeBlock] = []
    unterminated: List[int] = []
    fence: Optional[_OpenFence] = None

    for lineno, line in enumerate(text.splitlines(), 1):
        if fence is not None:
            close = _FENCE_CLOSE_RE.match(line)
            if close and fence.closes_with(close.group("fence")):
                blocks.append(fence.to_block())
                fence = None
            else:
                fence.body.append(line)
            continue

        opening = _FENCE_OPEN_RE.match(line)
        if opening:
            marker = opening.group("fence")
            info = opening.group("info").strip()
            # backtick fences may not carry backticks in their info string
            if not (marker[0] == "`" and "`" in info):
                language = info.split()[0].lower() if info else ""
                fence = _OpenFence(marker[0], len(marker), language, lineno)
                continue

        heading = _HEADING_RE.match(line)
        if heading:
            headings.append(Heading(len(heading.group("hashes")), heading.group("text").strip(), lineno))

        prose = _CODE_SPAN_RE.sub("", line)
        for match in _IMAGE_RE.finditer(prose):
            images.append(Image(match.group("text"), _unwrap(match.group("target")), lineno))
        prose = _IMAGE_RE.sub("", prose)
        for match in _LINK_RE.finditer(prose):
            links.append(Link(match.group("text"), _unwrap(match.group("target")), lineno))

    if fence is not None:
        blocks.append(fence.to_block())
        unterminated.append(fence.line)

    title = next((h.text for h in headings if h.level == 1), path.stem)
    return Article(
        path=path,
        title=title,
        headings=headings,
        links=links,
        images=images,
        code_blocks=blocks,
        unterminated_fences=unterminated,
        anchors=heading_anchors(headings),
    )


def heading_anchors(headings: List[Heading]) -> List[str]:
    """Anchors for each heading, de-duplicated with ``-1``, ``-2`` suffixes.

    A suffixed anchor never repeats one already taken, so headings
    "a", "a", "a-1" give ``a``, ``a-1``, ``a-1-1``.
    """
    suffixes: Dict[str, int] = {}
    used = set()
    anchors = []
    for heading in headings:
        base = slugify(heading.text)
        anchor = base
        while anchor in used:
            suffixes[base] = suffixes.get(base, 0) + 1
            anchor = f"{base}-{suffixes[base]}"
        used.add(anchor)
        anchors.append(anchor)
    return anchors
