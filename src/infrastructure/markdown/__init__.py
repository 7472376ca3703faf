"""Infrastructure markdown parsing."""
from .parser import heading_anchors, parse_markdown, slugify

__all__ = [
    'heading_anchors',
    'parse_markdown',
    'slugify'
]
