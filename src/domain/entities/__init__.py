"""Domain entities - Core business objects.

This package contains the fundamental entities of the tutorial project:

- TrainingConfiguration: The configuration record the articles teach
- TrackingConfiguration: Weights & Biases run settings
- Article and its parts: Parsed structure of a markdown tutorial
- IntegrityIssue / IntegrityReport: Documentation integrity findings
"""

from .training_config import TrainingConfiguration
from .tracking_config import TrackingConfiguration
from .document import Article, CodeBlock, Heading, Image, Link
from .integrity_report import IntegrityIssue, IntegrityReport

__all__ = [
    'TrainingConfiguration',
    'TrackingConfiguration',
    'Article',
    'CodeBlock',
    'Heading',
    'Image',
    'Link',
    'IntegrityIssue',
    'IntegrityReport'
]
