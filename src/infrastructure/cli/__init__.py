"""Infrastructure CLI helpers - argparse flags from configuration dataclasses."""
from .argument_parser import apply_overrides, build_parser, collect_overrides

__all__ = [
    'apply_overrides',
    'build_parser',
    'collect_overrides'
]
