"""Infrastructure validators - per-language code block checks."""
from .code_block_validator import CodeBlockValidator

__all__ = [
    'CodeBlockValidator'
]
