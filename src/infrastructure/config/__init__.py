"""Infrastructure layer configuration management."""
from .config_loader import ConfigLoader, DocsConfig

__all__ = [
    'ConfigLoader',
    'DocsConfig'
]
