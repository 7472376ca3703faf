"""Shared factories - Reusable factory functions to eliminate code duplication."""
from .optimizer_factory import create_optimizer

__all__ = [
    'create_optimizer'
]
