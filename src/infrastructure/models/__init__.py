"""Infrastructure models - Framework-specific model adapters.

This package contains the PyTorch Lightning module trained by the
experiment-tracking tutorial.
"""

from .linear_regression import LinearRegressionModule

__all__ = [
    'LinearRegressionModule'
]
