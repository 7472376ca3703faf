"""Infrastructure data - DataLoader factories."""
from .synthetic_regression import SyntheticRegressionDataLoaderFactory, make_regression_tensors

__all__ = [
    'SyntheticRegressionDataLoaderFactory',
    'make_regression_tensors'
]
