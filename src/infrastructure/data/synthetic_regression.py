"""PyTorch DataLoader factory for the tutorial's synthetic regression task."""
from __future__ import annotations

from typing import Tuple

import torch
from torch.utils.data import DataLoader, TensorDataset

from src.domain.entities.training_config import TrainingConfiguration

TRUE_WEIGHT = 3.0
TRUE_BIAS = 2.0
NOISE_STD = 0.1


def make_regression_tensors(num_samples: int, seed: int) -> Tuple[torch.Tensor, torch.Tensor]:
    """Sample ``y = 3x + 2 + noise`` with x uniform in [-1, 1].

    The generator is local, so the same seed always yields the same data
    regardless of global RNG state.
    """
    generator = torch.Generator().manual_seed(seed)
    x = torch.rand(num_samples, 1, generator=generator) * 2.0 - 1.0
    noise = torch.randn(num_samples, 1, generator=generator) * NOISE_STD
    y = TRUE_WEIGHT * x + TRUE_BIAS + noise
    return x, y


class SyntheticRegressionDataLoaderFactory:
    """Builds train/validation loaders sized by the training configuration."""

    def __init__(self, num_workers: int = 0):
        self.num_workers = num_workers

    def create_loaders(self, config: TrainingConfiguration) -> Tuple[DataLoader, DataLoader]:
        """Create train and validation loaders.

        Args:
            config: Training configuration (num_samples, val_fraction, batch_size, seed)

        Returns:
            (train_loader, val_loader)
        """
        x, y = make_regression_tensors(config.num_samples, config.seed)
        n_train = config.train_samples
        train_ds = TensorDataset(x[:n_train], y[:n_train])
        val_ds = TensorDataset(x[n_train:], y[n_train:])

        train_loader = DataLoader(
            train_ds,
            batch_size=config.batch_size,
            shuffle=True,
            num_workers=self.num_workers,
            generator=torch.Generator().manual_seed(config.seed),
        )
        val_loader = DataLoader(
            val_ds,
            batch_size=config.batch_size,
            shuffle=False,
            num_workers=self.num_workers,
        )
        return train_loader, val_loader
