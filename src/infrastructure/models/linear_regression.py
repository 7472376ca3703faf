"""PyTorch Lightning module for the experiment-tracking tutorial.

A single linear layer fitted to synthetic data is enough to show metrics
moving on a W&B dashboard without a GPU or a download.
"""
import pytorch_lightning as pl
import torch
import torch.nn as nn
import torch.nn.functional as F
from typing import Tuple

from src.domain.entities.training_config import TrainingConfiguration
from src.shared.factories.optimizer_factory import create_optimizer


class LinearRegressionModule(pl.LightningModule):
    """Lightning wrapper around ``nn.Linear(1, 1)`` trained with MSE."""

    def __init__(self, training_config: TrainingConfiguration):
        """Initialize the module.

        Args:
            training_config: Training hyperparameters (optimizer, learning rate, ...)
        """
        super().__init__()
        self.save_hyperparameters(training_config.to_dict())
        self.training_config = training_config
        self.linear = nn.Linear(1, 1)

    def forward(self, x: torch.Tensor) -> torch.Tensor:
        return self.linear(x)

    def training_step(self, batch: Tuple[torch.Tensor, torch.Tensor], batch_idx: int) -> torch.Tensor:
        x, y = batch
        loss = F.mse_loss(self(x), y)
        self.log('train_loss', loss, on_step=True, on_epoch=True, batch_size=x.size(0))
        return loss

    def validation_step(self, batch: Tuple[torch.Tensor, torch.Tensor], batch_idx: int) -> torch.Tensor:
        x, y = batch
        loss = F.mse_loss(self(x), y)
        self.log('val_loss', loss, on_step=False, on_epoch=True, batch_size=x.size(0))
        return loss

    def configure_optimizers(self) -> torch.optim.Optimizer:
        """Create the optimizer named in the training configuration."""
        return create_optimizer(self.parameters(), self.training_config)

    @property
    def weight(self) -> float:
        return float(self.linear.weight.detach().item())

    @property
    def bias(self) -> float:
        return float(self.linear.bias.detach().item())
