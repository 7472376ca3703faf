"""Shared optimizer factory - one place that maps config names to torch optimizers."""
import torch
import torch.nn as nn
from typing import Any, Iterable

from src.domain.entities.training_config import TrainingConfiguration


def _coerce_parameters(parameters: Any) -> Iterable:
    """Ensure parameters are valid for torch.optim.

    Generators are materialised; anything that is not a tensor, parameter or
    param-group dict raises TypeError rather than silently training nothing.
    """
    if isinstance(parameters, (nn.Parameter, torch.Tensor)):
        return [parameters]
    coerced = list(parameters)
    if not coerced:
        raise ValueError("optimizer got an empty parameter list")
    valid_types = (nn.Parameter, torch.Tensor, dict)
    for p in coerced:
        if not isinstance(p, valid_types):
            raise TypeError(f"unsupported parameter type: {type(p).__name__}")
    return coerced


def create_optimizer(parameters: Any, config: TrainingConfiguration) -> torch.optim.Optimizer:
    """Create the optimizer named by ``config.optimizer``.

    Args:
        parameters: Model parameters to optimize
        config: Training configuration with optimizer hyperparameters

    Returns:
        Configured Adam, AdamW or SGD optimizer
    """
    coerced = _coerce_parameters(parameters)
    if config.optimizer == "adam":
        return torch.optim.Adam(coerced, lr=config.learning_rate, weight_decay=config.weight_decay)
    if config.optimizer == "adamw":
        return torch.optim.AdamW(coerced, lr=config.learning_rate, weight_decay=config.weight_decay)
    if config.optimizer == "sgd":
        return torch.optim.SGD(coerced, lr=config.learning_rate, weight_decay=config.weight_decay)
    raise ValueError(f"unsupported optimizer: {config.optimizer}")
