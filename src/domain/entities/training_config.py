"""Training configuration entity - the configuration record used throughout the tutorials."""
import math
from dataclasses import dataclass, fields, replace as dataclass_replace
from typing import Any, Dict, Mapping

SUPPORTED_OPTIMIZERS = ("adam", "adamw", "sgd")


@dataclass
class TrainingConfiguration:
    """Training hyperparameters with validation and type safety.

    This entity is the configuration record the articles build up step by
    step: a handful of typed fields with sensible defaults, validated once
    at construction time so the rest of a training script can trust it.

    Attributes:
        seed: Random seed for reproducibility
        epochs: Number of full passes over the training data
        batch_size: Number of samples per optimization step
        learning_rate: Step size for the optimizer
        optimizer: Optimizer name (adam, adamw or sgd)
        weight_decay: L2 regularization weight decay
        num_samples: Size of the synthetic regression dataset
        val_fraction: Fraction of samples held out for validation
    """
    seed: int = 42
    epochs: int = 10
    batch_size: int = 32
    learning_rate: float = 1e-3
    optimizer: str = "adam"
    weight_decay: float = 0.0
    num_samples: int = 256
    val_fraction: float = 0.2

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.epochs <= 0:
            raise ValueError("epochs must be positive")
        if self.batch_size <= 0:
            raise ValueError("batch_size must be positive")
        if self.learning_rate <= 0:
            raise ValueError("learning_rate must be positive")
        if self.weight_decay < 0:
            raise ValueError("weight_decay must be non-negative")
        if not 0 < self.val_fraction < 1:
            raise ValueError("val_fraction must be between 0 and 1 (exclusive)")
        if self.num_samples < 2:
            raise ValueError("num_samples must be at least 2")
        if self.optimizer not in SUPPORTED_OPTIMIZERS:
            raise ValueError(f"optimizer must be one of: {', '.join(SUPPORTED_OPTIMIZERS)}")

    @property
    def val_samples(self) -> int:
        """Number of validation samples (never zero)."""
        return min(self.num_samples - 1, max(1, int(self.num_samples * self.val_fraction)))

    @property
    def train_samples(self) -> int:
        """Number of training samples."""
        return self.num_samples - self.val_samples

    @property
    def steps_per_epoch(self) -> int:
        """Optimizer steps in one epoch (the last batch may be partial)."""
        return math.ceil(self.train_samples / self.batch_size)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TrainingConfiguration":
        """Build a configuration from a mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    def replace(self, **overrides: Any) -> "TrainingConfiguration":
        """Return a new, re-validated configuration with ``overrides`` applied."""
        return dataclass_replace(self, **overrides)
