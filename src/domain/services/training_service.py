"""Training orchestration service - Business logic for the example training run."""
from abc import ABC, abstractmethod
from typing import Any, Dict

from src.domain.entities.training_config import TrainingConfiguration


class TrainingResult:
    """Result of a training session.

    Encapsulates the outcomes of a training run so callers (and the
    experiment tracker summary) can report on it.
    """

    def __init__(self, final_train_loss: float, best_val_loss: float, total_steps: int, epochs: int):
        """Initialize training result.

        Args:
            final_train_loss: Training loss at the end of the last epoch
            best_val_loss: Best validation loss achieved during training
            total_steps: Total number of optimizer steps completed
            epochs: Number of epochs completed
        """
        self.final_train_loss = final_train_loss
        self.best_val_loss = best_val_loss
        self.total_steps = total_steps
        self.epochs = epochs

    def to_dict(self) -> Dict[str, Any]:
        return {
            'final_train_loss': self.final_train_loss,
            'best_val_loss': self.best_val_loss,
            'total_steps': self.total_steps,
            'epochs': self.epochs,
        }

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (f"TrainingResult(final_train_loss={self.final_train_loss:.4f}, "
                f"best_val_loss={self.best_val_loss:.4f}, total_steps={self.total_steps}, "
                f"epochs={self.epochs})")


class TrainingService(ABC):
    """Abstract interface for training orchestration.

    Defines the contract for running the tutorial's example training script,
    allowing different implementations (PyTorch Lightning, a plain loop, ...)
    to provide the same functionality.
    """

    @abstractmethod
    def train(self, training_config: TrainingConfiguration) -> TrainingResult:
        """Execute the complete training run.

        Args:
            training_config: Training hyperparameters and settings

        Returns:
            TrainingResult with final metrics
        """
        pass

    @abstractmethod
    def validate_configuration(self, training_config: TrainingConfiguration) -> None:
        """Validate training configuration before a run.

        Args:
            training_config: Training configuration to validate

        Raises:
            ValueError: If configuration is invalid
        """
        pass
