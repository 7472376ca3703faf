"""PyTorch Lightning implementation of the example training service."""
import logging
from typing import Any, Dict, Optional

import pytorch_lightning as pl

from src.domain.entities.tracking_config import TrackingConfiguration
from src.domain.entities.training_config import TrainingConfiguration
from src.domain.services.experiment_tracker import ExperimentTracker
from src.domain.services.training_service import TrainingService, TrainingResult
from src.infrastructure.callbacks import ExperimentTrackingCallback
from src.infrastructure.models.linear_regression import LinearRegressionModule

logger = logging.getLogger(__name__)


class LightningTrainingService(TrainingService):
    """Concrete training service using PyTorch Lightning.

    Runs the experiment-tracking tutorial's example: fit a linear model to
    synthetic data, streaming losses to the experiment tracker, and record
    the final numbers as the run summary.
    """

    def __init__(self, tracker: ExperimentTracker, data_loader_factory: Any,
                 tracking_config: Optional[TrackingConfiguration] = None,
                 accelerator: str = "cpu"):
        """Initialize the training service.

        Args:
            tracker: Experiment tracker receiving metrics
            data_loader_factory: Factory with ``create_loaders(training_config)``
            tracking_config: Tracking settings (defaults to a disabled configuration)
            accelerator: Lightning accelerator name
        """
        self.tracker = tracker
        self.data_loader_factory = data_loader_factory
        self.tracking_config = tracking_config or TrackingConfiguration()
        self.accelerator = accelerator
        self.model: Optional[LinearRegressionModule] = None

    def train(self, training_config: TrainingConfiguration) -> TrainingResult:
        """Execute training with PyTorch Lightning."""
        self.validate_configuration(training_config)
        pl.seed_everything(training_config.seed, workers=True)

        self.model = LinearRegressionModule(training_config)
        train_loader, val_loader = self.data_loader_factory.create_loaders(training_config)
        tracking_cb = ExperimentTrackingCallback(self.tracker, self.tracking_config.log_every_n_steps)

        trainer = pl.Trainer(**self._build_trainer_kwargs(training_config, [tracking_cb]))

        with self.tracker:
            self.tracker.start_run(training_config, self.tracking_config)
            logger.info("Training for %d epochs (%d steps per epoch)",
                        training_config.epochs, training_config.steps_per_epoch)
            trainer.fit(self.model, train_loader, val_loader)

            result = TrainingResult(
                final_train_loss=tracking_cb.last_train_loss if tracking_cb.last_train_loss is not None else float('inf'),
                best_val_loss=tracking_cb.best_val_loss if tracking_cb.best_val_loss is not None else float('inf'),
                total_steps=int(trainer.global_step),
                epochs=int(trainer.current_epoch),
            )
            summary = result.to_dict()
            summary.update({'weight': self.model.weight, 'bias': self.model.bias})
            self.tracker.log_summary(summary)

        logger.info("Training complete: %r", result)
        return result

    def validate_configuration(self, training_config: TrainingConfiguration) -> None:
        """Validate training configuration before a run."""
        # Duck-typed so callers may pass any config-like object
        lr = getattr(training_config, 'learning_rate', None)
        if lr is None or lr <= 0:
            raise ValueError("learning rate must be positive")
        batch_size = getattr(training_config, 'batch_size', None)
        if batch_size is None or batch_size <= 0:
            raise ValueError("batch size must be positive")

    def _build_trainer_kwargs(self, config: TrainingConfiguration, callbacks) -> Dict[str, Any]:
        """Build trainer arguments from configuration."""
        return {
            'max_epochs': config.epochs,
            'accelerator': self.accelerator,
            'devices': 1,
            'logger': False,  # metrics go through the experiment tracker
            'enable_checkpointing': False,
            'enable_progress_bar': False,
            'enable_model_summary': False,
            'num_sanity_val_steps': 0,
            'log_every_n_steps': self.tracking_config.log_every_n_steps,
            'callbacks': callbacks,
            'deterministic': True,
        }
