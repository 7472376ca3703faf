"""Training callbacks - forward Lightning metrics to an experiment tracker."""
import logging
from typing import Any, Optional

import pytorch_lightning as pl
from pytorch_lightning.callbacks import Callback

from src.domain.services.experiment_tracker import ExperimentTracker

logger = logging.getLogger(__name__)


def _as_float(value: Any) -> Optional[float]:
    if value is None:
        return None
    if isinstance(value, dict):
        value = value.get('loss')
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


class ExperimentTrackingCallback(Callback):
    """Sends train and validation losses to the tracker.

    Training loss is forwarded every ``log_every_n_steps`` optimizer steps,
    validation loss after every validation run (sanity checks excluded).
    The callback also remembers the last training loss and the best
    validation loss so the training service can report them.
    """

    def __init__(self, tracker: ExperimentTracker, log_every_n_steps: int = 10):
        super().__init__()
        if log_every_n_steps <= 0:
            raise ValueError("log_every_n_steps must be positive")
        self.tracker = tracker
        self.log_every_n_steps = log_every_n_steps
        self.last_train_loss: Optional[float] = None
        self.best_val_loss: Optional[float] = None

    def on_train_batch_end(self, trainer: pl.Trainer, pl_module: pl.LightningModule,
                           outputs: Any, batch: Any, batch_idx: int) -> None:
        loss = _as_float(outputs)
        if loss is None:
            return
        self.last_train_loss = loss
        step = int(trainer.global_step)
        if step % self.log_every_n_steps == 0:
            self.tracker.log_metrics({'train_loss': loss, 'epoch': int(trainer.current_epoch)}, step=step)

    def on_train_epoch_end(self, trainer: pl.Trainer, pl_module: pl.LightningModule) -> None:
        epoch_loss = _as_float(trainer.callback_metrics.get('train_loss_epoch'))
        if epoch_loss is None:
            return
        self.last_train_loss = epoch_loss
        self.tracker.log_metrics(
            {'train_loss_epoch': epoch_loss, 'epoch': int(trainer.current_epoch)},
            step=int(trainer.global_step),
        )

    def on_validation_end(self, trainer: pl.Trainer, pl_module: pl.LightningModule) -> None:
        if trainer.sanity_checking:
            return
        # Skip if metric is not available
        val_loss = _as_float(trainer.callback_metrics.get('val_loss'))
        if val_loss is None:
            return
        if self.best_val_loss is None or val_loss < self.best_val_loss:
            self.best_val_loss = val_loss
        self.tracker.log_metrics(
            {'val_loss': val_loss, 'epoch': int(trainer.current_epoch)},
            step=int(trainer.global_step),
        )
        logger.debug("epoch %d val_loss=%.6g", trainer.current_epoch, val_loss)


__all__ = [
    'ExperimentTrackingCallback'
]
