"""Weights & Biases experiment tracker."""
import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple

from src.domain.entities.tracking_config import TrackingConfiguration
from src.domain.entities.training_config import TrainingConfiguration
from src.domain.services.experiment_tracker import ExperimentTracker

logger = logging.getLogger(__name__)


def _to_scalar(value: Any) -> Any:
    """Unwrap tensors and numpy scalars so W&B receives plain numbers."""
    item = getattr(value, 'item', None)
    if callable(item):
        try:
            return item()
        except (TypeError, ValueError, RuntimeError):
            return value
    return value


class WandbExperimentTracker(ExperimentTracker):
    """Tracker that sends the run to Weights & Biases.

    ``wandb`` is imported when a run starts, so importing this module never
    requires the client to be configured or logged in.
    """

    def __init__(self):
        self._run = None

    @property
    def run(self):
        return self._run

    @property
    def is_active(self) -> bool:
        return self._run is not None

    def start_run(self, training_config: TrainingConfiguration,
                  tracking_config: TrackingConfiguration) -> None:
        """Call ``wandb.init`` with the run's configuration."""
        import wandb

        if self._run is not None:
            raise RuntimeError("a run is already active; call finish() first")
        self._run = wandb.init(
            project=tracking_config.project,
            entity=tracking_config.entity,
            name=tracking_config.run_name,
            mode=tracking_config.mode,
            tags=list(tracking_config.tags) or None,
            notes=tracking_config.notes,
            config=training_config.to_dict(),
            reinit=True,
        )
        logger.info("Started W&B run (project=%s, mode=%s)", tracking_config.project, tracking_config.mode)

    def log_metrics(self, metrics: Mapping[str, Any], step: Optional[int] = None) -> None:
        if self._run is None:
            raise RuntimeError("log_metrics() called before start_run()")
        payload = {k: _to_scalar(v) for k, v in metrics.items()}
        if step is None:
            self._run.log(payload)
        else:
            self._run.log(payload, step=step)

    def log_summary(self, metrics: Mapping[str, Any]) -> None:
        if self._run is None:
            raise RuntimeError("log_summary() called before start_run()")
        self._run.summary.update({k: _to_scalar(v) for k, v in metrics.items()})

    def finish(self, exit_code: int = 0) -> None:
        if self._run is None:
            return
        run, self._run = self._run, None
        run.finish(exit_code=exit_code)
        logger.info("Finished W&B run (exit_code=%d)", exit_code)


class NullExperimentTracker(ExperimentTracker):
    """Tracker that keeps metrics in memory; used when tracking is disabled."""

    def __init__(self):
        self.config: Dict[str, Any] = {}
        self.history: List[Tuple[Optional[int], Dict[str, Any]]] = []
        self.summary: Dict[str, Any] = {}
        self.exit_code: Optional[int] = None
        self._active = False

    @property
    def is_active(self) -> bool:
        return self._active

    def start_run(self, training_config: TrainingConfiguration,
                  tracking_config: TrackingConfiguration) -> None:
        self.config = training_config.to_dict()
        self.history = []
        self.summary = {}
        self.exit_code = None
        self._active = True

    def log_metrics(self, metrics: Mapping[str, Any], step: Optional[int] = None) -> None:
        if not self._active:
            raise RuntimeError("log_metrics() called before start_run()")
        self.history.append((step, {k: _to_scalar(v) for k, v in metrics.items()}))

    def log_summary(self, metrics: Mapping[str, Any]) -> None:
        if not self._active:
            raise RuntimeError("log_summary() called before start_run()")
        self.summary.update({k: _to_scalar(v) for k, v in metrics.items()})

    def finish(self, exit_code: int = 0) -> None:
        if self._active:
            self.exit_code = exit_code
            self._active = False


def create_tracker(tracking_config: TrackingConfiguration) -> ExperimentTracker:
    """Pick the tracker implementation for a tracking configuration."""
    if not tracking_config.enabled:
        return NullExperimentTracker()
    return WandbExperimentTracker()
