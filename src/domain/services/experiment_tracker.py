"""Experiment tracking contract - where training metrics are sent."""
from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

from src.domain.entities.tracking_config import TrackingConfiguration
from src.domain.entities.training_config import TrainingConfiguration


class ExperimentTracker(ABC):
    """Abstract interface for experiment tracking backends.

    A tracker is started once per run with the run's configuration, receives
    metrics while training progresses and is finished at the end. Trackers
    are context managers: leaving the ``with`` block finishes the run, with
    a non-zero exit code when the block raised.
    """

    @abstractmethod
    def start_run(self, training_config: TrainingConfiguration,
                  tracking_config: TrackingConfiguration) -> None:
        """Start a new run and record its configuration."""
        pass

    @abstractmethod
    def log_metrics(self, metrics: Mapping[str, Any], step: Optional[int] = None) -> None:
        """Record metrics for a step.

        Raises:
            RuntimeError: If no run has been started
        """
        pass

    @abstractmethod
    def log_summary(self, metrics: Mapping[str, Any]) -> None:
        """Record end-of-run summary values."""
        pass

    @abstractmethod
    def finish(self, exit_code: int = 0) -> None:
        """Finish the active run. Finishing twice is a no-op."""
        pass

    @property
    @abstractmethod
    def is_active(self) -> bool:
        pass

    def __enter__(self) -> "ExperimentTracker":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self.is_active:
            self.finish(exit_code=1 if exc_type is not None else 0)
        return False
