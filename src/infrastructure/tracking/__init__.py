"""Infrastructure experiment tracking - Weights & Biases and in-memory trackers."""
from .wandb_tracker import NullExperimentTracker, WandbExperimentTracker, create_tracker

__all__ = [
    'NullExperimentTracker',
    'WandbExperimentTracker',
    'create_tracker'
]
