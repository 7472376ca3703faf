"""Domain services - Application business logic interfaces.

This package defines abstract interfaces for core operations,
following the Service Layer pattern to encapsulate business logic
behind contracts the application layer implements.
"""

from .training_service import TrainingService, TrainingResult
from .experiment_tracker import ExperimentTracker

__all__ = [
    'TrainingService',
    'TrainingResult',
    'ExperimentTracker'
]
