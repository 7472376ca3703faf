"""Application layer services - Use case implementations.

This package contains the concrete services the command line drives:
the documentation integrity check and the example training run.
"""

from .documentation_integrity_service import DocumentationIntegrityService
from .lightning_training_service import LightningTrainingService

__all__ = [
    'DocumentationIntegrityService',
    'LightningTrainingService'
]
