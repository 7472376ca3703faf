"""Dependency injection container for clean component wiring."""
from pathlib import Path
from typing import Any, Dict, Optional

from src.domain.entities.training_config import TrainingConfiguration
from src.domain.entities.tracking_config import TrackingConfiguration
from src.domain.repositories.document_repository import DocumentRepository
from src.domain.services.experiment_tracker import ExperimentTracker
from src.domain.services.training_service import TrainingService
from src.infrastructure.config.config_loader import DocsConfig
from src.infrastructure.repositories.file_document_repository import FileDocumentRepository


class Container:
    """Simple dependency injection container.

    Provides centralized component wiring and dependency management,
    following the Dependency Inversion Principle.
    """

    def __init__(self):
        """Initialize container with empty service registry."""
        self._services: Dict[str, Any] = {}
        self._configs: Dict[str, Any] = {}

    def register_configs(self, training_config: Optional[TrainingConfiguration] = None,
                         tracking_config: Optional[TrackingConfiguration] = None,
                         docs_config: Optional[DocsConfig] = None) -> None:
        """Register configuration objects.

        Args:
            training_config: Training hyperparameters
            tracking_config: Experiment tracking settings
            docs_config: Documentation integrity settings
        """
        if training_config is not None:
            self._configs['training'] = training_config
        if tracking_config is not None:
            self._configs['tracking'] = tracking_config
        if docs_config is not None:
            self._configs['docs'] = docs_config

    def get_document_repository(self) -> DocumentRepository:
        """Get document repository instance (singleton pattern)."""
        if 'document_repo' not in self._services:
            docs_config = self._configs.get('docs') or DocsConfig()
            self._services['document_repo'] = FileDocumentRepository(
                root=Path(docs_config.root),
                ignore=docs_config.ignore
            )
        return self._services['document_repo']

    def get_integrity_service(self) -> Any:
        """Get documentation integrity service instance."""
        if 'integrity_service' not in self._services:
            # Import here to avoid circular dependencies
            from src.application.services.documentation_integrity_service import DocumentationIntegrityService
            docs_config = self._configs.get('docs') or DocsConfig()
            self._services['integrity_service'] = DocumentationIntegrityService(
                repository=self.get_document_repository(),
                first_article=docs_config.first_article,
                reading_order=docs_config.reading_order,
                require_complete_chain=docs_config.require_complete_chain
            )
        return self._services['integrity_service']

    def get_experiment_tracker(self) -> ExperimentTracker:
        """Get the experiment tracker matching the tracking configuration."""
        if 'tracker' not in self._services:
            from src.infrastructure.tracking.wandb_tracker import create_tracker
            tracking_config = self._configs.get('tracking') or TrackingConfiguration()
            self._services['tracker'] = create_tracker(tracking_config)
        return self._services['tracker']

    def get_data_loader_factory(self) -> Any:
        """Get data loader factory instance."""
        if 'data_loader_factory' not in self._services:
            from src.infrastructure.data.synthetic_regression import SyntheticRegressionDataLoaderFactory
            self._services['data_loader_factory'] = SyntheticRegressionDataLoaderFactory()
        return self._services['data_loader_factory']

    def get_training_service(self) -> TrainingService:
        """Get training service instance (singleton pattern)."""
        if 'training_service' not in self._services:
            from src.application.services.lightning_training_service import LightningTrainingService
            self._services['training_service'] = LightningTrainingService(
                tracker=self.get_experiment_tracker(),
                data_loader_factory=self.get_data_loader_factory(),
                tracking_config=self._configs.get('tracking')
            )
        return self._services['training_service']

    def get_config(self, config_name: str) -> Any:
        """Get registered configuration by name.

        Args:
            config_name: Name of configuration ('training', 'tracking', 'docs')

        Returns:
            Configuration object

        Raises:
            KeyError: If configuration not found
        """
        if config_name not in self._configs:
            raise KeyError(f"Configuration '{config_name}' not registered")
        return self._configs[config_name]

    def clear_services(self) -> None:
        """Clear service registry (useful for testing)."""
        self._services.clear()
