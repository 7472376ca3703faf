"""Configuration management infrastructure - Type-safe YAML configuration loading."""
import os
import yaml
from dataclasses import fields
from pathlib import Path
from typing import Dict, Any, List, Optional, Union
from pydantic import BaseModel, ValidationError

from src.domain.entities.training_config import TrainingConfiguration
from src.domain.entities.tracking_config import TrackingConfiguration


class DocsConfig(BaseModel):
    """Documentation integrity settings with validation."""
    root: str = "docs"
    first_article: Optional[str] = None
    reading_order: List[str] = []
    require_complete_chain: bool = False
    ignore: List[str] = []

    class Config:
        """Pydantic configuration."""
        validate_assignment = True
        extra = "forbid"


class ConfigLoader:
    """YAML configuration loader with validation and type safety.

    The file has up to three sections (``training``, ``tracking``, ``docs``);
    a missing section, or no file at all, yields the defaults.
    """

    ENV_TRACKING_OVERRIDES = {
        'WANDB_MODE': 'mode',
        'WANDB_PROJECT': 'project',
        'WANDB_ENTITY': 'entity',
    }

    def __init__(self, config_path: Optional[Union[str, Path]] = None,
                 environ: Optional[Dict[str, str]] = None):
        """Initialize configuration loader.

        Args:
            config_path: Path to YAML configuration file (None for defaults only)
            environ: Environment mapping used for overrides (defaults to os.environ)
        """
        self.config_path = Path(config_path) if config_path is not None else None
        self.environ = os.environ if environ is None else environ
        self._cache: Optional[Dict[str, Any]] = None

    def load_training_config(self) -> TrainingConfiguration:
        """Load and validate training configuration."""
        training_data = self._section('training', TrainingConfiguration)

        # Coerce numeric fields that might come as strings in some YAML scenarios
        numeric_int_fields = ['seed', 'epochs', 'batch_size', 'num_samples']
        numeric_float_fields = ['learning_rate', 'weight_decay', 'val_fraction']
        try:
            for k in numeric_int_fields:
                if k in training_data:
                    training_data[k] = int(training_data[k])
            for k in numeric_float_fields:
                if k in training_data:
                    training_data[k] = float(training_data[k])
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid numeric value in training configuration: {e}")

        return TrainingConfiguration(**training_data)

    def load_tracking_config(self) -> TrackingConfiguration:
        """Load tracking configuration, applying WANDB_* environment overrides."""
        tracking_data = self._section('tracking', TrackingConfiguration)
        for env_name, key in self.ENV_TRACKING_OVERRIDES.items():
            value = self.environ.get(env_name)
            if value:
                tracking_data[key] = value
        if 'log_every_n_steps' in tracking_data:
            try:
                tracking_data['log_every_n_steps'] = int(tracking_data['log_every_n_steps'])
            except (TypeError, ValueError) as e:
                raise ValueError(f"Invalid numeric value in tracking configuration: {e}") from e
        if tracking_data.get('tags') is None:
            tracking_data.pop('tags', None)
        return TrackingConfiguration(**tracking_data)

    def load_docs_config(self) -> DocsConfig:
        """Load and validate documentation configuration."""
        docs_data = self._load_yaml().get('docs') or {}
        if not isinstance(docs_data, dict):
            raise ValueError("Configuration section 'docs' must be a mapping")
        try:
            return DocsConfig.model_validate(docs_data)
        except ValidationError as e:
            raise ValueError(f"Invalid docs configuration: {e}")

    def load_all_configs(self) -> Dict[str, Any]:
        """Load all configurations at once."""
        return {
            'training': self.load_training_config(),
            'tracking': self.load_tracking_config(),
            'docs': self.load_docs_config()
        }

    def _section(self, name: str, entity_cls) -> Dict[str, Any]:
        """Return a copy of a section, rejecting keys the entity doesn't define."""
        section = self._load_yaml().get(name) or {}
        if not isinstance(section, dict):
            raise ValueError(f"Configuration section '{name}' must be a mapping")
        known = {f.name for f in fields(entity_cls)}
        unknown = sorted(set(section) - known)
        if unknown:
            raise ValueError(f"Unknown key(s) in '{name}' configuration: {', '.join(unknown)}")
        return dict(section)

    def _load_yaml(self) -> Dict[str, Any]:
        """Load raw YAML data with error handling."""
        if self._cache is not None:
            return self._cache
        if self.config_path is None:
            self._cache = {}
            return self._cache
        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except FileNotFoundError:
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in configuration file: {e}")
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"Configuration file must contain a mapping: {self.config_path}")
        self._cache = data
        return self._cache

    def validate_config_file(self) -> bool:
        """Validate that configuration file can be loaded and every section parsed."""
        try:
            self.load_all_configs()
            return True
        except (FileNotFoundError, ValueError):
            return False

    def get_config_schema(self) -> Dict[str, Any]:
        """Get configuration schema for documentation."""
        return {
            'training': TrainingConfiguration.__annotations__,
            'tracking': TrackingConfiguration.__annotations__,
            'docs': DocsConfig.__annotations__
        }
