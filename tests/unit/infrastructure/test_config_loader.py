"""Tests for infrastructure configuration management."""
import pytest

from src.infrastructure.config.config_loader import ConfigLoader, DocsConfig
from src.infrastructure.config import ConfigLoader as ConfigLoaderImport
from src.domain.entities.training_config import TrainingConfiguration
from src.domain.entities.tracking_config import TrackingConfiguration


class TestDocsConfig:
    """Test cases for DocsConfig."""

    def test_defaults(self):
        config = DocsConfig()

        assert config.root == "docs"
        assert config.first_article is None
        assert config.reading_order == []
        assert config.require_complete_chain is False

    def test_validation(self):
        """Test docs config validation via Pydantic."""
        config = DocsConfig(root="guides", reading_order=["a.md", "b.md"])
        assert config.reading_order == ["a.md", "b.md"]

        # Should allow assignment after creation
        config.root = "other"
        assert config.root == "other"

        with pytest.raises(Exception):
            DocsConfig(unknown_option=True)


class TestConfigLoader:
    """Test cases for ConfigLoader."""

    @pytest.fixture
    def sample_config_yaml(self):
        """Sample YAML configuration content."""
        return """
training:
  seed: 7
  epochs: 5
  batch_size: 8
  learning_rate: 1e-2
  optimizer: "sgd"

tracking:
  project: "tutorials"
  mode: "offline"
  tags: ["a", "b"]
  log_every_n_steps: 3

docs:
  root: "guides"
  first_article: "index.md"
  reading_order: ["index.md", "one.md"]
  require_complete_chain: true
"""

    @pytest.fixture
    def config_file(self, temp_dir, sample_config_yaml):
        path = temp_dir / "config.yaml"
        path.write_text(sample_config_yaml, encoding="utf-8")
        return path

    def test_package_export(self):
        assert ConfigLoaderImport is ConfigLoader

    def test_load_training_config(self, config_file):
        config = ConfigLoader(config_file, environ={}).load_training_config()

        assert isinstance(config, TrainingConfiguration)
        assert config.epochs == 5
        # PyYAML reads 1e-2 (no dot) as a string; it is coerced
        assert config.learning_rate == 0.01
        assert config.optimizer == "sgd"
        assert config.num_samples == TrainingConfiguration().num_samples

    def test_load_tracking_config(self, config_file):
        config = ConfigLoader(config_file, environ={}).load_tracking_config()

        assert isinstance(config, TrackingConfiguration)
        assert config.project == "tutorials"
        assert config.mode == "offline"
        assert config.tags == ["a", "b"]
        assert config.log_every_n_steps == 3

    def test_environment_overrides_tracking(self, config_file):
        environ = {'WANDB_MODE': 'disabled', 'WANDB_PROJECT': 'from-env'}
        config = ConfigLoader(config_file, environ=environ).load_tracking_config()

        assert config.mode == "disabled"
        assert config.project == "from-env"

    def test_load_docs_config(self, config_file):
        config = ConfigLoader(config_file, environ={}).load_docs_config()

        assert config.root == "guides"
        assert config.first_article == "index.md"
        assert config.require_complete_chain is True

    def test_load_all_configs(self, config_file):
        configs = ConfigLoader(config_file, environ={}).load_all_configs()

        assert set(configs) == {'training', 'tracking', 'docs'}

    def test_no_file_gives_defaults(self):
        configs = ConfigLoader(None, environ={}).load_all_configs()

        assert configs['training'] == TrainingConfiguration()
        assert configs['tracking'] == TrackingConfiguration()
        assert configs['docs'] == DocsConfig()

    def test_missing_sections_give_defaults(self, temp_dir):
        path = temp_dir / "partial.yaml"
        path.write_text("training:\n  epochs: 2\n", encoding="utf-8")
        loader = ConfigLoader(path, environ={})

        assert loader.load_training_config().epochs == 2
        assert loader.load_tracking_config() == TrackingConfiguration()

    def test_empty_file(self, temp_dir):
        path = temp_dir / "empty.yaml"
        path.write_text("", encoding="utf-8")

        assert ConfigLoader(path, environ={}).load_training_config() == TrainingConfiguration()

    def test_unknown_key_rejected(self, temp_dir):
        path = temp_dir / "bad.yaml"
        path.write_text("training:\n  epoch: 2\n", encoding="utf-8")

        with pytest.raises(ValueError, match="epoch"):
            ConfigLoader(path, environ={}).load_training_config()

    def test_invalid_value_rejected(self, temp_dir):
        path = temp_dir / "bad.yaml"
        path.write_text("training:\n  batch_size: zero\n", encoding="utf-8")

        with pytest.raises(ValueError):
            ConfigLoader(path, environ={}).load_training_config()

    def test_invalid_docs_section(self, temp_dir):
        path = temp_dir / "bad.yaml"
        path.write_text("docs:\n  reading_order: 5\n", encoding="utf-8")

        with pytest.raises(ValueError, match="docs"):
            ConfigLoader(path, environ={}).load_docs_config()

    @pytest.mark.parametrize("text", [
        "tracking:\n  log_every_n_steps: null\n",
        "tracking:\n  log_every_n_steps: often\n",
        "tracking:\n  project: 123\n",
        "tracking:\n  tags: 7\n",
        "tracking: [a, b]\n",
    ])
    def test_invalid_tracking_values_raise_value_error(self, temp_dir, text):
        path = temp_dir / "bad.yaml"
        path.write_text(text, encoding="utf-8")

        with pytest.raises(ValueError):
            ConfigLoader(path, environ={}).load_tracking_config()

    @pytest.mark.parametrize("text", ["docs: x\n", "docs: [a]\n"])
    def test_docs_section_must_be_a_mapping(self, temp_dir, text):
        path = temp_dir / "bad.yaml"
        path.write_text(text, encoding="utf-8")

        with pytest.raises(ValueError, match="docs"):
            ConfigLoader(path, environ={}).load_docs_config()

    def test_missing_file(self, temp_dir):
        with pytest.raises(FileNotFoundError):
            ConfigLoader(temp_dir / "missing.yaml").load_training_config()

    def test_malformed_yaml(self, temp_dir):
        path = temp_dir / "broken.yaml"
        path.write_text("training: [unclosed\n", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid YAML"):
            ConfigLoader(path).load_training_config()

    def test_non_mapping_file(self, temp_dir):
        path = temp_dir / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(ValueError):
            ConfigLoader(path).load_training_config()

    def test_validate_config_file(self, config_file, temp_dir):
        assert ConfigLoader(config_file, environ={}).validate_config_file() is True
        assert ConfigLoader(temp_dir / "missing.yaml").validate_config_file() is False

    def test_get_config_schema(self):
        schema = ConfigLoader(None).get_config_schema()

        assert 'learning_rate' in schema['training']
        assert 'mode' in schema['tracking']
        assert 'reading_order' in schema['docs']
