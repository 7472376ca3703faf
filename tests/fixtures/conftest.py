"""Test fixtures for unit testing."""
import textwrap

import pytest

from src.domain.entities.training_config import TrainingConfiguration
from src.domain.entities.tracking_config import TrackingConfiguration
from src.infrastructure.tracking.wandb_tracker import NullExperimentTracker


@pytest.fixture
def sample_training_config():
    """Sample training configuration for testing."""
    return TrainingConfiguration(
        seed=7,
        epochs=3,
        batch_size=16,
        learning_rate=0.05,
        optimizer="adam",
        weight_decay=0.0,
        num_samples=100,
        val_fraction=0.2
    )


@pytest.fixture
def sample_tracking_config():
    """Sample tracking configuration for testing."""
    return TrackingConfiguration(
        project="test-project",
        entity="test-team",
        run_name="unit-test",
        mode="offline",
        tags=["unit", "test"],
        log_every_n_steps=2,
        notes="from the test suite"
    )


@pytest.fixture
def null_tracker():
    """In-memory experiment tracker."""
    return NullExperimentTracker()


@pytest.fixture
def temp_dir(tmp_path):
    """Temporary directory for file-based tests."""
    return tmp_path


def _write(path, text):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(text).lstrip(), encoding="utf-8")
    return path


@pytest.fixture
def write_doc():
    """Helper writing dedented markdown files."""
    return _write


@pytest.fixture
def docs_tree(tmp_path):
    """A small, fully consistent documentation set."""
    docs = tmp_path / "docs"
    _write(docs / "index.md", """
        # Index

        Start with [the first article](one.md).

        [Next: One](one.md)
        """)
    _write(docs / "one.md", """
        # One

        ## Usage

        ```python
        def add(a: int, b: int) -> int:
            return a + b
        ```

        ![diagram](images/diagram.svg)

        See [usage](#usage) and [two's details](two.md#details).

        [Next: Two](two.md)
        """)
    _write(docs / "two.md", """
        # Two

        ## Details

        ```yaml
        training:
          epochs: 3
        ```

        [Back to the index](index.md)
        """)
    _write(docs / "images" / "diagram.svg", "<svg xmlns='http://www.w3.org/2000/svg'/>\n")
    return docs
