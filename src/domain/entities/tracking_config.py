"""Tracking configuration entity - Weights & Biases run settings."""
from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional

TRACKING_MODES = ("online", "offline", "disabled")


@dataclass
class TrackingConfiguration:
    """Experiment tracking settings.

    Attributes:
        project: W&B project that receives the run
        entity: W&B team or user name (None for the default entity)
        run_name: Display name of the run (None lets W&B generate one)
        mode: online, offline or disabled
        tags: Free-form tags attached to the run
        log_every_n_steps: Forward training metrics every N optimizer steps
        notes: Longer description shown on the run page
    """
    project: str = "python-conventions"
    entity: Optional[str] = None
    run_name: Optional[str] = None
    mode: str = "disabled"
    tags: List[str] = field(default_factory=list)
    log_every_n_steps: int = 10
    notes: Optional[str] = None

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not isinstance(self.project, str) or not self.project.strip():
            raise ValueError("project must be a non-empty string")
        for name in ('entity', 'run_name', 'notes'):
            if getattr(self, name) is not None and not isinstance(getattr(self, name), str):
                raise ValueError(f"{name} must be a string")
        if self.mode not in TRACKING_MODES:
            raise ValueError(f"mode must be one of: {', '.join(TRACKING_MODES)}")
        if not isinstance(self.log_every_n_steps, int) or self.log_every_n_steps <= 0:
            raise ValueError("log_every_n_steps must be a positive integer")
        if not isinstance(self.tags, (list, tuple)):
            raise ValueError("tags must be a list of strings")
        self.tags = [str(tag) for tag in self.tags]

    @property
    def enabled(self) -> bool:
        return self.mode != "disabled"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data['tags'] = list(self.tags)
        return data
