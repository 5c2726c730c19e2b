import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

DEFAULT_CONFIG: dict = {
    "project_root": ".",
    "scratchpad_dir": "scratchpads/active",
    "completed_dir": "scratchpads/completed",
    "reviewer": "Review Agent",
    "tool_timeout": 30,  # seconds, per collaborator call
    "queue_script": "src/task-queue.sh",
    "monitor_script": "src/hybrid-monitor.sh",
    "queue_task_timeout": 1800,  # seconds, passed to the queue for enqueued reviews
}


def load_config(config_path: str = ".reviewpad.yml", cli_overrides: Optional[dict] = None) -> dict:
    """
    Load configuration by merging (in order of precedence):
      1. Built-in defaults
      2. .reviewpad.yml in the current directory
      3. REVIEWPAD_PROJECT_ROOT environment variable
      4. CLI argument overrides
    """
    config = dict(DEFAULT_CONFIG)

    path = Path(config_path)
    if path.exists():
        with open(path) as f:
            file_config = yaml.safe_load(f) or {}
        if not isinstance(file_config, dict):
            raise ValueError(f"{config_path} must contain a YAML mapping, got {type(file_config).__name__}")
        config.update(file_config)

    env_root = os.environ.get("REVIEWPAD_PROJECT_ROOT")
    if env_root:
        config["project_root"] = env_root

    if cli_overrides:
        for key, value in cli_overrides.items():
            if value is not None:
                config[key] = value

    return config


@dataclass(frozen=True)
class ReviewSettings:
    """Resolved settings passed explicitly into every pipeline component."""

    project_root: Path
    scratchpad_dir: Path
    completed_dir: Path
    reviewer: str = DEFAULT_CONFIG["reviewer"]
    tool_timeout: int = DEFAULT_CONFIG["tool_timeout"]
    queue_script: Path = Path(DEFAULT_CONFIG["queue_script"])
    monitor_script: Path = Path(DEFAULT_CONFIG["monitor_script"])
    queue_task_timeout: int = DEFAULT_CONFIG["queue_task_timeout"]

    @classmethod
    def from_config(cls, config: dict) -> "ReviewSettings":
        """Build settings from a load_config() dict, resolving paths against project_root."""
        merged = {**DEFAULT_CONFIG, **config}
        root = Path(merged["project_root"]).expanduser().resolve()
        return cls(
            project_root=root,
            scratchpad_dir=root / merged["scratchpad_dir"],
            completed_dir=root / merged["completed_dir"],
            reviewer=str(merged["reviewer"]),
            tool_timeout=int(merged["tool_timeout"]),
            queue_script=root / merged["queue_script"],
            monitor_script=root / merged["monitor_script"],
            queue_task_timeout=int(merged["queue_task_timeout"]),
        )
