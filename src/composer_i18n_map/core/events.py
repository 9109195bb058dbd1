"""Lifecycle events passed to plugin hooks."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from .models import PackageRecord, RootConfig


class ScriptEvent(str, Enum):
    """Package manager lifecycle events a plugin can implement hooks for."""

    POST_INSTALL_CMD = "post-install-cmd"
    POST_UPDATE_CMD = "post-update-cmd"

    @property
    def hook_name(self) -> str:
        """Name of the pluggy hook fired for this event."""
        return self.value.replace("-", "_")


@dataclass
class Event:
    """
    Context handed to a hook when a lifecycle event fires.

    Attributes:
        name: Event that fired
        project_dir: Root directory of the project
        config: Root project configuration
        packages: Installed packages in inventory order
    """

    name: ScriptEvent
    project_dir: Path
    config: RootConfig
    packages: list[PackageRecord] = field(default_factory=list)
