"""Hook registration and dispatch on top of pluggy."""

import logging
from typing import Any

import pluggy

from .events import Event
from .hookspecs import PROJECT_NAME, LifecycleHookSpec

logger = logging.getLogger(__name__)


class HookManager:
    """Registers plugin instances and fires lifecycle hooks."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(LifecycleHookSpec)

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    def unregister(self, plugin: object) -> None:
        """Unregister a plugin instance."""
        self._pm.unregister(plugin)

    @property
    def hook(self) -> pluggy.HookRelay:
        """Access the hook relay for dispatching events."""
        return self._pm.hook

    def list_plugin_names(self) -> list[str]:
        """Return names of all registered plugins."""
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    def fire(self, event: Event) -> list[Any]:
        """
        Call every implementation of the hook for ``event.name``.

        Exceptions raised by an implementation propagate to the caller.

        Returns:
            Non-None hook results, in pluggy call order
        """
        logger.debug("Firing %s", event.name.hook_name)
        return getattr(self.hook, event.name.hook_name)(event=event)
