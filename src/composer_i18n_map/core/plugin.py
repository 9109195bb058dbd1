"""Base plugin interface for lifecycle hook plugins."""

from abc import ABC, abstractmethod

from .manager import HookManager


class BasePlugin(ABC):
    """
    Abstract base class for all lifecycle hook plugins.

    Subclasses implement lifecycle hooks as methods marked with
    ``hookimpl`` (see ``core/hookspecs.py``) and expose metadata.
    Activation registers the plugin with a HookManager.
    """

    @abstractmethod
    def get_metadata(self) -> dict:
        """
        Return plugin metadata.

        Returns:
            Dictionary with keys:
            - name (str): Plugin name (e.g., "i18n-map")
            - version (str): Plugin version (e.g., "0.1.0")
            - author (str): Plugin author
            - description (str): Brief description of what plugin does

        Example:
            ```python
            @hookimpl
            def post_install_cmd(self, event: Event) -> None:
                ...

            def get_metadata(self) -> dict:
                return {"name": "i18n-map", "version": "0.1.0", ...}
            ```
        """
        ...

    def activate(self, manager: HookManager) -> None:
        """Register this plugin's hooks with the manager."""
        manager.register_plugin(self, name=self.get_metadata()["name"])

    def deactivate(self, manager: HookManager) -> None:
        """Remove this plugin's hooks from the manager."""
        manager.unregister(self)

    def uninstall(self, manager: HookManager) -> None:
        """Clean up when the plugin is removed. Nothing to do by default."""
