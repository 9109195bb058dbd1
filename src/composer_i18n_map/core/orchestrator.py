"""Orchestrator for loading plugins and dispatching lifecycle events."""

import importlib
import logging
import time
from pathlib import Path
from typing import Optional

from .composer import load_installed_packages, load_root_config, resolve_vendor_dir
from .events import Event, ScriptEvent
from .manager import HookManager
from .models import GenerationResult, RunResult

logger = logging.getLogger(__name__)


class Orchestrator:
    """Loads hook plugins and runs lifecycle events against a project."""

    # Plugin registry (hardcoded)
    PLUGIN_REGISTRY = {
        "i18n-map": "composer_i18n_map.plugins.i18n_map",
    }

    def __init__(self, plugin_options: Optional[dict[str, dict]] = None):
        """
        Initialize orchestrator and load plugins.

        Args:
            plugin_options: Optional keyword arguments per plugin name,
                passed to the plugin's constructor
        """
        self.plugin_options = plugin_options or {}
        self.plugins = {}
        self._load_plugins()

    def _load_plugins(self) -> None:
        """
        Load all registered plugins.

        Plugins are discovered via the PLUGIN_REGISTRY. Each plugin module
        must expose a PLUGIN_CLASS variable pointing to the plugin class.
        """
        for name, module_path in self.PLUGIN_REGISTRY.items():
            try:
                module = importlib.import_module(module_path)
                plugin_class = getattr(module, "PLUGIN_CLASS")
                self.plugins[name] = plugin_class(**self.plugin_options.get(name, {}))
                logger.info(f"Loaded plugin: {name}")
            except Exception as e:
                logger.error(f"Failed to load plugin {name}: {e}")
                # Continue loading other plugins

    def run(
        self,
        project_dir: Path,
        event: ScriptEvent = ScriptEvent.POST_INSTALL_CMD,
        plugin_filter: list[str] | None = None,
        vendor_dir: Path | None = None,
    ) -> RunResult:
        """
        Dispatch one lifecycle event for a project.

        Reads the project's composer.json and installed package inventory,
        activates the selected plugins, and fires the event.

        Args:
            project_dir: Root directory of the Composer project
            event: Lifecycle event to fire
            plugin_filter: Optional list of plugin names to run (None = all)
            vendor_dir: Optional vendor directory override

        Returns:
            RunResult with the outcomes returned by hooks

        Raises:
            ComposerFileError: If project metadata cannot be read
            OSError: If a hook fails to write or delete its output
        """
        start_time = time.time()
        event = ScriptEvent(event)

        config = load_root_config(project_dir)
        packages = load_installed_packages(
            resolve_vendor_dir(project_dir, config, vendor_dir)
        )

        # Determine which plugins to run
        if plugin_filter:
            plugins_to_run = {
                name: plugin
                for name, plugin in self.plugins.items()
                if name in plugin_filter
            }
            # Warn about unknown plugins
            for name in plugin_filter:
                if name not in self.plugins:
                    logger.warning(f"Plugin '{name}' not found, skipping")
        else:
            plugins_to_run = self.plugins

        manager = HookManager()
        for name, plugin in plugins_to_run.items():
            plugin.activate(manager)
            logger.debug(f"Activated plugin: {name}")

        logger.info(f"Dispatching {event.value}")
        try:
            outcomes = manager.fire(
                Event(
                    name=event,
                    project_dir=project_dir,
                    config=config,
                    packages=packages,
                )
            )
        finally:
            for plugin in plugins_to_run.values():
                plugin.deactivate(manager)

        return RunResult(
            project_dir=project_dir,
            event=event.value,
            plugins_run=list(plugins_to_run),
            results=[o for o in outcomes if isinstance(o, GenerationResult)],
            duration_seconds=round(time.time() - start_time, 2),
        )

    def list_plugins(self) -> list[dict]:
        """
        Get metadata for all loaded plugins.

        Returns:
            List of plugin metadata dictionaries
        """
        return [plugin.get_metadata() for plugin in self.plugins.values()]
