"""i18n map generator plugin."""

from .hook import I18nMapPlugin

# Plugin class exposed for orchestrator discovery
PLUGIN_CLASS = I18nMapPlugin

__all__ = ["I18nMapPlugin", "PLUGIN_CLASS"]
