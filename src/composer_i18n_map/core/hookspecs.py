"""Pluggy hook specifications for Composer lifecycle events."""

import pluggy

PROJECT_NAME = "composer_i18n_map"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class LifecycleHookSpec:
    """One hook per ScriptEvent; the hook name is the event name with underscores."""

    @hookspec
    def post_install_cmd(self, event):
        """Called after ``composer install`` finishes."""

    @hookspec
    def post_update_cmd(self, event):
        """Called after ``composer update`` finishes."""
