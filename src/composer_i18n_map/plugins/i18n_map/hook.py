"""Lifecycle hook plugin that maintains the i18n map."""

import logging
from pathlib import Path
from typing import Optional

from ...core.events import Event
from ...core.hookspecs import hookimpl
from ...core.models import GenerationResult
from ...core.plugin import BasePlugin
from .generator import generate_manifest
from .renderers import DEFAULT_OUTPUTS, RENDERERS

logger = logging.getLogger(__name__)


class I18nMapPlugin(BasePlugin):
    """Regenerates the textdomain -> version map after install and update."""

    def __init__(self, output: Optional[Path] = None, output_format: str = "php"):
        """
        Args:
            output: Manifest path, relative to the project directory unless
                absolute (defaults per format)
            output_format: "php" or "json"
        """
        if output_format not in RENDERERS:
            raise ValueError(f"Unknown output format: {output_format}")
        self.output_format = output_format
        self.output = Path(output) if output else DEFAULT_OUTPUTS[output_format]

    def generate_manifest(self, event: Event) -> GenerationResult:
        """Regenerate the map for the project an event belongs to."""
        output_path = self.output
        if not output_path.is_absolute():
            output_path = event.project_dir / output_path

        result = generate_manifest(
            event.config,
            event.packages,
            output_path=output_path,
            output_format=self.output_format,
            stale_paths=[event.project_dir / path for path in DEFAULT_OUTPUTS.values()],
        )
        result.event = event.name.value
        logger.info(f"i18n map {result.action.value}: {output_path}")
        return result

    @hookimpl
    def post_install_cmd(self, event: Event) -> GenerationResult:
        """Regenerate after install."""
        return self.generate_manifest(event)

    @hookimpl
    def post_update_cmd(self, event: Event) -> GenerationResult:
        """Regenerate after update."""
        return self.generate_manifest(event)

    def get_metadata(self) -> dict:
        """Return plugin metadata."""
        return {
            "name": "i18n-map",
            "version": "0.1.0",
            "author": "composer-i18n-map",
            "description": "Maps jetpack-library textdomains to versions for WordPress translation loading",
        }
