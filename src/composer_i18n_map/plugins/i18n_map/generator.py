"""Build and persist the textdomain -> version map."""

import logging
from pathlib import Path
from typing import Iterable, Optional

from ...core.filesystem import unlink_if_exists, write_if_modified
from ...core.models import (
    LIBRARY_PACKAGE_TYPE,
    GenerationAction,
    GenerationResult,
    Manifest,
    ManifestType,
    PackageRecord,
    RootConfig,
)
from .renderers import DEFAULT_OUTPUTS, RENDERERS

logger = logging.getLogger(__name__)


def resolve_target(config: RootConfig) -> Optional[tuple[str, ManifestType]]:
    """
    Decide which domain and project type the manifest is for.

    A plugin slug wins over a theme slug. Returns None when neither is set.
    """
    if config.plugin_slug is not None:
        return config.plugin_slug, ManifestType.PLUGINS
    if config.theme_slug is not None:
        return config.theme_slug, ManifestType.THEMES
    return None


def build_manifest(
    config: RootConfig,
    domain: str,
    manifest_type: ManifestType,
    packages: Iterable[PackageRecord],
) -> Manifest:
    """
    Collect textdomains of library packages into a Manifest.

    Branch aliases are looked up in the root project's ``branch-alias``
    table, keyed by each package's version.

    Args:
        config: Root project configuration
        domain: Textdomain of the consuming project
        manifest_type: Whether the project is a plugin or a theme
        packages: Installed packages, in inventory order

    Returns:
        Manifest whose packages follow the input order, later packages
        overriding earlier ones with the same textdomain
    """
    entries: dict[str, str] = {}

    for package in packages:
        if package.type != LIBRARY_PACKAGE_TYPE:
            continue

        version = package.canonical_version
        # NOTE: root alias table, not the package's own
        version = config.branch_alias.get(version, version)

        textdomain = package.textdomain
        if textdomain is None:
            logger.info(f"  {package.name} ({version}): no textdomain set")
            continue

        entries[textdomain] = version
        logger.info(f"  {package.name} ({version}): textdomain is {textdomain}")

    return Manifest(domain=domain, type=manifest_type, packages=entries)


def generate_manifest(
    config: RootConfig,
    packages: Iterable[PackageRecord],
    output_path: Optional[Path] = None,
    output_format: str = "php",
    stale_paths: Iterable[Path] = (),
) -> GenerationResult:
    """
    Generate the i18n map file, or remove it if no domain is configured.

    The file is only rewritten when its content changes.

    Args:
        config: Root project configuration
        packages: Installed packages, in inventory order
        output_path: Destination file (defaults per format)
        output_format: Key into RENDERERS ("php" or "json")
        stale_paths: Other generated files removed along with output_path
            when no domain is configured

    Returns:
        GenerationResult describing what happened to the file

    Raises:
        OSError: If the file cannot be written or deleted
    """
    renderer = RENDERERS[output_format]
    if output_path is None:
        output_path = DEFAULT_OUTPUTS[output_format]

    logger.info("Generating jetpack-library i18n map")

    target = resolve_target(config)
    if target is None:
        logger.warning(
            "Skipping jetpack-library i18n map generation, "
            ".extra.wp-plugin-slug / .extra.wp-theme-slug is not set in composer.json"
        )
        removed = unlink_if_exists(output_path)
        for path in stale_paths:
            if path != output_path:
                removed = unlink_if_exists(path) or removed
        return GenerationResult(
            action=GenerationAction.REMOVED if removed else GenerationAction.SKIPPED,
            output_path=output_path,
        )

    domain, manifest_type = target
    manifest = build_manifest(config, domain, manifest_type, packages)

    content = renderer(manifest, output_path.name)
    written = write_if_modified(output_path, content)

    return GenerationResult(
        action=GenerationAction.WRITTEN if written else GenerationAction.UNCHANGED,
        output_path=output_path,
        manifest=manifest,
    )
