"""Readers for Composer's on-disk project state."""

import json
import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from .models import PackageRecord, RootConfig

logger = logging.getLogger(__name__)

DEFAULT_COMPOSER_FILE = "composer.json"
INSTALLED_FILE = Path("composer") / "installed.json"


class ComposerFileError(Exception):
    """Raised when a Composer file cannot be read or understood."""


def _read_json(path: Path):
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ComposerFileError(f"Malformed JSON in {path}: {e}") from e
    except OSError as e:
        raise ComposerFileError(f"Could not read {path}: {e}") from e


def composer_file(project_dir: Path) -> Path:
    """
    Locate the root composer file.

    Honors the ``COMPOSER`` environment variable the same way Composer
    does: a file name (or path) relative to the project directory.
    """
    return project_dir / os.environ.get("COMPOSER", DEFAULT_COMPOSER_FILE)


def load_root_config(project_dir: Path) -> RootConfig:
    """
    Load the root project's configuration.

    Args:
        project_dir: Directory containing composer.json

    Returns:
        Parsed RootConfig

    Raises:
        ComposerFileError: If the file is missing, malformed, or has
            values of the wrong type
    """
    path = composer_file(project_dir)
    data = _read_json(path)
    if not isinstance(data, dict):
        raise ComposerFileError(f"{path} does not contain a JSON object")

    try:
        config = RootConfig.from_composer_json(data)
    except ValueError as e:
        raise ComposerFileError(f"Invalid configuration in {path}: {e}") from e

    logger.debug(f"Loaded root configuration from {path}")
    return config


def resolve_vendor_dir(
    project_dir: Path, config: RootConfig, override: Optional[Path] = None
) -> Path:
    """
    Work out where installed packages live.

    Precedence: explicit override, then ``COMPOSER_VENDOR_DIR``, then
    ``config.vendor-dir`` from composer.json.
    """
    if override is not None:
        vendor_dir = Path(override)
    elif os.environ.get("COMPOSER_VENDOR_DIR"):
        vendor_dir = Path(os.environ["COMPOSER_VENDOR_DIR"])
    else:
        vendor_dir = Path(config.vendor_dir)

    if not vendor_dir.is_absolute():
        vendor_dir = project_dir / vendor_dir
    return vendor_dir


def load_installed_packages(vendor_dir: Path) -> list[PackageRecord]:
    """
    Load the installed package inventory.

    Supports both the Composer 2 layout (``{"packages": [...]}``) and the
    Composer 1 layout (a top-level list). Order is preserved. Entries that
    are not valid package records are skipped with a warning.

    Args:
        vendor_dir: Composer vendor directory

    Returns:
        Packages in the order the inventory lists them (empty if the
        inventory does not exist yet)

    Raises:
        ComposerFileError: If the inventory exists but cannot be parsed
    """
    path = vendor_dir / INSTALLED_FILE
    if not path.exists():
        logger.warning(f"No installed packages inventory at {path}")
        return []

    data = _read_json(path)
    if isinstance(data, dict):
        entries = data.get("packages", [])
    elif isinstance(data, list):
        entries = data
    else:
        raise ComposerFileError(f"Unrecognized inventory format in {path}")

    if not isinstance(entries, list):
        raise ComposerFileError(f"Unrecognized inventory format in {path}")

    packages = []
    seen = set()
    for entry in entries:
        try:
            package = PackageRecord.model_validate(entry)
        except ValidationError as e:
            logger.warning(f"Skipping invalid package entry in {path}: {e}")
            continue

        # Alias entries repeat a package name; keep the first (canonical) one
        if package.name in seen:
            logger.debug(f"Skipping duplicate entry for {package.name}")
            continue
        seen.add(package.name)
        packages.append(package)

    logger.info(f"Loaded {len(packages)} installed package(s) from {path}")
    return packages
