"""Core data models for the i18n map generator."""

from enum import Enum
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

# Package type that marks a library eligible for the i18n map
LIBRARY_PACKAGE_TYPE = "jetpack-library"


def _empty_list_to_dict(v):
    """PHP encodes an empty associative array as ``[]``; accept it as ``{}``."""
    if v is None or v == []:
        return {}
    return v


class ManifestType(str, Enum):
    """Kind of WordPress project that consumes the manifest."""

    PLUGINS = "plugins"
    THEMES = "themes"


class GenerationAction(str, Enum):
    """What happened to the manifest file during a run."""

    WRITTEN = "written"  # New or changed content was written
    UNCHANGED = "unchanged"  # Content identical, file left untouched
    REMOVED = "removed"  # No domain configured, stale file deleted
    SKIPPED = "skipped"  # No domain configured, nothing to delete


class RootConfig(BaseModel):
    """
    Settings read from the root project's ``composer.json``.

    Field aliases are the keys used in the ``extra`` and ``config``
    sections of the file.
    """

    model_config = ConfigDict(populate_by_name=True)

    plugin_slug: Optional[str] = Field(
        None, alias="wp-plugin-slug", description="Textdomain of a WordPress plugin"
    )
    theme_slug: Optional[str] = Field(
        None, alias="wp-theme-slug", description="Textdomain of a WordPress theme"
    )
    branch_alias: dict[str, str] = Field(
        default_factory=dict,
        alias="branch-alias",
        description="Version string -> alias substituted in the manifest",
    )
    vendor_dir: str = Field(
        "vendor", alias="vendor-dir", description="Composer vendor directory"
    )

    @field_validator("branch_alias", mode="before")
    @classmethod
    def validate_branch_alias(cls, v):
        """Accept PHP's empty-array encoding."""
        return _empty_list_to_dict(v)

    @classmethod
    def from_composer_json(cls, data: dict) -> "RootConfig":
        """
        Build a RootConfig from a parsed ``composer.json`` document.

        Args:
            data: Decoded JSON object

        Returns:
            RootConfig with values from ``extra`` and ``config.vendor-dir``

        Raises:
            ValueError: If ``extra`` or ``config`` is not an object
        """
        extra = _empty_list_to_dict(data.get("extra"))
        config = _empty_list_to_dict(data.get("config"))
        for section, value in (("extra", extra), ("config", config)):
            if not isinstance(value, dict):
                raise ValueError(f"{section} must be an object, got {type(value).__name__}")

        values = {
            key: extra[key]
            for key in ("wp-plugin-slug", "wp-theme-slug", "branch-alias")
            if key in extra
        }
        if "vendor-dir" in config:
            values["vendor-dir"] = config["vendor-dir"]

        return cls.model_validate(values)


class PackageRecord(BaseModel):
    """A single installed package as listed in ``installed.json``."""

    name: str = Field(..., description="Package name (vendor/package)")
    type: str = Field("library", description="Composer package type")
    version: str = Field(..., description="Pretty version string")
    version_normalized: Optional[str] = Field(
        None, description="Normalized version string used for comparisons"
    )
    extra: dict[str, Any] = Field(
        default_factory=dict, description="Package's extra section"
    )

    @field_validator("extra", mode="before")
    @classmethod
    def validate_extra(cls, v):
        """Accept PHP's empty-array encoding."""
        return _empty_list_to_dict(v)

    @property
    def canonical_version(self) -> str:
        """Version string the package manager reports for this package."""
        return self.version_normalized or self.version

    @property
    def textdomain(self) -> Optional[str]:
        """Declared textdomain, or None when absent, empty or "0"."""
        value = self.extra.get("textdomain")
        if isinstance(value, str) and value not in ("", "0"):
            return value
        return None


class Manifest(BaseModel):
    """
    Generated textdomain -> version map.

    ``packages`` keeps insertion order, which follows the order packages
    were supplied in.
    """

    domain: str = Field(..., description="Textdomain of the consuming project")
    type: ManifestType = Field(..., description="Project kind")
    packages: dict[str, str] = Field(
        default_factory=dict, description="Library textdomain -> version"
    )


class GenerationResult(BaseModel):
    """Outcome of one manifest generation."""

    action: GenerationAction = Field(..., description="What happened to the file")
    output_path: Path = Field(..., description="Manifest file path")
    manifest: Optional[Manifest] = Field(
        None, description="Generated manifest (None when no domain is set)"
    )
    event: Optional[str] = Field(None, description="Lifecycle event that triggered it")

    @field_serializer("output_path")
    def serialize_path(self, path: Path) -> str:
        """Serialize Path to string for JSON output."""
        return str(path)


class RunResult(BaseModel):
    """Aggregated outcome of dispatching one lifecycle event."""

    project_dir: Path = Field(..., description="Root directory of the project")
    event: str = Field(..., description="Lifecycle event name")
    plugins_run: list[str] = Field(
        default_factory=list, description="Names of plugins that were activated"
    )
    results: list[GenerationResult] = Field(
        default_factory=list, description="Results returned by hooks"
    )
    duration_seconds: float = Field(..., description="Total run time")

    @field_serializer("project_dir")
    def serialize_path(self, path: Path) -> str:
        """Serialize Path to string for JSON output."""
        return str(path)

    @field_validator("project_dir", mode="before")
    @classmethod
    def validate_path(cls, v):
        """Convert string to Path if needed."""
        if isinstance(v, str):
            return Path(v)
        return v
