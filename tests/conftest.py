"""Shared pytest fixtures for composer-i18n-map tests."""

import json

import pytest


def write_project(root, composer, packages=None, installed_format="v2"):
    """Write composer.json and (optionally) vendor/composer/installed.json."""
    (root / "composer.json").write_text(json.dumps(composer))

    if packages is not None:
        installed_dir = root / "vendor" / "composer"
        installed_dir.mkdir(parents=True, exist_ok=True)
        if installed_format == "v2":
            data = {"packages": packages, "dev": True, "dev-package-names": []}
        else:
            data = packages
        (installed_dir / "installed.json").write_text(json.dumps(data))

    return root


@pytest.fixture
def library_packages():
    """Installed packages: two libraries with textdomains, one without, one other type."""
    return [
        {
            "name": "automattic/jetpack-connection",
            "version": "2.0.0",
            "version_normalized": "2.0.0.0",
            "type": "jetpack-library",
            "extra": {"textdomain": "jetpack-connection"},
        },
        {
            "name": "automattic/jetpack-constants",
            "version": "1.6.0",
            "version_normalized": "1.6.0.0",
            "type": "jetpack-library",
            "extra": {},
        },
        {
            "name": "automattic/jetpack-assets",
            "version": "dev-trunk",
            "version_normalized": "dev-trunk",
            "type": "jetpack-library",
            "extra": {"textdomain": "jetpack-assets"},
        },
        {
            "name": "psr/log",
            "version": "1.1.4",
            "version_normalized": "1.1.4.0",
            "type": "library",
            "extra": {"textdomain": "ignored"},
        },
    ]


@pytest.fixture
def plugin_project(tmp_path, library_packages):
    """Project configured as a WordPress plugin."""
    return write_project(
        tmp_path,
        {
            "name": "automattic/my-plugin",
            "extra": {
                "wp-plugin-slug": "my-plugin",
                "branch-alias": {"dev-trunk": "1.2.x-dev"},
            },
        },
        library_packages,
    )


@pytest.fixture
def theme_project(tmp_path):
    """Project configured as a WordPress theme."""
    return write_project(
        tmp_path,
        {"name": "automattic/my-theme", "extra": {"wp-theme-slug": "my-theme"}},
        [
            {
                "name": "automattic/my-lib",
                "version": "2.0.0",
                "type": "jetpack-library",
                "extra": {"textdomain": "my-lib"},
            },
            {
                "name": "other/pkg",
                "version": "9.9.9",
                "type": "other",
                "extra": {"textdomain": "ignored"},
            },
        ],
    )


@pytest.fixture
def unconfigured_project(tmp_path, library_packages):
    """Project with neither plugin nor theme slug."""
    return write_project(tmp_path, {"name": "automattic/no-slug"}, library_packages)


@pytest.fixture
def make_project(tmp_path):
    """Factory writing a project into tmp_path."""

    def _make(composer, packages=None, installed_format="v2"):
        return write_project(tmp_path, composer, packages, installed_format)

    return _make
