"""Serializers for the generated i18n map."""

import json
import re
from pathlib import Path

from ...core.models import Manifest

GENERATOR_NAME = "composer-i18n-map"

DEFAULT_OUTPUTS = {
    "php": Path("jetpack_vendor") / "i18n-map.php",
    "json": Path("jetpack_vendor") / "i18n-map.json",
}

# PHP turns decimal-integer string keys that fit in a 64-bit int into integer keys
_PHP_INT_KEY = re.compile(r"^(?:0|-?[1-9][0-9]*)$")
# The minimum is quoted: as a bare literal PHP reads it as a float
_PHP_INT_MIN = -(2**63)
_PHP_INT_MAX = 2**63 - 1


def generated_marker(filename: str) -> str:
    """Marker identifying a file as generated."""
    return f"{filename} @generated by {GENERATOR_NAME}"


def php_string(value: str) -> str:
    """Quote a string as a single-quoted PHP literal."""
    return "'" + value.replace("\\", "\\\\").replace("'", "\\'") + "'"


def _php_key(key: str) -> str:
    if _PHP_INT_KEY.match(key) and _PHP_INT_MIN < int(key) <= _PHP_INT_MAX:
        return key
    return php_string(key)


def _php_value(value, level: int) -> str:
    if isinstance(value, dict):
        pad = "  " * (level + 1)
        body = "".join(
            f"{pad}{_php_key(k)} => {_php_value(v, level + 1)},\n"
            for k, v in value.items()
        )
        return "array(\n" + body + "  " * level + ")"
    return php_string(str(value))


def render_php(manifest: Manifest, filename: str = "i18n-map.php") -> str:
    """
    Render the manifest as a PHP file returning an array literal.

    Example output:
        <?php
        // i18n-map.php @generated by composer-i18n-map
        return array(
          'domain' => 'my-theme',
          'type' => 'themes',
          'packages' => array(
            'my-lib' => '2.0.0',
          ),
        );
    """
    data = manifest.model_dump(mode="json")
    return (
        "<?php\n"
        f"// {generated_marker(filename)}\n"
        f"return {_php_value(data, 0)};\n"
    )


def render_json(manifest: Manifest, filename: str = "i18n-map.json") -> str:
    """Render the manifest as a JSON document with a generated marker key."""
    data = {"_generated": generated_marker(filename)}
    data.update(manifest.model_dump(mode="json"))
    return json.dumps(data, indent=2) + "\n"


RENDERERS = {
    "php": render_php,
    "json": render_json,
}
