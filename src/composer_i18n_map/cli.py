"""Command-line interface for composer-i18n-map."""

import logging
from pathlib import Path

import click

from .core.composer import ComposerFileError
from .core.events import ScriptEvent
from .core.orchestrator import Orchestrator
from .core.reporting import JsonReporter, TextReporter


@click.command()
@click.argument(
    "project_dir",
    type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
    default=".",
)
@click.option(
    "--event",
    "-e",
    type=click.Choice([e.value for e in ScriptEvent]),
    default=ScriptEvent.POST_INSTALL_CMD.value,
    help="Lifecycle event to fire (default: post-install-cmd)",
)
@click.option(
    "--vendor-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Composer vendor directory (default: from composer.json)",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Manifest path, relative to PROJECT_DIR unless absolute",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["php", "json"], case_sensitive=False),
    default="php",
    help="Manifest file format (default: php)",
)
@click.option(
    "--report",
    "-r",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default="text",
    help="Report format (default: text)",
)
@click.option(
    "--plugin",
    "-p",
    multiple=True,
    help="Run specific plugin(s). Can be specified multiple times.",
)
@click.option(
    "--verbose", "-v", count=True, help="Increase verbosity (-v for INFO, -vv for DEBUG)"
)
@click.option(
    "--list-plugins", is_flag=True, help="List available plugins and exit"
)
def main(
    project_dir, event, vendor_dir, output, output_format, report, plugin, verbose, list_plugins
):
    """
    composer-i18n-map - Generate the jetpack-library i18n map.

    Reads PROJECT_DIR/composer.json and the installed package inventory,
    then writes a map of library textdomains to versions. Intended to run
    from the post-install-cmd and post-update-cmd Composer scripts.
    """
    # Setup logging
    if verbose == 1:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    elif verbose >= 2:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")

    orchestrator = Orchestrator(
        plugin_options={
            "i18n-map": {"output": output, "output_format": output_format.lower()},
        }
    )

    # List plugins and exit
    if list_plugins:
        click.echo("Available plugins:")
        for plugin_meta in orchestrator.list_plugins():
            click.echo(f"  - {plugin_meta['name']}: {plugin_meta['description']}")
        return

    plugin_filter = list(plugin) if plugin else None
    try:
        result = orchestrator.run(
            project_dir,
            event=ScriptEvent(event),
            plugin_filter=plugin_filter,
            vendor_dir=vendor_dir,
        )
    except (ComposerFileError, OSError) as e:
        raise click.ClickException(str(e)) from e

    if report == "text":
        TextReporter().report(result)
    else:
        click.echo(JsonReporter().report(result))


if __name__ == "__main__":
    main()
