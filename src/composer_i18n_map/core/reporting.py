"""Output formatters for run results."""

from rich.console import Console
from rich.rule import Rule

from .models import GenerationAction, GenerationResult, RunResult


class TextReporter:
    """Human-readable output using rich library."""

    def __init__(self, console: Console | None = None):
        """Initialize text reporter with optional console."""
        self.console = console or Console()

    def report(self, result: RunResult) -> None:
        """
        Generate and print text report.

        Args:
            result: Run result to report
        """
        self.console.print("composer-i18n-map v0.1.0", style="bold")
        self.console.print(f"Project: {result.project_dir}")
        self.console.print(f"Event: {result.event}")
        self.console.print(f"Plugins: {', '.join(result.plugins_run)}\n")

        if not result.results:
            self.console.print("Nothing generated", style="yellow")
        else:
            self.console.print(Rule())
            for generation in result.results:
                self._print_result(generation)
            self.console.print(Rule())

        self.console.print(f"Done in {result.duration_seconds}s")

    def _print_result(self, generation: GenerationResult) -> None:
        """Print single generation outcome with color coding."""
        colors = {
            GenerationAction.WRITTEN: "green",
            GenerationAction.UNCHANGED: "blue",
            GenerationAction.REMOVED: "yellow",
            GenerationAction.SKIPPED: "yellow",
        }
        color = colors[generation.action]

        self.console.print(
            f"{generation.action.value.upper()}: {generation.output_path}",
            style=f"bold {color}",
        )

        manifest = generation.manifest
        if manifest is None:
            self.console.print("   No plugin or theme slug configured", style=color)
            return

        self.console.print(f"   Domain: {manifest.domain} ({manifest.type.value})")
        if not manifest.packages:
            self.console.print("   No textdomains found")
        for textdomain, version in manifest.packages.items():
            self.console.print(f"   {textdomain} => {version}")


class JsonReporter:
    """JSON output for programmatic consumption."""

    def report(self, result: RunResult) -> str:
        """
        Generate JSON report.

        Args:
            result: Run result to report

        Returns:
            JSON string
        """
        return result.model_dump_json(indent=2)
