"""CLI entry points for flow-style - Thin Controller using Typer."""

import sys
from dataclasses import dataclass
from pathlib import Path

import typer

from flow_style_linter.domain.config import ConfigurationLoader
from flow_style_linter.infrastructure.adapters.pylint_adapter import PylintAdapter
from flow_style_linter.infrastructure.services.guidance_service import GuidanceService


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    config_loader: ConfigurationLoader
    guidance_service: GuidanceService
    pylint_adapter: PylintAdapter


class CLIAppFactory:
    """Creates the Typer app."""

    @staticmethod
    def resolve_target_path(path: Path | None) -> str:
        """Resolve target path: explicit path, else src/ if exists, else '.' (public API)."""
        if path and str(path) != ".":
            return str(path)
        src_dir = Path.cwd() / "src"
        if src_dir.exists() and src_dir.is_dir():
            return "src"
        return "."

    @staticmethod
    def create_app(deps: CLIDependencies) -> typer.Typer:
        """Create the Typer app with explicitly injected dependencies."""
        app = typer.Typer(
            name="flow-style",
            help="Flow Style: newspaper method order, guard clauses and flat conditionals for Python.",
            add_completion=False,
        )

        @app.command()
        def check(
            path: Path | None = typer.Argument(None, help="Path to check (default: src/ if present, else .)"),  # noqa: B008
        ) -> None:
            """Run the flow-style checkers over a path and exit 1 when offenses are found."""
            target_path = CLIAppFactory.resolve_target_path(path)
            result = deps.pylint_adapter.gather_results(target_path)
            if result.error:
                typer.echo(f"flow-style: pylint failed: {result.error}", err=True)
                sys.exit(2)

            for message in result.messages:
                typer.echo(message.render())
            if not result.has_violations():
                typer.echo(f"No flow-style offenses in {target_path}.")
                sys.exit(0)

            typer.echo("")
            for code, count in result.counts_by_code.items():
                name = deps.guidance_service.get_display_name(code)
                typer.echo(f"{code} {name}: {count}")
            typer.echo(f"{len(result.messages)} offense(s) found.")
            sys.exit(1)

        @app.command()
        def rules() -> None:
            """List the flow-style rules with their symbols."""
            for code in deps.guidance_service.get_rule_codes():
                symbol = deps.guidance_service.get_symbol(code)
                name = deps.guidance_service.get_display_name(code)
                typer.echo(f"{code}  {symbol:<30} {name}")

        @app.command()
        def explain(rule: str = typer.Argument(..., help="Rule code or symbol, e.g. W9601")) -> None:
            """Show how to fix a rule's offenses."""
            if deps.guidance_service.get_entry(rule) is None and rule not in deps.guidance_service.get_rule_codes():
                typer.echo(f"Unknown rule: {rule}", err=True)
                sys.exit(2)
            typer.echo(deps.guidance_service.get_display_name(rule))
            typer.echo(deps.guidance_service.get_manual_instructions(rule))

        @app.command()
        def config() -> None:
            """Show the effective [tool.flow-style] settings."""
            loader = deps.config_loader
            typer.echo(f"implicit-receivers     = {list(loader.implicit_receivers)}")
            typer.echo(f"single-line-guards     = {str(loader.single_line_guards).lower()}")
            typer.echo(f"check-module-functions = {str(loader.check_module_functions).lower()}")
            typer.echo(f"ignore-methods         = {loader.ignore_methods}")

        return app
