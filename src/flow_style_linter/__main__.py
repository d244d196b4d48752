"""Package entry point - composition root. Wire dependencies and run the CLI app."""

import logging

from flow_style_linter.infrastructure.di.container import FlowStyleContainer
from flow_style_linter.interface.cli import CLIAppFactory, CLIDependencies


def main() -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    container = FlowStyleContainer.get_instance()

    deps = CLIDependencies(
        config_loader=container.get_config_loader(),
        guidance_service=container.get_guidance_service(),
        pylint_adapter=container.get_pylint_adapter(),
    )

    app = CLIAppFactory.create_app(deps)
    app()


if __name__ == "__main__":
    main()
