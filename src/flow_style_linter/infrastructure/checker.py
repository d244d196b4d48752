"""
Pylint plugin entry point - composition root for the checker plugin.
Lives in infrastructure as it creates the container and wires dependencies.

    pylint --load-plugins=flow_style_linter.infrastructure.checker src/
"""

from pylint.lint import PyLinter

from flow_style_linter.infrastructure.di.container import FlowStyleContainer
from flow_style_linter.use_cases.checks.flow import FlowChecker
from flow_style_linter.use_cases.checks.ordering import MethodOrderChecker


def register(linter: PyLinter) -> None:
    """Register checkers."""
    container = FlowStyleContainer.get_instance()
    config_loader = container.get_config_loader()
    registry = container.get_guidance_service().get_registry()

    linter.register_checker(MethodOrderChecker(
        linter, config_loader=config_loader, registry=registry))
    linter.register_checker(FlowChecker(
        linter, config_loader=config_loader, registry=registry))
