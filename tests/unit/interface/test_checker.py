"""Tests for the pylint plugin entry point."""

from unittest.mock import MagicMock, patch

from flow_style_linter.domain.config import ConfigurationLoader
from flow_style_linter.infrastructure.checker import register
from flow_style_linter.infrastructure.di.container import FlowStyleContainer
from flow_style_linter.use_cases.checks.flow import FlowChecker
from flow_style_linter.use_cases.checks.ordering import MethodOrderChecker


def test_register_adds_both_checkers():
    linter = MagicMock()
    container = MagicMock()
    loader = ConfigurationLoader({"ignore-methods": ["setUp"]})
    container.get_config_loader.return_value = loader
    container.get_guidance_service.return_value.get_registry.return_value = {}

    with patch.object(FlowStyleContainer, "get_instance", return_value=container):
        register(linter)

    checkers = [call.args[0] for call in linter.register_checker.call_args_list]
    assert [type(c) for c in checkers] == [MethodOrderChecker, FlowChecker]
    assert all(c.config_loader is loader for c in checkers)


def test_container_wires_real_services(tmp_path, monkeypatch):
    (tmp_path / "pyproject.toml").write_text('[tool.flow-style]\ncheck-module-functions = false\n')
    monkeypatch.chdir(tmp_path)

    container = FlowStyleContainer.get_instance()

    assert container.get_config_loader().check_module_functions is False
    assert "flowstyle.W9601" in container.get_guidance_service().get_registry()
    assert "--enable=W9601,W9701,W9702,W9703,W9704" in container.get_pylint_adapter().build_command(".")
    assert FlowStyleContainer.get_instance() is container
