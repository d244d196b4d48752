"""Method order checks (W9601)."""

from collections.abc import Mapping
from typing import TYPE_CHECKING

import astroid
from pylint.checkers import BaseChecker

if TYPE_CHECKING:
    from pylint.lint import PyLinter

from flow_style_linter.domain.config import ConfigurationLoader
from flow_style_linter.domain.constants import METHOD_ORDER_CODE
from flow_style_linter.domain.registry_types import RuleRegistryEntry
from flow_style_linter.domain.rule_msgs import RuleMsgBuilder
from flow_style_linter.domain.rules import Violation
from flow_style_linter.domain.rules.method_order import NewspaperMethodOrderRule


class MethodOrderChecker(BaseChecker):
    """
    W9601: function defined before a sibling that calls it.
    Thin: delegates each class or module body to NewspaperMethodOrderRule.
    """

    name: str = "flow-style-ordering"
    CODES = [METHOD_ORDER_CODE]

    def __init__(
        self,
        linter: "PyLinter",
        config_loader: ConfigurationLoader,
        registry: Mapping[str, RuleRegistryEntry],
    ) -> None:
        self.msgs = RuleMsgBuilder.build_msgs_for_codes(registry, self.CODES)
        super().__init__(linter)
        self.config_loader = config_loader
        self._order_rule = NewspaperMethodOrderRule(
            implicit_receivers=config_loader.implicit_receivers,
            check_module_functions=config_loader.check_module_functions,
            ignore_methods=config_loader.ignore_methods,
        )

    def visit_module(self, node: astroid.nodes.Module) -> None:
        self._report(self._order_rule.check(node))

    def visit_classdef(self, node: astroid.nodes.ClassDef) -> None:
        self._report(self._order_rule.check(node))

    def _report(self, violations: list[Violation]) -> None:
        for v in violations:
            self.add_message(v.code, node=v.node, args=v.message_args or ())
