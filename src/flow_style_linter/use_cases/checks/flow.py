"""Control-flow shape checks (W9701, W9702, W9703, W9704)."""

from collections.abc import Mapping
from typing import TYPE_CHECKING

import astroid
from pylint.checkers import BaseChecker

if TYPE_CHECKING:
    from pylint.lint import PyLinter

from flow_style_linter.domain.config import ConfigurationLoader
from flow_style_linter.domain.constants import (
    EARLY_RETURN_CODE,
    NESTED_CONDITIONAL_CODE,
    STACKED_GUARDS_CODE,
    UNNECESSARY_GUARD_CODE,
)
from flow_style_linter.domain.guard_clauses import GuardClauseClassifier
from flow_style_linter.domain.registry_types import RuleRegistryEntry
from flow_style_linter.domain.rule_msgs import RuleMsgBuilder
from flow_style_linter.domain.rules import Violation
from flow_style_linter.domain.rules.early_return import NoEarlyReturnRule
from flow_style_linter.domain.rules.guard_clause import UnnecessaryGuardClauseRule
from flow_style_linter.domain.rules.nested_conditional import NoNestedConditionalRule


class FlowChecker(BaseChecker):
    """W9701 (Early Return), W9702/W9703 (Guard Clauses), W9704 (Nested Conditional)."""

    name: str = "flow-style-flow"
    CODES = [
        EARLY_RETURN_CODE,
        UNNECESSARY_GUARD_CODE,
        STACKED_GUARDS_CODE,
        NESTED_CONDITIONAL_CODE,
    ]

    def __init__(
        self,
        linter: "PyLinter",
        config_loader: ConfigurationLoader,
        registry: Mapping[str, RuleRegistryEntry],
    ) -> None:
        self.msgs = RuleMsgBuilder.build_msgs_for_codes(registry, self.CODES)
        super().__init__(linter)
        self.config_loader = config_loader
        classifier = GuardClauseClassifier(single_line_guards=config_loader.single_line_guards)
        self._early_return_rule = NoEarlyReturnRule(classifier)
        self._guard_rule = UnnecessaryGuardClauseRule(classifier)
        self._nested_rule = NoNestedConditionalRule()

    def visit_functiondef(self, node: astroid.nodes.FunctionDef) -> None:
        self._report(self._guard_rule.check(node))
        self._report(self._early_return_rule.check(node))

    visit_asyncfunctiondef = visit_functiondef

    def visit_if(self, node: astroid.nodes.If) -> None:
        self._report(self._nested_rule.check(node))

    def _report(self, violations: list[Violation]) -> None:
        for v in violations:
            self.add_message(v.code, node=v.node, args=v.message_args or ())
