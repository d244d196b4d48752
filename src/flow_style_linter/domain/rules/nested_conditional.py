"""No nested conditional rule (W9704)."""

import astroid

from flow_style_linter.domain.constants import DEFAULT_MSGS, NESTED_CONDITIONAL_CODE
from flow_style_linter.domain.rules import Checkable, Violation
from flow_style_linter.domain.syntax import NodeKind, SyntaxInspector


class NoNestedConditionalRule(Checkable):
    """Rule for W9704: an `if` statement inside another `if` of the same scope."""

    code: str = NESTED_CONDITIONAL_CODE
    description: str = "Nested conditional: extract a function or use guard clauses."

    def check(self, node: astroid.nodes.NodeNG) -> list[Violation]:
        """Check an If node. elif continuations and conditional expressions are never flagged."""
        if SyntaxInspector.kind_of(node) is not NodeKind.CONDITIONAL:
            return []
        if SyntaxInspector.is_elif(node) or not self.is_nested(node):
            return []
        message = DEFAULT_MSGS[self.code][0]
        return [Violation.from_node(code=self.code, message=message, node=node)]

    @staticmethod
    def is_nested(node: astroid.nodes.NodeNG) -> bool:
        """True when an enclosing `if` is found before the nearest scope boundary."""
        return any(
            SyntaxInspector.kind_of(ancestor) is NodeKind.CONDITIONAL
            for ancestor in SyntaxInspector.ancestors_within_scope(node)
        )
