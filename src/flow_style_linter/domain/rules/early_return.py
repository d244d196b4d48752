"""No early return rule (W9701): only leading guard clauses and the final result may return."""

import astroid

from flow_style_linter.domain.constants import DEFAULT_MSGS, EARLY_RETURN_CODE
from flow_style_linter.domain.guard_clauses import GuardClauseClassifier
from flow_style_linter.domain.rules import Checkable, Violation
from flow_style_linter.domain.syntax import NodeKind, SyntaxInspector


class NoEarlyReturnRule(Checkable):
    """
    Rule for W9701.

    Guard clauses at the top of a function are allowed, whatever they return.
    So is the `return` that produces the function's result (see
    GuardClauseClassifier.result_returns). Every other `return` in the body is
    flagged, however deeply nested, except those inside nested functions,
    classes, lambdas or comprehensions, which belong to their own scope.
    """

    code: str = EARLY_RETURN_CODE
    description: str = "Early return: return statements outside leading guard clauses."

    def __init__(self, classifier: GuardClauseClassifier | None = None) -> None:
        self._classifier = classifier or GuardClauseClassifier()

    def check(self, node: astroid.nodes.NodeNG) -> list[Violation]:
        if SyntaxInspector.kind_of(node) is not NodeKind.DEFINITION:
            return []
        statements = SyntaxInspector.body_statements(node)
        if not statements:
            return []

        allowed = {id(guard.return_node) for guard in self._classifier.guard_prefix(statements)}
        allowed.update(id(ret) for ret in self._classifier.result_returns(statements))

        message = DEFAULT_MSGS[self.code][0]
        return [
            Violation.from_node(code=self.code, message=message, node=return_node)
            for return_node in SyntaxInspector.walk_within_scope(statements, NodeKind.RETURN)
            if id(return_node) not in allowed
        ]
