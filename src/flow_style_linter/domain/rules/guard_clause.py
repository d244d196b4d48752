"""Unnecessary guard clause rules (W9702, W9703)."""

import astroid

from flow_style_linter.domain.constants import (
    DEFAULT_MSGS,
    STACKED_GUARDS_CODE,
    UNNECESSARY_GUARD_CODE,
)
from flow_style_linter.domain.guard_clauses import GuardClauseClassifier
from flow_style_linter.domain.rules import Checkable, Violation
from flow_style_linter.domain.syntax import NodeKind, SyntaxInspector


class UnnecessaryGuardClauseRule(Checkable):
    """
    W9702: the whole body is one guard plus one expression, e.g.

        def weight_change(self):
            if not (self.start and self.end): return None
            return round(self.end - self.start, 1)

    The guard is the logic itself; a conditional expression says so. Only a
    guard returning nothing or None qualifies, since that is what the
    conditional expression yields when the condition fails.

    W9703: two or more consecutive leading guards, each one flagged; they
    are one compound precondition spread over several statements.
    """

    code: str = UNNECESSARY_GUARD_CODE
    stacked_code: str = STACKED_GUARDS_CODE
    description: str = "Guard clauses that should be a conditional expression or one condition."

    def __init__(self, classifier: GuardClauseClassifier | None = None) -> None:
        self._classifier = classifier or GuardClauseClassifier()

    def check(self, node: astroid.nodes.NodeNG) -> list[Violation]:
        if SyntaxInspector.kind_of(node) is not NodeKind.DEFINITION:
            return []
        statements = SyntaxInspector.body_statements(node)
        guards = self._classifier.guard_prefix(statements)

        if len(guards) >= 2:
            message = DEFAULT_MSGS[self.stacked_code][0]
            return [
                Violation.from_node(code=self.stacked_code, message=message, node=guard.statement)
                for guard in guards
            ]

        if len(guards) == 1 and len(statements) == 2:
            guard = guards[0].statement
            if self._classifier.is_guard_clause(guard, nil_only=True):
                message = DEFAULT_MSGS[self.code][0]
                return [Violation.from_node(code=self.code, message=message, node=guard)]

        return []
