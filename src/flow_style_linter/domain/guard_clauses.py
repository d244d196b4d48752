"""Guard-clause classification shared by the early-return and guard-clause rules."""

from collections.abc import Sequence
from dataclasses import dataclass

import astroid

from flow_style_linter.domain.syntax import NodeKind, SyntaxInspector


@dataclass(frozen=True)
class GuardClause:
    """A leading statement that exits early, and the `return` it stands for."""

    statement: astroid.nodes.NodeNG
    return_node: astroid.nodes.Return


class GuardClauseClassifier:
    """
    Decides whether a statement is a guard clause.

    A guard clause is either a bare `return` statement or a modifier-form `if`
    (see SyntaxInspector.is_modifier_form) whose only statement is a `return`.
    The nil-only variant also requires that `return` to carry no value or
    the constant None.
    """

    def __init__(self, single_line_guards: bool = False) -> None:
        self._single_line_guards = single_line_guards

    def extract_return(self, statement: astroid.nodes.NodeNG) -> astroid.nodes.Return | None:
        """Return the `return` node a guard clause represents, or None."""
        kind = SyntaxInspector.kind_of(statement)
        if kind is NodeKind.RETURN:
            return statement
        if kind is not NodeKind.CONDITIONAL:
            return None
        if not SyntaxInspector.is_modifier_form(statement, self._single_line_guards):
            return None
        inner = statement.body[0]
        if SyntaxInspector.kind_of(inner) is NodeKind.RETURN:
            return inner
        return None

    def is_guard_clause(self, statement: astroid.nodes.NodeNG, nil_only: bool = False) -> bool:
        return_node = self.extract_return(statement)
        if return_node is None:
            return False
        return not nil_only or self.is_nil_return(return_node)

    def guard_prefix(
        self, statements: Sequence[astroid.nodes.NodeNG], nil_only: bool = False
    ) -> list[GuardClause]:
        """
        Leading run of guard clauses; stops at the first statement that is not one.

        The function's result return (see result_returns) ends the run: a
        trailing `return value` produces the result, it does not exit early.
        """
        results = {id(node) for node in self.result_returns(statements)}
        guards: list[GuardClause] = []
        for statement in statements:
            if id(statement) in results or not self.is_guard_clause(statement, nil_only):
                break
            guards.append(GuardClause(statement, self.extract_return(statement)))
        return guards

    @staticmethod
    def is_nil_return(node: astroid.nodes.Return) -> bool:
        value = node.value
        if value is None:
            return True
        return isinstance(value, astroid.nodes.Const) and value.value is None

    @staticmethod
    def result_returns(
        statements: Sequence[astroid.nodes.NodeNG],
    ) -> list[astroid.nodes.Return]:
        """
        Returns that deliver the function's result rather than leaving early.

        The last statement when it returns a value, or the last statement of
        every branch of a trailing if/elif/else chain whose branches all end
        that way. Anything else yields an empty list.
        """
        return GuardClauseClassifier._tail_returns(statements) or []

    @staticmethod
    def _tail_returns(
        statements: Sequence[astroid.nodes.NodeNG],
    ) -> list[astroid.nodes.Return] | None:
        if not statements:
            return None
        last = statements[-1]
        kind = SyntaxInspector.kind_of(last)
        if kind is NodeKind.RETURN:
            return [last] if last.value is not None else None
        if kind is not NodeKind.CONDITIONAL or not last.orelse:
            return None
        then_returns = GuardClauseClassifier._tail_returns(last.body)
        else_returns = GuardClauseClassifier._tail_returns(last.orelse)
        if then_returns is None or else_returns is None:
            return None
        return then_returns + else_returns
