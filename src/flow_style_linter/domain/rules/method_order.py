"""Newspaper method order rule (W9601): define functions after the functions that call them."""

from collections.abc import Iterable

import astroid

from flow_style_linter.domain.call_graph import CallGraph, DefinitionCollector, MethodDefinition
from flow_style_linter.domain.constants import (
    DEFAULT_IMPLICIT_RECEIVERS,
    DEFAULT_MSGS,
    METHOD_ORDER_CODE,
    MIN_SCOPE_DEFINITIONS,
)
from flow_style_linter.domain.rules import Checkable, Violation
from flow_style_linter.domain.syntax import SyntaxInspector


class NewspaperMethodOrderRule(Checkable):
    """
    Rule for W9601: high-level intent first, implementation details last.

    A function is flagged when a sibling that calls it is defined after it.
    Functions with no internal callers (public API, callbacks) are ignored.
    A later caller that the function itself reaches again through the call
    graph forms a cycle and has no required order; any other later caller
    is enough to flag.
    """

    code: str = METHOD_ORDER_CODE
    description: str = "Method order: define functions after the functions that call them."

    def __init__(
        self,
        implicit_receivers: Iterable[str] = DEFAULT_IMPLICIT_RECEIVERS,
        check_module_functions: bool = True,
        ignore_methods: Iterable[str] = (),
    ) -> None:
        self._implicit_receivers = tuple(implicit_receivers)
        self._check_module_functions = check_module_functions
        self._ignore_methods = frozenset(ignore_methods)

    def check(self, node: astroid.nodes.NodeNG) -> list[Violation]:
        """Check a ClassDef or Module body. Returns one violation per misplaced definition."""
        if isinstance(node, astroid.nodes.ClassDef):
            module_scope = False
        elif isinstance(node, astroid.nodes.Module) and self._check_module_functions:
            module_scope = True
        else:
            return []

        definitions = DefinitionCollector.collect(SyntaxInspector.body_statements(node))
        if len(definitions) < MIN_SCOPE_DEFINITIONS:
            return []

        graph = CallGraph.build(definitions, self._implicit_receivers, module_scope=module_scope)
        violations: list[Violation] = []
        reported: set[str] = set()
        for definition in definitions:
            # A getter and its setter share one name: one offense, at the first.
            if definition.name in reported or definition.name in self._ignore_methods:
                continue
            if self.defined_before_caller(definition, graph):
                reported.add(definition.name)
                violations.append(self._violation(definition))
        return violations

    @staticmethod
    def defined_before_caller(definition: MethodDefinition, graph: CallGraph) -> bool:
        for caller in graph.callers_of(definition.name):
            if graph.index_of(caller) <= definition.index:
                continue
            if not graph.reachable(definition.name, caller):
                return True
        return False

    def _violation(self, definition: MethodDefinition) -> Violation:
        template = DEFAULT_MSGS[self.code][0]
        return Violation.from_node(
            code=self.code,
            message=template % definition.name,
            node=definition.node,
            message_args=(definition.name,),
        )
