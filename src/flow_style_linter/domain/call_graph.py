"""Intra-scope call graph over sibling function definitions."""

from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass

import astroid

from flow_style_linter.domain.constants import DEFAULT_IMPLICIT_RECEIVERS, PROPERTY_DECORATORS
from flow_style_linter.domain.syntax import SyntaxInspector


@dataclass(frozen=True)
class MethodDefinition:
    """A function definition and its position among its siblings in one scope."""

    name: str
    index: int
    node: astroid.nodes.FunctionDef

    @property
    def line(self) -> int:
        return self.node.lineno

    @property
    def is_property(self) -> bool:
        """True when decorated as a property, so plain attribute reads count as calls."""
        decorators = self.node.decorators
        if decorators is None:
            return False
        return any(d.as_string() in PROPERTY_DECORATORS for d in decorators.nodes)


class DefinitionCollector:
    """Collects the direct definitions of a class or module body, in source order."""

    @staticmethod
    def collect(statements: Sequence[astroid.nodes.NodeNG]) -> list[MethodDefinition]:
        """
        Definitions at the scope's top level, including those inside if/try/with
        blocks at that level. Definitions inside other definitions or classes
        belong to a different scope and are not collected.
        """
        nodes = DefinitionCollector._definition_nodes(statements)
        return [
            MethodDefinition(name=node.name, index=index, node=node)
            for index, node in enumerate(nodes)
        ]

    @staticmethod
    def _definition_nodes(
        nodes: Iterable[astroid.nodes.NodeNG],
    ) -> Iterator[astroid.nodes.FunctionDef]:
        for node in nodes:
            if isinstance(node, astroid.nodes.FunctionDef):
                yield node
            elif node.is_statement and not SyntaxInspector.is_scope_boundary(node):
                yield from DefinitionCollector._definition_nodes(node.get_children())


class CallGraph:
    """
    Directed graph: function name -> names of sibling functions it calls.

    Only calls without an explicit receiver count: bare `helper()` in a module
    scope, `self.helper()` / `cls.helper()` in a class scope. Self-calls are
    never edges, and repeated calls to one callee give a single edge.
    """

    def __init__(self, edges: Mapping[str, frozenset[str]], indices: Mapping[str, int]) -> None:
        self._edges = dict(edges)
        self._indices = dict(indices)
        callers: dict[str, list[str]] = {name: [] for name in self._edges}
        for caller in sorted(self._edges, key=self.index_of):
            for callee in sorted(self._edges[caller]):
                callers.setdefault(callee, []).append(caller)
        self._callers = callers

    @classmethod
    def build(
        cls,
        definitions: Sequence[MethodDefinition],
        implicit_receivers: Iterable[str] = DEFAULT_IMPLICIT_RECEIVERS,
        module_scope: bool = False,
    ) -> "CallGraph":
        receivers = frozenset(implicit_receivers)
        names = {d.name for d in definitions}
        property_names = {d.name for d in definitions if d.is_property}

        edges: dict[str, set[str]] = {name: set() for name in names}
        indices: dict[str, int] = {}
        for definition in definitions:
            # Redefinitions (e.g. property setters) share a name: union callees, keep the last index.
            indices[definition.name] = definition.index
            for callee in cls._referenced_names(definition, receivers, property_names, module_scope):
                if callee in names and callee != definition.name:
                    edges[definition.name].add(callee)

        return cls({name: frozenset(callees) for name, callees in edges.items()}, indices)

    def callees(self, name: str) -> frozenset[str]:
        return self._edges.get(name, frozenset())

    def callers_of(self, name: str) -> list[str]:
        """Internal callers of a function, in declaration order."""
        return list(self._callers.get(name, []))

    def index_of(self, name: str) -> int:
        return self._indices.get(name, -1)

    def reachable(self, start: str, target: str) -> bool:
        """True when target can be reached from start by following at least one edge."""
        visited: set[str] = set()
        stack = list(self.callees(start))
        while stack:
            current = stack.pop()
            if current == target:
                return True
            if current in visited:
                continue
            visited.add(current)
            stack.extend(self.callees(current))
        return False

    @staticmethod
    def _referenced_names(
        definition: MethodDefinition,
        receivers: frozenset[str],
        property_names: set[str],
        module_scope: bool,
    ) -> Iterator[str]:
        for statement in definition.node.body:
            for node in statement.nodes_of_class((astroid.nodes.Call, astroid.nodes.Attribute)):
                if isinstance(node, astroid.nodes.Call):
                    name = CallGraph._unqualified_call_name(node, receivers, module_scope)
                    if name is not None:
                        yield name
                elif not module_scope and node.attrname in property_names:
                    if CallGraph._has_implicit_receiver(node, receivers):
                        yield node.attrname

    @staticmethod
    def _unqualified_call_name(
        node: astroid.nodes.Call, receivers: frozenset[str], module_scope: bool
    ) -> str | None:
        func = node.func
        if module_scope:
            return func.name if isinstance(func, astroid.nodes.Name) else None
        if isinstance(func, astroid.nodes.Attribute) and CallGraph._has_implicit_receiver(func, receivers):
            return func.attrname
        return None

    @staticmethod
    def _has_implicit_receiver(node: astroid.nodes.Attribute, receivers: frozenset[str]) -> bool:
        expr = node.expr
        return isinstance(expr, astroid.nodes.Name) and expr.name in receivers
