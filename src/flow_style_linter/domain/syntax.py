"""Read-only view over astroid trees: node kinds, scope boundaries, bounded walks."""

from collections.abc import Iterator, Sequence
from enum import Enum

import astroid


class NodeKind(Enum):
    """Closed set of node kinds the flow rules reason about."""

    DEFINITION = "definition"
    CALL = "call"
    CONDITIONAL = "conditional"
    TERNARY = "ternary"
    RETURN = "return"
    SCOPE = "scope"
    CLOSURE = "closure"
    OTHER = "other"


class SyntaxInspector:
    """
    Classifies astroid nodes into NodeKind and walks them without crossing scopes.

    All methods are total: unknown node shapes classify as OTHER and are never
    treated as boundaries, guards or conditionals.
    """

    # FunctionDef subclasses Lambda, so it must be matched first.
    _KIND_TABLE: tuple[tuple[type, NodeKind], ...] = (
        (astroid.nodes.FunctionDef, NodeKind.DEFINITION),
        (astroid.nodes.ClassDef, NodeKind.SCOPE),
        (astroid.nodes.Module, NodeKind.SCOPE),
        (astroid.nodes.Lambda, NodeKind.CLOSURE),
        (astroid.nodes.ListComp, NodeKind.CLOSURE),
        (astroid.nodes.SetComp, NodeKind.CLOSURE),
        (astroid.nodes.DictComp, NodeKind.CLOSURE),
        (astroid.nodes.GeneratorExp, NodeKind.CLOSURE),
        (astroid.nodes.If, NodeKind.CONDITIONAL),
        (astroid.nodes.IfExp, NodeKind.TERNARY),
        (astroid.nodes.Return, NodeKind.RETURN),
        (astroid.nodes.Call, NodeKind.CALL),
    )

    _BOUNDARY_KINDS: frozenset[NodeKind] = frozenset(
        {NodeKind.DEFINITION, NodeKind.SCOPE, NodeKind.CLOSURE}
    )

    @staticmethod
    def kind_of(node: astroid.nodes.NodeNG) -> NodeKind:
        """Return the NodeKind of a node; OTHER for anything unrecognised."""
        for node_class, kind in SyntaxInspector._KIND_TABLE:
            if isinstance(node, node_class):
                return kind
        return NodeKind.OTHER

    @staticmethod
    def is_scope_boundary(node: astroid.nodes.NodeNG) -> bool:
        """True for definitions, classes, modules, lambdas and comprehensions."""
        return SyntaxInspector.kind_of(node) in SyntaxInspector._BOUNDARY_KINDS

    @staticmethod
    def is_modifier_form(node: astroid.nodes.NodeNG, single_line: bool = False) -> bool:
        """
        Python's closest shape to a trailing `stmt if cond`.

        An `if` with no else/elif branch whose body is exactly one statement.
        With single_line, that statement must also sit on the `if` line.
        """
        if SyntaxInspector.kind_of(node) is not NodeKind.CONDITIONAL:
            return False
        if node.orelse or len(node.body) != 1:
            return False
        if single_line:
            return node.body[0].lineno == node.lineno
        return True

    @staticmethod
    def is_elif(node: astroid.nodes.NodeNG) -> bool:
        """True when an `if` continues its parent's chain as an `elif`."""
        parent = node.parent
        if SyntaxInspector.kind_of(node) is not NodeKind.CONDITIONAL:
            return False
        if SyntaxInspector.kind_of(parent) is not NodeKind.CONDITIONAL:
            return False
        if len(parent.orelse) != 1 or parent.orelse[0] is not node:
            return False
        # `else:` followed by an indented `if` is a nested conditional, not a chain.
        return node.col_offset == parent.col_offset

    @staticmethod
    def body_statements(node: astroid.nodes.NodeNG) -> list[astroid.nodes.NodeNG]:
        """Top-level statements of a body; a lone non-list body becomes one element."""
        body = getattr(node, "body", None)
        if body is None:
            return []
        statements = list(body) if isinstance(body, list) else [body]
        if statements and SyntaxInspector._is_docstring(statements[0]):
            return statements[1:]
        return statements

    @staticmethod
    def ancestors_within_scope(
        node: astroid.nodes.NodeNG,
    ) -> Iterator[astroid.nodes.NodeNG]:
        """Yield parents outward, stopping before the first scope boundary."""
        parent = node.parent
        while parent is not None and not SyntaxInspector.is_scope_boundary(parent):
            yield parent
            parent = parent.parent

    @staticmethod
    def walk_within_scope(
        statements: Sequence[astroid.nodes.NodeNG], kind: NodeKind
    ) -> Iterator[astroid.nodes.NodeNG]:
        """Pre-order walk over statements yielding nodes of a kind, skipping nested scopes."""
        stack = list(reversed(statements))
        while stack:
            current = stack.pop()
            if SyntaxInspector.is_scope_boundary(current):
                continue
            if SyntaxInspector.kind_of(current) is kind:
                yield current
            stack.extend(reversed(list(current.get_children())))

    @staticmethod
    def _is_docstring(statement: astroid.nodes.NodeNG) -> bool:
        value = getattr(statement, "value", None)
        return (
            isinstance(statement, astroid.nodes.Expr)
            and isinstance(value, astroid.nodes.Const)
            and isinstance(value.value, str)
        )
