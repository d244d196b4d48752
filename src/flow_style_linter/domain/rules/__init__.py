"""Offense records and the protocol every flow-style rule follows."""

from dataclasses import dataclass
from typing import Protocol

import astroid

__all__ = [
    "Checkable",
    "Violation",
]

# astroid's Module.file for code parsed from a string
UNKNOWN_SOURCE_FILE: str = "<?>"


@dataclass(frozen=True)
class Violation:
    """One offense: rule code, rendered message, `path:line:col` and the node to report on."""

    code: str
    message: str
    location: str
    node: astroid.nodes.NodeNG
    message_args: tuple[str, ...] | None = None
    """Values substituted into the pylint message template, e.g. (function_name,)."""

    @property
    def line(self) -> int:
        return getattr(self.node, "lineno", 0) or 0

    @classmethod
    def from_node(
        cls,
        *,
        code: str,
        message: str,
        node: astroid.nodes.NodeNG,
        message_args: tuple[str, ...] | None = None,
    ) -> "Violation":
        path = getattr(node.root(), "file", "") or ""
        if path == UNKNOWN_SOURCE_FILE:
            path = ""
        column = getattr(node, "col_offset", 0) or 0
        return cls(
            code=code,
            message=message,
            location=f"{path}:{getattr(node, 'lineno', 0)}:{column}",
            node=node,
            message_args=message_args,
        )


class Checkable(Protocol):
    """A rule that inspects one node and returns its offenses in source order."""

    code: str
    description: str

    def check(self, node: astroid.nodes.NodeNG) -> list[Violation]:
        ...
