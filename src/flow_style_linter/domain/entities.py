"""Value objects passed between the pylint adapter, use cases and the CLI."""

from collections import Counter
from dataclasses import dataclass, field


@dataclass(frozen=True)
class LintMessage:
    """One reported offense as printed by pylint: path, line, code, text, symbol."""

    path: str
    line: int
    code: str
    message: str
    symbol: str = ""

    def render(self) -> str:
        suffix = f" ({self.symbol})" if self.symbol else ""
        return f"{self.path}:{self.line}: {self.code}: {self.message}{suffix}"


@dataclass(frozen=True)
class CheckResult:
    """Outcome of one flow-style run over a path."""

    messages: tuple[LintMessage, ...] = ()
    error: str | None = None
    counts_by_code: dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_messages(cls, messages: list[LintMessage]) -> "CheckResult":
        counts = Counter(m.code for m in messages)
        return cls(messages=tuple(messages), counts_by_code=dict(sorted(counts.items())))

    def has_violations(self) -> bool:
        return bool(self.messages)
