"""
Flow Style: rule codes, registry keys and built-in message table.
"""

# Registry keys are "flowstyle.<code>", e.g. "flowstyle.W9601"
FLOW_STYLE_PREFIX: str = "flowstyle."

# Name of the [tool.<section>] table in pyproject.toml
CONFIG_SECTION: str = "flow-style"

PLUGIN_MODULE: str = "flow_style_linter.infrastructure.checker"

METHOD_ORDER_CODE: str = "W9601"
EARLY_RETURN_CODE: str = "W9701"
UNNECESSARY_GUARD_CODE: str = "W9702"
STACKED_GUARDS_CODE: str = "W9703"
NESTED_CONDITIONAL_CODE: str = "W9704"

# Fallback when resources/rule_registry.yaml is missing or incomplete:
# code -> (message_template, symbol, description)
DEFAULT_MSGS: dict[str, tuple[str, str, str]] = {
    METHOD_ORDER_CODE: (
        "Define `%s` after the functions that call it, not before.",
        "method-defined-before-caller",
        "Functions should follow newspaper order: callers first, helpers after.",
    ),
    EARLY_RETURN_CODE: (
        "Avoid early return. Use guard clauses at the top of the function or restructure the logic.",
        "early-return",
        "Only leading guard clauses and the final result may return.",
    ),
    UNNECESSARY_GUARD_CODE: (
        "Use a conditional expression instead of a guard clause when the function body is a single expression.",
        "unnecessary-guard-clause",
        "A guard followed by one expression is the logic itself, not a precondition.",
    ),
    STACKED_GUARDS_CODE: (
        "Combine consecutive guard clauses into a single condition or restructure the function.",
        "stacked-guard-clauses",
        "Several leading guard clauses hide one compound precondition.",
    ),
    NESTED_CONDITIONAL_CODE: (
        "Avoid nested conditionals. Extract a function or use guard clauses.",
        "nested-conditional",
        "Conditionals nested inside other conditionals add layers of indirection.",
    ),
}

DEFAULT_IMPLICIT_RECEIVERS: tuple[str, ...] = ("self", "cls")

# Decorators that turn a method into an attribute read
PROPERTY_DECORATORS: frozenset[str] = frozenset(
    {
        "property",
        "cached_property",
        "functools.cached_property",
        "builtins.property",
    }
)

# Fewer direct definitions than this leaves no ordering question
MIN_SCOPE_DEFINITIONS: int = 2
