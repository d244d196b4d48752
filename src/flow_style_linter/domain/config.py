"""Configuration for flow-style rules. Immutable value object created by Infrastructure."""

from __future__ import annotations

import logging

from flow_style_linter.domain.constants import DEFAULT_IMPLICIT_RECEIVERS


class ConfigurationLoader:
    """
    Immutable configuration for the flow-style checkers.

    Created by Infrastructure from [tool.flow-style]. Domain does not read the
    filesystem; Infrastructure calls ConfigFileLoader.load_config_from_fs() and
    constructs ConfigurationLoader(config_dict) at composition root.
    Values of the wrong type fall back to their defaults with a warning.
    """

    KNOWN_KEYS: frozenset[str] = frozenset(
        {
            "implicit-receivers",
            "single-line-guards",
            "check-module-functions",
            "ignore-methods",
        }
    )

    def __init__(self, config_dict: dict[str, object] | None = None) -> None:
        """Set config once at construction. No mutable class or instance state after init."""
        self._config = dict(config_dict or {})
        if self._config:
            self.validate_config(self._config)

    def validate_config(self, config: dict[str, object]) -> None:
        """Warn about unknown keys; type errors are reported by the property that reads them."""
        unknown = sorted(set(config) - self.KNOWN_KEYS)
        if unknown:
            logging.warning(
                "Configuration Warning: unknown [tool.flow-style] keys ignored: %s",
                ", ".join(unknown),
            )

    @property
    def implicit_receivers(self) -> tuple[str, ...]:
        """Receiver names treated as 'no explicit receiver' when building call graphs."""
        return tuple(self._str_list("implicit-receivers", list(DEFAULT_IMPLICIT_RECEIVERS)))

    @property
    def single_line_guards(self) -> bool:
        """Require `if cond: return` on one line for it to count as a guard clause."""
        return self._bool("single-line-guards", False)

    @property
    def check_module_functions(self) -> bool:
        """Apply the method order rule to module-level functions as well as classes."""
        return self._bool("check-module-functions", True)

    @property
    def ignore_methods(self) -> list[str]:
        """Function names never reported by the method order rule."""
        return self._str_list("ignore-methods", [])

    def _bool(self, key: str, default: bool) -> bool:
        raw = self._config.get(key, default)
        if isinstance(raw, bool):
            return raw
        logging.warning("Configuration Warning: '%s' must be a boolean, using %s.", key, default)
        return default

    def _str_list(self, key: str, default: list[str]) -> list[str]:
        raw = self._config.get(key, default)
        if isinstance(raw, list) and all(isinstance(x, str) for x in raw):
            return list(raw)
        logging.warning("Configuration Warning: '%s' must be a list of strings, using defaults.", key)
        return default
