"""Turns rule registry entries into the `msgs` table pylint checkers declare."""

from collections.abc import Mapping
from typing import cast

from flow_style_linter.domain.constants import DEFAULT_MSGS, FLOW_STYLE_PREFIX
from flow_style_linter.domain.registry_types import RuleRegistryEntry


class RuleMsgBuilder:
    """Pure lookups over a registry mapping keyed by "flowstyle.<code>"."""

    @staticmethod
    def get_entry(
        registry: Mapping[str, RuleRegistryEntry], rule_code: str
    ) -> RuleRegistryEntry | None:
        """Find a flow-style entry by code (W9601) or symbol (method-defined-before-caller)."""
        candidates = [registry.get(f"{FLOW_STYLE_PREFIX}{rule_code}")]
        candidates.extend(
            entry
            for key, entry in registry.items()
            if key.startswith(FLOW_STYLE_PREFIX)
            and isinstance(entry, dict)
            and entry.get("symbol") == rule_code
        )
        found = next((c for c in candidates if isinstance(c, dict)), None)
        return cast(RuleRegistryEntry, dict(found)) if found is not None else None

    @staticmethod
    def build_msgs_for_codes(
        registry: Mapping[str, RuleRegistryEntry], codes: list[str]
    ) -> dict[str, tuple[str, str, str]]:
        """
        { code: (message_template, symbol, description) } for checker.msgs.

        An entry without a message_template does not count; the code then uses
        its DEFAULT_MSGS row, and codes known to neither are left out.
        """
        msgs: dict[str, tuple[str, str, str]] = {}
        for code in codes:
            entry = RuleMsgBuilder.get_entry(registry, code)
            if entry and entry.get("message_template"):
                msgs[code] = RuleMsgBuilder._as_msg(code, entry)
            elif code in DEFAULT_MSGS:
                msgs[code] = DEFAULT_MSGS[code]
        return msgs

    @staticmethod
    def _as_msg(code: str, entry: RuleRegistryEntry) -> tuple[str, str, str]:
        description = entry.get("display_name") or entry.get("short_description") or code
        return (str(entry["message_template"]), str(entry.get("symbol") or code), str(description))
