"""GuidanceService: loads the rule registry and provides display names and manual instructions."""

import logging
from pathlib import Path
from typing import cast

import yaml

from flow_style_linter.domain.constants import DEFAULT_MSGS, FLOW_STYLE_PREFIX
from flow_style_linter.domain.registry_types import RuleRegistryEntry

logger = logging.getLogger(__name__)


class GuidanceService:
    """Loads rule_registry.yaml and provides get_manual_instructions / get_display_name."""

    def __init__(self, registry_path: str | None = None) -> None:
        if registry_path is not None:
            self._path = Path(registry_path)
        else:
            # Default: packaged resource next to this package
            _base = Path(__file__).resolve().parent.parent.parent
            self._path = _base / "resources" / "rule_registry.yaml"
        self._registry: dict[str, RuleRegistryEntry] = {}
        self._load()

    def _load(self) -> None:
        if not self._path.exists():
            logger.debug("Rule registry %s not found; using built-in messages", self._path)
            self._registry = {}
            return
        with open(self._path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        self._registry = (
            cast(dict[str, RuleRegistryEntry], data) if isinstance(data, dict) else {}
        )
        logger.debug("Loaded %d rule registry entries from %s", len(self._registry), self._path)

    def get_registry(self) -> dict[str, RuleRegistryEntry]:
        """Return a shallow copy of the loaded registry for use by domain/use_cases."""
        return dict(self._registry)

    def get_entry(self, rule_code: str) -> RuleRegistryEntry | None:
        """Return the full registry entry for a rule by code or symbol."""
        entry = self._registry.get(f"{FLOW_STYLE_PREFIX}{rule_code}")
        if entry:
            return cast(RuleRegistryEntry, dict(entry))
        for rid, e in self._registry.items():
            if rid.startswith(FLOW_STYLE_PREFIX) and e.get("symbol") == rule_code:
                return cast(RuleRegistryEntry, dict(e))
        return None

    def get_rule_codes(self) -> list[str]:
        """All known rule codes: registry entries plus built-in defaults."""
        codes = {
            rid[len(FLOW_STYLE_PREFIX):]
            for rid in self._registry
            if rid.startswith(FLOW_STYLE_PREFIX)
        }
        return sorted(codes | set(DEFAULT_MSGS))

    def get_symbol(self, rule_code: str) -> str:
        entry = self.get_entry(rule_code)
        if entry and entry.get("symbol"):
            return str(entry["symbol"])
        if rule_code in DEFAULT_MSGS:
            return DEFAULT_MSGS[rule_code][1]
        return rule_code

    def get_display_name(self, rule_code: str) -> str:
        """Return display name for a rule (for CLI listings)."""
        entry = self.get_entry(rule_code)
        if not entry:
            return self.get_symbol(rule_code).replace("-", " ").title()
        return str(
            entry.get("display_name")
            or entry.get("short_description")
            or rule_code.replace("-", " ").title()
        )

    def get_manual_instructions(self, rule_code: str) -> str:
        """Return manual fix instructions for the given rule code or symbol."""
        entry = self.get_entry(rule_code)
        if entry and "manual_instructions" in entry:
            return str(entry["manual_instructions"])
        if rule_code in DEFAULT_MSGS:
            return DEFAULT_MSGS[rule_code][2]
        return "See project docs. Fix the violation at the reported location."
