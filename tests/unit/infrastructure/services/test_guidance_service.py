"""Tests for GuidanceService."""

from flow_style_linter.domain.constants import DEFAULT_MSGS
from flow_style_linter.infrastructure.services.guidance_service import GuidanceService


class TestGuidanceService:
    def test_packaged_registry_covers_every_code(self):
        service = GuidanceService()
        registry = service.get_registry()

        for code, (template, symbol, _) in DEFAULT_MSGS.items():
            entry = registry[f"flowstyle.{code}"]
            assert entry["symbol"] == symbol
            assert entry["message_template"] == template
            assert entry["manual_instructions"]

    def test_lookup_by_code_or_symbol(self):
        service = GuidanceService()
        assert service.get_display_name("W9601") == "Method Order"
        assert service.get_entry("early-return")["symbol"] == "early-return"
        assert service.get_symbol("W9704") == "nested-conditional"

    def test_custom_registry_file(self, tmp_path):
        path = tmp_path / "rules.yaml"
        path.write_text(
            "flowstyle.W9701:\n"
            "  symbol: early-return\n"
            "  display_name: Custom\n"
            "  manual_instructions: Do the thing.\n"
        )
        service = GuidanceService(str(path))

        assert service.get_display_name("W9701") == "Custom"
        assert service.get_manual_instructions("early-return") == "Do the thing."
        assert service.get_rule_codes() == sorted(DEFAULT_MSGS)

    def test_missing_registry_falls_back_to_built_in_messages(self, tmp_path):
        service = GuidanceService(str(tmp_path / "missing.yaml"))

        assert service.get_registry() == {}
        assert service.get_symbol("W9702") == "unnecessary-guard-clause"
        assert service.get_display_name("W9702") == "Unnecessary Guard Clause"
        assert service.get_manual_instructions("W9702") == DEFAULT_MSGS["W9702"][2]
        assert service.get_symbol("W0001") == "W0001"
        assert service.get_manual_instructions("W0001").startswith("See project docs")
