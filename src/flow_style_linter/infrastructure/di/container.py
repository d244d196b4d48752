from typing import Any, Optional

from flow_style_linter.domain.config import ConfigurationLoader
from flow_style_linter.infrastructure.adapters.pylint_adapter import PylintAdapter
from flow_style_linter.infrastructure.config_file_loader import ConfigFileLoader
from flow_style_linter.infrastructure.services.guidance_service import GuidanceService


class FlowStyleContainer:
    """Dependency Injection Container for the flow-style plugin and CLI."""

    _instance: Optional["FlowStyleContainer"] = None

    def __init__(self) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults()

    @classmethod
    def get_instance(cls) -> "FlowStyleContainer":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the shared container so the next get_instance() reloads configuration."""
        cls._instance = None

    def _register_defaults(self) -> None:
        """Register default implementations."""
        config_dict = ConfigFileLoader.load_config_from_fs()
        self.register_singleton("ConfigurationLoader", ConfigurationLoader(config_dict))

        guidance_service = GuidanceService()
        self.register_singleton("GuidanceService", guidance_service)
        self.register_singleton("PylintAdapter", PylintAdapter(guidance_service.get_rule_codes()))

    def register_singleton(self, name: str, instance: Any) -> None:
        self._singletons[name] = instance

    def get(self, name: str) -> Any:
        if name not in self._singletons:
            raise KeyError(f"Service '{name}' is not registered")
        return self._singletons[name]

    def get_config_loader(self) -> ConfigurationLoader:
        return self.get("ConfigurationLoader")

    def get_guidance_service(self) -> GuidanceService:
        return self.get("GuidanceService")

    def get_pylint_adapter(self) -> PylintAdapter:
        return self.get("PylintAdapter")
