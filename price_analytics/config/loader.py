"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from .defaults import AnalyticsConfig, get_default_config


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: AnalyticsConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def _load_categories(self) -> dict[str, Any]:
        """Read the categories section of categories.yaml, empty when absent."""
        categories_file = self.config_dir / "categories.yaml"

        if not categories_file.exists():
            return {}

        with open(categories_file) as f:
            categories_config = yaml.safe_load(f) or {}

        return categories_config.get("categories") or {}

    def list_categories(self) -> list[str]:
        """Category ids that carry overrides."""
        return list(self._load_categories())

    def load_category_config(self, category_id: str) -> dict[str, Any]:
        """Load category-specific configuration overrides."""
        return self._load_categories().get(category_id, {})  # type: ignore[no-any-return]

    def merge_config(
        self,
        category_id: Optional[str] = None,
        request_overrides: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Per-request overrides (highest priority)
        2. Category-specific overrides
        3. Global defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)

        if category_id:
            category_config = self.load_category_config(category_id)
            config = self._deep_merge(config, category_config)

        if request_overrides:
            config = self._deep_merge(config, request_overrides)

        return config

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name in obj.__dataclass_fields__:
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
