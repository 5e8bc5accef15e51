"""Configuration adapters."""

from transit_routing.adapters.config.search_config import SearchConfig
from transit_routing.adapters.config.search_settings_loader import SearchSettingsLoader

__all__ = ["SearchConfig", "SearchSettingsLoader"]
