"""Search settings loader."""

from datetime import timedelta

from transit_routing.adapters.config.search_config import SearchConfig
from transit_routing.domain.models.search_settings import SearchSettings


class SearchSettingsLoader:
    """Loads domain search settings from the search config."""

    @staticmethod
    def load(config: SearchConfig) -> SearchSettings:
        """Load search settings, applying TOML overrides first."""
        config.load_toml_overrides()
        return SearchSettings(
            transfer_buffer=timedelta(minutes=config.default_transfer_minutes),
            retention_factor=config.top_n_retention_factor,
            result_cap_factor=config.top_n_result_cap_factor,
        )
