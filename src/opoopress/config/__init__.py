"""Configuration facade.

    from opoopress.config import SiteConfig, OpooPressSettings
"""

from opoopress.config.exceptions import ConfigError, ConfigParseError, ConfigPromotionFailed
from opoopress.config.settings import DEFAULT_FORMAT, OpooPressSettings, default_locale, normalize_locale
from opoopress.config.site_config import CONFIG_FILE_NAME, SiteConfig, discover_config_files

__all__ = [
    "CONFIG_FILE_NAME",
    "DEFAULT_FORMAT",
    "ConfigError",
    "ConfigParseError",
    "ConfigPromotionFailed",
    "OpooPressSettings",
    "SiteConfig",
    "default_locale",
    "discover_config_files",
    "normalize_locale",
]
