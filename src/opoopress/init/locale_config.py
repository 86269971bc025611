"""Promotion of a locale-specific configuration file to ``config.yml``."""

from __future__ import annotations

import logging
from pathlib import Path

from opoopress.config.exceptions import ConfigPromotionFailed
from opoopress.config.settings import default_locale, normalize_locale
from opoopress.config.site_config import CONFIG_FILE_NAME

logger = logging.getLogger(__name__)


def locale_config_path(base_dir: Path, locale: str) -> Path:
    """Return the ``config_<locale>.yml`` path for ``base_dir``."""
    return base_dir / f"config_{locale}.yml"


def promote_locale_config(base_dir: Path, locale: str | None = None) -> Path | None:
    """Replace ``config.yml`` with ``config_<locale>.yml`` when the latter exists.

    The locale file is consumed: it is renamed, not copied. Deleting the old
    ``config.yml`` is best-effort; a failed rename aborts with
    :class:`ConfigPromotionFailed`.

    Args:
        base_dir: Site base directory.
        locale: Locale such as ``zh_CN``; defaults to the process locale.

    Returns:
        The promoted ``config.yml`` path, or ``None`` when nothing was promoted.

    """
    locale = normalize_locale(locale) if locale else default_locale()
    if not locale:
        logger.debug("No locale available, skip config update.")
        return None

    config_file = base_dir / CONFIG_FILE_NAME
    locale_file = locale_config_path(base_dir, locale)

    if not locale_file.exists():
        logger.debug("%s not exists, skip update.", locale_file.name)
        return None

    if config_file.exists():
        try:
            config_file.unlink()
        except OSError as e:
            logger.warning("Could not delete %s before promotion: %s", config_file, e)

    try:
        locale_file.replace(config_file)
    except OSError as e:
        raise ConfigPromotionFailed(locale_file, config_file, e) from e

    logger.info("Promoted %s to %s", locale_file.name, config_file.name)
    return config_file


__all__ = ["locale_config_path", "promote_locale_config"]
