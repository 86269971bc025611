"""Site initialization: locale config promotion, then directory checks."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from opoopress.config.site_config import SiteConfig
from opoopress.init.directories import check_directories
from opoopress.init.locale_config import promote_locale_config

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class InitializationResult:
    """What ``initialize`` changed on disk."""

    base_dir: Path
    promoted_config: Path | None = None
    created_dirs: list[Path] = field(default_factory=list)
    config_files: tuple[Path, ...] = ()


def initialize(base_dir: Path, locale: str | None = None) -> InitializationResult:
    """Prepare ``base_dir`` for use as a site.

    The locale config is promoted first so that the directory checks read
    the promoted ``config.yml``.
    """
    base_dir = base_dir.expanduser().resolve()
    promoted = promote_locale_config(base_dir, locale)

    config = SiteConfig(base_dir)
    created = check_directories(base_dir, config)

    logger.debug("Initialized %s (%d directories created)", base_dir, len(created))
    return InitializationResult(
        base_dir=base_dir,
        promoted_config=promoted,
        created_dirs=created,
        config_files=config.config_files,
    )


__all__ = ["InitializationResult", "initialize"]
