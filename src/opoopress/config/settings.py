"""Runtime settings for the OpooPress command line.

Values come from keyword arguments or ``OPOOPRESS_*`` environment variables
(e.g. ``OPOOPRESS_LOCALE=zh_CN``, ``OPOOPRESS_FAIL_IF_EXISTS=1``).
"""

from __future__ import annotations

import locale as _locale
import os
import re

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_FORMAT = "markdown"

_LOCALE_PATTERN = re.compile(r"^(?P<lang>[A-Za-z]{2,3})(?:[-_](?P<country>[A-Za-z]{2}|\d{3}))?$")


def normalize_locale(value: str) -> str:
    """Normalize a locale string to the ``language_COUNTRY`` form.

    Encoding and modifier suffixes are dropped. Strings with script or
    variant subtags are returned as given.

    Examples:
        >>> normalize_locale("en-us")
        'en_US'
        >>> normalize_locale("zh_CN.UTF-8")
        'zh_CN'
        >>> normalize_locale("fr")
        'fr'
        >>> normalize_locale("zh_Hans_CN")
        'zh_Hans_CN'

    """
    cleaned = value.strip().split(".", 1)[0].split("@", 1)[0]
    match = _LOCALE_PATTERN.match(cleaned)
    if not match:
        return cleaned
    lang = match.group("lang").lower()
    country = match.group("country")
    return f"{lang}_{country.upper()}" if country else lang


def default_locale() -> str | None:
    """Return the process default locale, e.g. ``en_US``, or ``None`` if unknown."""
    try:
        language = _locale.getlocale()[0]
    except ValueError:
        language = None
    if not language or language == "C":
        for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
            language = os.environ.get(var)
            if language:
                break
    if not language or language.split(".", 1)[0] in ("C", "POSIX"):
        return None
    return normalize_locale(language)


class OpooPressSettings(BaseSettings):
    """Settings shared by the ``init`` and ``new`` commands."""

    locale: str | None = Field(default=None, description="Locale used to pick config_<locale>.yml")
    log_level: str = Field(default="INFO", description="Root logging level")
    fail_if_exists: bool = Field(default=False, description="Refuse to overwrite existing content files")
    default_format: str = Field(default=DEFAULT_FORMAT, description="Format used when none is given")

    model_config = SettingsConfigDict(
        env_prefix="OPOOPRESS_",
        extra="ignore",
    )

    @field_validator("locale")
    @classmethod
    def _normalize_locale(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        return normalize_locale(v)

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return v.upper()


__all__ = ["DEFAULT_FORMAT", "OpooPressSettings", "default_locale", "normalize_locale"]
