from pathlib import Path
from unittest.mock import patch

import pytest

from opoopress.config.exceptions import ConfigPromotionFailed
from opoopress.init.locale_config import locale_config_path, promote_locale_config


@pytest.mark.parametrize("locale", ["zh_CN", "en_US", "fr"])
def test_promotion_replaces_config_with_locale_file(tmp_path: Path, locale: str):
    """
    GIVEN a config.yml and a config_<locale>.yml
    WHEN the locale config is promoted
    THEN config.yml holds the locale file's content and the locale file is gone.
    """
    (tmp_path / "config.yml").write_text("title: plain\n", encoding="utf-8")
    locale_file = locale_config_path(tmp_path, locale)
    locale_file.write_text(f"title: {locale}\n", encoding="utf-8")

    promoted = promote_locale_config(tmp_path, locale)

    assert promoted == tmp_path / "config.yml"
    assert (tmp_path / "config.yml").read_text(encoding="utf-8") == f"title: {locale}\n"
    assert not locale_file.exists()


def test_promotion_without_existing_plain_config(tmp_path: Path):
    (tmp_path / "config_zh_CN.yml").write_text("title: chinese\n", encoding="utf-8")

    promote_locale_config(tmp_path, "zh_CN")

    assert (tmp_path / "config.yml").read_text(encoding="utf-8") == "title: chinese\n"


def test_missing_locale_file_leaves_config_untouched(tmp_path: Path):
    config = tmp_path / "config.yml"
    config.write_text("title: plain\n", encoding="utf-8")
    (tmp_path / "config_de_DE.yml").write_text("title: german\n", encoding="utf-8")

    assert promote_locale_config(tmp_path, "zh_CN") is None

    assert config.read_text(encoding="utf-8") == "title: plain\n"
    assert (tmp_path / "config_de_DE.yml").exists()


def test_locale_is_normalized(tmp_path: Path):
    (tmp_path / "config_en_US.yml").write_text("title: english\n", encoding="utf-8")

    promote_locale_config(tmp_path, "en-us")

    assert (tmp_path / "config.yml").read_text(encoding="utf-8") == "title: english\n"


def test_default_locale_is_used_when_none_given(tmp_path: Path):
    (tmp_path / "config_pt_BR.yml").write_text("title: portuguese\n", encoding="utf-8")

    with patch("opoopress.init.locale_config.default_locale", return_value="pt_BR"):
        promote_locale_config(tmp_path)

    assert (tmp_path / "config.yml").read_text(encoding="utf-8") == "title: portuguese\n"


def test_unknown_default_locale_skips_promotion(tmp_path: Path):
    with patch("opoopress.init.locale_config.default_locale", return_value=None):
        assert promote_locale_config(tmp_path) is None


def test_failed_delete_is_not_fatal(tmp_path: Path, caplog: pytest.LogCaptureFixture):
    (tmp_path / "config.yml").write_text("title: plain\n", encoding="utf-8")
    (tmp_path / "config_zh_CN.yml").write_text("title: chinese\n", encoding="utf-8")

    with patch.object(Path, "unlink", side_effect=PermissionError("locked")):
        promote_locale_config(tmp_path, "zh_CN")

    assert "Could not delete" in caplog.text
    assert (tmp_path / "config.yml").read_text(encoding="utf-8") == "title: chinese\n"


def test_failed_rename_raises_promotion_error(tmp_path: Path):
    """
    GIVEN a locale config file that cannot be renamed
    WHEN the locale config is promoted
    THEN ConfigPromotionFailed is raised with the OS error as its cause.
    """
    (tmp_path / "config_zh_CN.yml").write_text("title: chinese\n", encoding="utf-8")
    original_error = OSError("read-only file system")

    with patch.object(Path, "replace", side_effect=original_error):
        with pytest.raises(ConfigPromotionFailed) as exc_info:
            promote_locale_config(tmp_path, "zh_CN")

    assert exc_info.value.source == tmp_path / "config_zh_CN.yml"
    assert exc_info.value.target == tmp_path / "config.yml"
    assert exc_info.value.__cause__ is original_error
