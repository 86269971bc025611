from pathlib import Path

import pytest
from typer.testing import CliRunner

from opoopress.cli.main import app

runner = CliRunner()


def test_init_creates_configured_directories(tmp_path: Path, make_config):
    make_config(tmp_path, {"source_dirs": ["source"], "asset_dirs": ["assets"]})

    result = runner.invoke(app, ["init", str(tmp_path), "--locale", "xx_XX"])

    assert result.exit_code == 0, result.output
    assert "Initialization Complete" in result.output
    assert (tmp_path / "source").is_dir()
    assert (tmp_path / "assets").is_dir()
    assert (tmp_path / "themes").is_dir()


def test_init_promotes_locale_config(tmp_path: Path, make_config):
    make_config(tmp_path, {"source_dirs": ["localized"]}, name="config_zh_CN.yml")

    result = runner.invoke(app, ["init", str(tmp_path), "--locale", "zh_CN"])

    assert result.exit_code == 0, result.output
    assert "config.yml" in result.output
    assert (tmp_path / "localized").is_dir()


def test_init_without_config_warns(tmp_path: Path):
    result = runner.invoke(app, ["init", str(tmp_path), "--locale", "xx_XX"])

    assert result.exit_code == 0
    assert "No config.yml found" in result.output


def test_init_reports_invalid_directory(tmp_path: Path, make_config):
    make_config(tmp_path, {"source_dirs": ["source"]})
    (tmp_path / "source").write_text("", encoding="utf-8")

    result = runner.invoke(app, ["init", str(tmp_path), "--locale", "xx_XX"])

    assert result.exit_code == 1


def test_new_post_writes_file(site_dir: Path):
    result = runner.invoke(
        app,
        ["new", "post", "Hello World", "--site", str(site_dir), "--meta", "category=news"],
    )

    assert result.exit_code == 0, result.output
    posts = list((site_dir / "source" / "_posts").glob("*-hello-world.markdown"))
    assert len(posts) == 1
    assert 'title: "Hello World"' in posts[0].read_text(encoding="utf-8")


def test_new_with_pattern_and_template(site_dir: Path):
    result = runner.invoke(
        app,
        [
            "new",
            "note",
            "Idea",
            "--site",
            str(site_dir),
            "--pattern",
            "notes/{{ name }}.{{ format }}",
            "--template",
            "{{ title }} by {{ author }}",
            "--format",
            "txt",
            "-m",
            "author=bob",
        ],
    )

    assert result.exit_code == 0, result.output
    assert (site_dir / "notes" / "idea.txt").read_text(encoding="utf-8") == "Idea by bob"


def test_new_unknown_layout_fails(site_dir: Path):
    result = runner.invoke(app, ["new", "gallery", "Pics", "--site", str(site_dir)])

    assert result.exit_code == 1
    assert not (site_dir / "source").exists()


def test_new_no_clobber_refuses_overwrite(site_dir: Path):
    args = ["new", "note", "Idea", "--site", str(site_dir), "--pattern", "n/{{ name }}.md", "--template", "x"]
    assert runner.invoke(app, args).exit_code == 0

    result = runner.invoke(app, [*args, "--no-clobber"])

    assert result.exit_code == 1


def test_new_rejects_malformed_meta(site_dir: Path):
    result = runner.invoke(app, ["new", "post", "T", "--site", str(site_dir), "--meta", "novalue"])

    assert result.exit_code != 0


def test_debug_flag_reraises(site_dir: Path):
    result = runner.invoke(app, ["new", "gallery", "Pics", "--site", str(site_dir), "--debug"])

    assert result.exit_code == 1
    assert result.exception is not None
    assert type(result.exception).__name__ == "MissingPattern"


@pytest.mark.parametrize("env_value", ["1", "true"])
def test_fail_if_exists_from_environment(site_dir: Path, monkeypatch: pytest.MonkeyPatch, env_value: str):
    args = ["new", "note", "Idea", "--site", str(site_dir), "--pattern", "n/{{ name }}.md", "--template", "x"]
    assert runner.invoke(app, args).exit_code == 0

    monkeypatch.setenv("OPOOPRESS_FAIL_IF_EXISTS", env_value)
    result = runner.invoke(app, args)

    assert result.exit_code == 1


@pytest.mark.parametrize("command", [["init"], ["new", "post", "T"]])
def test_invalid_setting_exits_cleanly(site_dir: Path, monkeypatch: pytest.MonkeyPatch, command: list[str]):
    """GIVEN an environment variable that is not a valid setting
    WHEN any command runs
    THEN it exits with code 1 instead of a raw traceback and writes nothing
    """
    monkeypatch.setenv("OPOOPRESS_FAIL_IF_EXISTS", "maybe")
    args = [*command, str(site_dir)] if command == ["init"] else [*command, "--site", str(site_dir)]

    result = runner.invoke(app, args)

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "Traceback" not in result.output
    assert not (site_dir / "source").exists()


def test_new_with_missing_template_name_fails(site_dir: Path):
    result = runner.invoke(
        app, ["new", "post", "T", "--site", str(site_dir), "--template", "missing_post.md.jinja"]
    )

    assert result.exit_code == 1
    assert not (site_dir / "source").exists()
