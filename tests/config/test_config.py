"""Test configuration management."""

from pathlib import Path

import pytest

from keypath.config.config import Config, ConfigError
from keypath.config.paths import ENV_CONFIG_PATH, default_config_path


def test_default_config(portable_repo_root: Path) -> None:
    """Missing config file yields defaults and writes nothing."""
    _ = portable_repo_root
    config = Config.load()
    assert config.log_file is None
    assert config.prefix is None
    assert not default_config_path().exists()


def test_save_load_toml(portable_repo_root: Path) -> None:
    """Saved values load back unchanged from the default location."""
    _ = portable_repo_root
    original_config = Config(
        log_file=Path("/test/logs/keypath.log"),
        prefix="tenants/acme",
    )
    target = original_config.save()
    assert target == default_config_path()

    loaded_config = Config.load()
    assert loaded_config.log_file == Path("/test/logs/keypath.log")
    assert loaded_config.prefix == "tenants/acme"


def test_save_load_none_values(portable_repo_root: Path) -> None:
    _ = portable_repo_root
    _ = Config().save()

    loaded_config = Config.load()
    assert loaded_config.log_file is None
    assert loaded_config.prefix is None


def test_save_escapes_strings(tmp_path: Path) -> None:
    """Quotes and backslashes survive a TOML round trip."""
    target = tmp_path / "odd.toml"
    _ = Config(log_file=Path('C:\\logs\\"k".log')).save(target)

    assert Config.load(target).log_file == Path('C:\\logs\\"k".log')


def test_load_from_environment(portable_repo_root: Path, tmp_path: Path) -> None:
    _ = portable_repo_root
    config_file = tmp_path / "custom" / "settings.toml"
    config_file.parent.mkdir()
    _ = config_file.write_text('prefix = "env/prefix"\n', encoding="utf-8")

    config = Config.load(env={ENV_CONFIG_PATH: str(config_file)})
    assert config.prefix == "env/prefix"


def test_empty_strings_become_none(tmp_path: Path) -> None:
    config_file = tmp_path / "blank.toml"
    _ = config_file.write_text('log_file = ""\nprefix = "  "\n', encoding="utf-8")

    config = Config.load(config_file)
    assert config.log_file is None
    assert config.prefix is None


def test_invalid_toml_raises_config_error(tmp_path: Path) -> None:
    config_file = tmp_path / "broken.toml"
    _ = config_file.write_text("prefix = [unterminated\n", encoding="utf-8")

    with pytest.raises(ConfigError) as exc_info:
        _ = Config.load(config_file)
    assert exc_info.value.path == config_file.resolve()


def test_wrong_type_raises_config_error(tmp_path: Path) -> None:
    config_file = tmp_path / "typed.toml"
    _ = config_file.write_text("prefix = 42\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="'prefix' must be a string"):
        _ = Config.load(config_file)


def test_unknown_keys_are_ignored(tmp_path: Path) -> None:
    config_file = tmp_path / "extra.toml"
    _ = config_file.write_text('colour = "blue"\nprefix = "a"\n', encoding="utf-8")

    assert Config.load(config_file).prefix == "a"

