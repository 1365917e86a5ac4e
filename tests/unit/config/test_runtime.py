from __future__ import annotations

import pytest

from caseconv.config import ConfigurationError, runtime
from caseconv.config.dotenv_loader import parse_dotenv, read_dotenv


def test_parse_dotenv_skips_noise_and_strips_quotes() -> None:
    lines = ["# comment", "", "not a pair", "=orphan", "export A='quoted'", 'B="double"', "C = plain ", "A=again"]
    assert parse_dotenv(lines) == {"A": "again", "B": "double", "C": "plain"}


def test_read_dotenv_missing_file_is_empty(tmp_path) -> None:
    assert read_dotenv(tmp_path / "missing.env") == {}


def test_read_dotenv_rejects_undecodable_file(tmp_path) -> None:
    broken = tmp_path / ".env"
    broken.write_bytes(b"X=\xff\xfe\n")
    with pytest.raises(ConfigurationError, match="Failed to load configuration"):
        read_dotenv(broken)


def test_local_file_wins_over_home_file(monkeypatch, tmp_path) -> None:
    local = tmp_path / "local.env"
    local.write_text("SHARED=local\nONLY_LOCAL=1\n")
    home = tmp_path / "home.env"
    home.write_text("SHARED=home\nONLY_HOME=2\n")

    monkeypatch.setattr(runtime, "_FILE_VALUES", None)
    monkeypatch.setattr(runtime, "_DOTENV_FILES", (local, home))

    values = runtime._file_values()
    assert values == {"SHARED": "local", "ONLY_LOCAL": "1", "ONLY_HOME": "2"}
    # Cached value is reused without re-reading files
    assert runtime._file_values() is values


def test_lookup_prefers_environment_over_files(monkeypatch) -> None:
    monkeypatch.setattr(runtime, "_FILE_VALUES", {"FROM_FILE": " spaced ", "BOTH": "file", "BLANK_ENV": "file"})
    monkeypatch.setenv("BOTH", "env")
    monkeypatch.setenv("BLANK_ENV", "  ")
    monkeypatch.delenv("FROM_FILE", raising=False)
    monkeypatch.delenv("NOWHERE", raising=False)

    assert runtime.lookup("BOTH") == "env"
    assert runtime.lookup("FROM_FILE") == "spaced"
    assert runtime.lookup("BLANK_ENV") == "file"
    assert runtime.lookup("NOWHERE") is None


@pytest.mark.parametrize(("raw", "expected"), [("YeS", True), ("1", True), ("off", False), ("F", False)])
def test_env_bool_accepts_truthy_and_falsy(monkeypatch, raw: str, expected: bool) -> None:
    monkeypatch.setenv("BOOL_VALUE", raw)
    assert runtime.env_bool("BOOL_VALUE", False) is expected


def test_env_bool_default_and_invalid(monkeypatch) -> None:
    monkeypatch.delenv("BOOL_MISSING", raising=False)
    assert runtime.env_bool("BOOL_MISSING", True) is True

    monkeypatch.setenv("BOOL_VALUE", "maybe")
    with pytest.raises(ConfigurationError, match="BOOL_VALUE has invalid format"):
        runtime.env_bool("BOOL_VALUE", False)


def test_env_choice(monkeypatch) -> None:
    monkeypatch.setenv("LEVEL", "info")
    assert runtime.env_choice("LEVEL", ("INFO", "DEBUG"), "DEBUG") == "INFO"

    monkeypatch.delenv("LEVEL")
    assert runtime.env_choice("LEVEL", ("INFO", "DEBUG"), "DEBUG") == "DEBUG"

    monkeypatch.setenv("LEVEL", "loud")
    with pytest.raises(ConfigurationError, match="received 'loud'"):
        runtime.env_choice("LEVEL", ("INFO", "DEBUG"), "DEBUG")
