"""Unit tests for FactorySettings and the settings loaders."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar

import pytest

from factory_muffin import FactoryMuffin
from factory_muffin.config import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    FactorySettings,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    Settings,
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("FAKER_LOCALE", "FAKER_SEED", "SAVE_METHOD", "DELETE_METHOD", "FACTORY_PATHS"):
        monkeypatch.delenv(f"FACTORY_MUFFIN_{name}", raising=False)


@dataclass
class RequiredSettings(Settings):
    _prefix: ClassVar[str] = "REQ"

    token: str


class TestFactorySettings:
    def test_defaults(self) -> None:
        settings = FactorySettings()
        assert settings.faker_locale == "en_US"
        assert settings.faker_seed is None
        assert settings.save_method == "save"
        assert settings.delete_method == "delete"
        assert settings.factory_paths == []

    @pytest.mark.parametrize("field", ["faker_locale", "save_method", "delete_method"])
    def test_empty_strings_rejected(self, field: str) -> None:
        with pytest.raises(InvalidSettingValueError) as info:
            FactorySettings(**{field: "  "})
        assert info.value.setting_name == field

    def test_method_names_must_be_identifiers(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            FactorySettings(save_method="save it")


class TestEnvSettingsLoader:
    def test_defaults_when_env_empty(self) -> None:
        assert EnvSettingsLoader().load(FactorySettings) == FactorySettings()

    def test_loads_strings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FACTORY_MUFFIN_FAKER_LOCALE", "fr_FR")
        monkeypatch.setenv("FACTORY_MUFFIN_SAVE_METHOD", "persist")
        settings = EnvSettingsLoader().load(FactorySettings)
        assert settings.faker_locale == "fr_FR"
        assert settings.save_method == "persist"

    def test_loads_optional_int(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FACTORY_MUFFIN_FAKER_SEED", "42")
        assert EnvSettingsLoader().load(FactorySettings).faker_seed == 42

    def test_blank_optional_is_none(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FACTORY_MUFFIN_FAKER_SEED", "")
        assert EnvSettingsLoader().load(FactorySettings).faker_seed is None

    def test_bad_int(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FACTORY_MUFFIN_FAKER_SEED", "abc")
        with pytest.raises(InvalidSettingValueError) as info:
            EnvSettingsLoader().load(FactorySettings)
        assert info.value.setting_name == "FACTORY_MUFFIN_FAKER_SEED"
        assert isinstance(info.value.__cause__, ValueError)
        assert info.value.detail["value"] == "'abc'"

    def test_loads_list(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FACTORY_MUFFIN_FACTORY_PATHS", "tests/factories, more/factories,")
        settings = EnvSettingsLoader().load(FactorySettings)
        assert settings.factory_paths == ["tests/factories", "more/factories"]

    def test_invalid_value_propagates(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FACTORY_MUFFIN_DELETE_METHOD", "not valid")
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader().load(FactorySettings)

    def test_missing_required(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("REQ_TOKEN", raising=False)
        with pytest.raises(MissingRequiredSettingError) as info:
            EnvSettingsLoader().load(RequiredSettings)
        assert info.value.setting_name == "REQ_TOKEN"


class TestDotenvSettingsLoader:
    def test_reads_env_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("FACTORY_MUFFIN_DELETE_METHOD=destroy\n")
        # registered so monkeypatch unsets it again after the test
        monkeypatch.setenv("FACTORY_MUFFIN_DELETE_METHOD", "delete")
        settings = DotenvSettingsLoader(str(env_file), override=True).load(FactorySettings)
        assert settings.delete_method == "destroy"


class TestEngineFromSettings:
    def test_from_explicit_settings(self) -> None:
        factory = FactoryMuffin.from_settings(
            FactorySettings(faker_locale="de_DE", save_method="persist", delete_method="destroy")
        )
        assert factory.faker_locale == "de_DE"
        assert factory.save_method == "persist"
        assert factory.delete_method == "destroy"

    def test_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FACTORY_MUFFIN_SAVE_METHOD", "commit")
        assert FactoryMuffin.from_settings().save_method == "commit"

    def test_seed_from_settings_is_reproducible(self) -> None:
        first = FactoryMuffin.from_settings(FactorySettings(faker_seed=5)).generate_attr("word")
        second = FactoryMuffin.from_settings(FactorySettings(faker_seed=5)).generate_attr("word")
        assert first == second
