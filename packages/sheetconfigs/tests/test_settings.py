import sys
import types

import pytest
from pydantic import ValidationError

from sheetconfigs import ConfigRegistry, RegistrySettings
from sheetconfigs.conf import DEFAULTS, merge_settings, settings_from_module


@pytest.fixture
def conf_module(monkeypatch):
    module = types.ModuleType("game_sheet_conf")
    module.SEAL_ON_BOOTSTRAP = False
    module.TRACER_NAME = "game.configs"
    module.lowercase = "ignored"
    monkeypatch.setitem(sys.modules, "game_sheet_conf", module)
    return module


def test_settings_from_module_reads_upper_case_names(conf_module):
    assert settings_from_module("game_sheet_conf") == {"SEAL_ON_BOOTSTRAP": False, "TRACER_NAME": "game.configs"}
    assert settings_from_module(conf_module) == settings_from_module("game_sheet_conf")


def test_merge_settings_layers_in_order(conf_module, monkeypatch):
    monkeypatch.setenv("SHEETCONFIGS_CONFIG_MODULE", "game_sheet_conf")

    assert merge_settings() == DEFAULTS
    merged = merge_settings({"TRACER_NAME": "override"}, envvar="SHEETCONFIGS_CONFIG_MODULE")

    assert merged["SEAL_ON_BOOTSTRAP"] is False
    assert merged["TRACER_NAME"] == "override"
    assert merged["LOG_REGISTRATIONS"] is True
    assert DEFAULTS["SEAL_ON_BOOTSTRAP"] is True


def test_from_env_loads_named_module(conf_module, monkeypatch):
    monkeypatch.setenv("SHEETCONFIGS_CONFIG_MODULE", "game_sheet_conf")

    validated = RegistrySettings.from_env(LOG_REGISTRATIONS=False)

    assert validated.SEAL_ON_BOOTSTRAP is False
    assert validated.TRACER_NAME == "game.configs"
    assert validated.LOG_REGISTRATIONS is False


def test_from_env_without_envvar_uses_defaults(monkeypatch):
    monkeypatch.delenv("SHEETCONFIGS_CONFIG_MODULE", raising=False)

    assert RegistrySettings.from_env() == RegistrySettings()


def test_from_settings_ignores_the_envvar(conf_module, monkeypatch):
    monkeypatch.setenv("SHEETCONFIGS_CONFIG_MODULE", "game_sheet_conf")

    assert RegistrySettings.from_settings(None).SEAL_ON_BOOTSTRAP is True


@pytest.mark.parametrize("source", [None, {}, {"TRACING_ENABLED": False}])
def test_registry_settings_from_mapping(source):
    validated = RegistrySettings.from_settings(source)

    assert validated.SEAL_ON_BOOTSTRAP is True
    assert validated.TRACING_ENABLED is (not source)


def test_registry_settings_passthrough_and_validation():
    validated = RegistrySettings(TRACER_NAME="x")

    assert RegistrySettings.from_settings(validated) is validated
    with pytest.raises(ValidationError):
        RegistrySettings.from_settings({"LOG_REGISTRATIONS": "definitely"})


def test_registry_keeps_validated_settings():
    registry = ConfigRegistry(settings={"LOG_REGISTRATIONS": False, "EXTRA_KEY": 1})

    assert registry.settings.LOG_REGISTRATIONS is False
    assert registry.settings.TRACER_NAME == "sheetconfigs"
