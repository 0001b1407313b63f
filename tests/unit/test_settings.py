from __future__ import annotations

import pytest

from lib_service_bindings.domain.settings import EMPTY_SETTINGS, Settings


def make_settings() -> Settings:
    return Settings(
        {
            "bindings": {
                "enabled": True,
                "mysql": {"enabled": False},
                "capabilities": ["org.mariadb.jdbc.Driver"],
            }
        }
    )


def test_mapping_interface() -> None:
    settings = make_settings()
    assert "bindings" in settings
    assert len(settings) == 1
    assert list(settings) == ["bindings"]


def test_get_dot_path() -> None:
    settings = make_settings()
    assert settings.get("bindings.mysql.enabled") is False
    assert settings.get("bindings.kafka.enabled") is None
    assert settings.get("bindings.kafka.enabled", default=True) is True


def test_literal_dotted_key_wins() -> None:
    settings = Settings({"bindings.redis.enabled": "false", "bindings": {"redis": {"enabled": True}}})
    assert settings.get("bindings.redis.enabled") == "false"


def test_nested_values_are_frozen() -> None:
    settings = make_settings()
    with pytest.raises(TypeError):
        settings["bindings"]["enabled"] = False  # type: ignore[index]
    assert settings.get("bindings.capabilities") == ("org.mariadb.jdbc.Driver",)


def test_as_dict_returns_deep_copy() -> None:
    settings = make_settings()
    clone = settings.as_dict()
    clone["bindings"]["mysql"]["enabled"] = True
    clone["bindings"]["capabilities"].append("org.postgresql.Driver")
    assert settings.get("bindings.mysql.enabled") is False
    assert settings.get("bindings.capabilities") == ("org.mariadb.jdbc.Driver",)


def test_with_overrides_deep_merges() -> None:
    settings = make_settings()
    updated = settings.with_overrides({"bindings": {"mysql": {"enabled": True}}})
    assert updated.get("bindings.mysql.enabled") is True
    assert updated.get("bindings.enabled") is True
    assert settings.get("bindings.mysql.enabled") is False


def test_empty_settings() -> None:
    assert len(EMPTY_SETTINGS) == 0
    assert EMPTY_SETTINGS.get("bindings.enabled") is None
