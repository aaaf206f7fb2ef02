"""Unit tests for /src/core/config.py"""

import pytest

from src.core.config import RulesConfig

ENV_NAMES = [
    "CHECKERS_MANDATORY_CAPTURE",
    "CHECKERS_FORCED_CONTINUATION",
    "CHECKERS_AUTO_ADVANCE_TURN",
    "CHECKERS_BLOCKED_PLAYER_LOSES",
]


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in ENV_NAMES:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults_are_standard_rules() -> None:
    rules = RulesConfig()
    assert rules.mandatory_capture
    assert rules.forced_continuation
    assert rules.auto_advance_turn
    assert rules.blocked_player_loses


def test_reference_rules_are_permissive() -> None:
    rules = RulesConfig.reference()
    assert not rules.mandatory_capture
    assert not rules.forced_continuation
    assert not rules.auto_advance_turn
    assert not rules.blocked_player_loses


def test_from_env_without_variables(clean_env: pytest.MonkeyPatch) -> None:
    assert RulesConfig.from_env() == RulesConfig()


@pytest.mark.parametrize("value", ["0", "false", "no", "off", "whatever"])
def test_from_env_disables(clean_env: pytest.MonkeyPatch, value: str) -> None:
    clean_env.setenv("CHECKERS_MANDATORY_CAPTURE", value)
    rules = RulesConfig.from_env()
    assert not rules.mandatory_capture
    assert rules.forced_continuation


@pytest.mark.parametrize("value", ["1", "true", "TRUE", " yes ", "on"])
def test_from_env_enables(clean_env: pytest.MonkeyPatch, value: str) -> None:
    clean_env.setenv("CHECKERS_AUTO_ADVANCE_TURN", value)
    assert RulesConfig.from_env().auto_advance_turn


def test_from_env_all_off(clean_env: pytest.MonkeyPatch) -> None:
    for name in ENV_NAMES:
        clean_env.setenv(name, "false")
    assert RulesConfig.from_env() == RulesConfig.reference()


def test_config_is_frozen() -> None:
    rules = RulesConfig()
    with pytest.raises(AttributeError):
        rules.mandatory_capture = False  # type: ignore[misc]
