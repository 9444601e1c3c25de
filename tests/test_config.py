from __future__ import annotations

import pytest

from bidi_scope.config import ConfigError, HintConfig


def test_defaults_apply_no_joiner_workaround() -> None:
    config = HintConfig()

    assert config.hide_if_unchanged is False
    assert config.joiner_rewrite is False
    assert config.joiner_swap is False
    assert config.fix_iskeyword is True
    assert config.native_motions is True


def test_from_mapping_overrides_defaults() -> None:
    config = HintConfig.from_mapping({"joiner_swap": True, "native_motions": False})

    assert config.joiner_swap is True
    assert config.native_motions is False
    assert config.fix_iskeyword is True


def test_legacy_option_names_are_accepted() -> None:
    config = HintConfig.from_mapping({"suppress_identical": True, "zwnj_workaround": True})

    assert config.hide_if_unchanged is True
    assert config.joiner_rewrite is True


def test_unknown_option_raises() -> None:
    with pytest.raises(ConfigError) as excinfo:
        HintConfig.from_mapping({"fancy_mode": True})

    assert excinfo.value.option == "fancy_mode"


def test_non_bool_option_raises() -> None:
    with pytest.raises(ConfigError):
        HintConfig.from_mapping({"joiner_swap": "yes"})


def test_with_options_keeps_existing_values() -> None:
    base = HintConfig(joiner_rewrite=True)

    updated = base.with_options(joiner_swap=True)

    assert updated.joiner_rewrite is True
    assert updated.joiner_swap is True
    assert base.joiner_swap is False


def test_from_env_reads_prefixed_flags() -> None:
    config = HintConfig.from_env(
        {
            "BIDI_SCOPE_HIDE_IF_UNCHANGED": "yes",
            "BIDI_SCOPE_JOINER_SWAP": "1",
            "BIDI_SCOPE_FIX_ISKEYWORD": "off",
            "UNRELATED": "true",
        }
    )

    assert config.hide_if_unchanged is True
    assert config.joiner_swap is True
    assert config.fix_iskeyword is False
    assert config.joiner_rewrite is False


def test_from_env_rejects_unreadable_flag() -> None:
    with pytest.raises(ConfigError):
        HintConfig.from_env({"BIDI_SCOPE_JOINER_REWRITE": "maybe"})
