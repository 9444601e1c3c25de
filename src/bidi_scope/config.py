"""Hint configuration value object and option parsing."""

from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional

ENV_PREFIX = "BIDI_SCOPE_"
_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}

# Option names used by the original editor plugin.
LEGACY_ALIASES: Mapping[str, str] = {
    "suppress_identical": "hide_if_unchanged",
    "zwnj_workaround": "joiner_rewrite",
}


class ConfigError(ValueError):
    """Raised when an option is unknown or carries the wrong type."""

    def __init__(self, message: str, *, option: str | None = None) -> None:
        super().__init__(message)
        self.option = option


@dataclass(frozen=True, slots=True)
class HintConfig:
    """Options recognized by the visual transform and the hint layer.

    ``hide_if_unchanged``
        Skip the hint when every run already reads the same in visual order.
    ``joiner_rewrite``
        Show ZWNJ as a dotted circle for terminals that render it wrongly.
    ``joiner_swap``
        Swap the two halves of a word around a single ZWNJ for terminals that
        already reverse joined clusters.
    ``fix_iskeyword``
        Ask the host to treat Hebrew and Arabic letters as keyword characters.
    ``native_motions``
        Ask the host to restore native word motions in buffers with RTL text.
    """

    hide_if_unchanged: bool = False
    joiner_rewrite: bool = False
    joiner_swap: bool = False
    fix_iskeyword: bool = True
    native_motions: bool = True

    @classmethod
    def option_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    @classmethod
    def from_mapping(
        cls, options: Optional[Mapping[str, Any]], *, base: "HintConfig | None" = None
    ) -> "HintConfig":
        """Merge ``options`` over ``base`` (or the defaults); later keys win."""

        known = set(cls.option_names())
        changes: Dict[str, bool] = {}
        for raw_name, value in (options or {}).items():
            name = LEGACY_ALIASES.get(raw_name, raw_name)
            if name not in known:
                raise ConfigError(f"Unknown option '{raw_name}'.", option=raw_name)
            if not isinstance(value, bool):
                raise ConfigError(
                    f"Option '{raw_name}' expects a bool, got {type(value).__name__}.",
                    option=raw_name,
                )
            changes[name] = value
        return replace(base or cls(), **changes)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "HintConfig":
        env = os.environ if environ is None else environ
        options: Dict[str, bool] = {}
        for name in cls.option_names():
            raw = env.get(f"{ENV_PREFIX}{name.upper()}")
            if raw is None:
                continue
            options[name] = _parse_flag(name, raw)
        return cls.from_mapping(options)

    def with_options(self, **options: Any) -> "HintConfig":
        return self.from_mapping(options, base=self)


def _parse_flag(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ConfigError(f"Cannot read '{raw}' as a flag for '{name}'.", option=name)


DEFAULT_CONFIG = HintConfig()

__all__ = [
    "ConfigError",
    "DEFAULT_CONFIG",
    "ENV_PREFIX",
    "HintConfig",
    "LEGACY_ALIASES",
]
