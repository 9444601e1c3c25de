"""Host-agnostic controller that wires editor events into hint callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional, Set, Tuple

from bidi_scope.config import HintConfig
from bidi_scope.hint import (
    CommandRef,
    CommandRegistry,
    HintCache,
    TAB_WIDTH,
    HintLine,
    LineKey,
    UnknownCommandError,
    compose_hint,
)
from bidi_scope.runtime import telemetry
from bidi_scope.text import KEYWORD_RANGES, has_rtl
from bidi_scope.text.codec import Text

COMMAND_NAME = "BidiScope"
UPDATE_EVENTS = (
    "cursor.moved",
    "cursor.moved_insert",
    "text.changed",
    "text.changed_insert",
    "insert.leave",
)


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class HintHooks:
    """Callbacks the controller uses to drive the host UI."""

    show_hint: Callable[[str, int, HintLine], None]
    clear_hint: Callable[[str, int], None] = _noop
    notify: Callable[[str, str], None] = _noop
    enable_native_motions: Callable[[str], None] = _noop
    extend_keywords: Callable[[Tuple[Tuple[int, int], ...]], None] = _noop
    log: Callable[[str], None] = _noop


@dataclass(frozen=True, slots=True)
class BufferEntered:
    """Payload for ``buffer.enter``: the buffer id and its leading lines."""

    buffer: str
    lines: Iterable[Text]


class HintController:
    """Keeps one hint on screen for the line under the cursor."""

    def __init__(
        self,
        hooks: HintHooks,
        *,
        config: Optional[HintConfig] = None,
        tab_width: int = TAB_WIDTH,
    ) -> None:
        self.hooks = hooks
        self.config = config or HintConfig()
        self.tab_width = tab_width
        self.cache = HintCache()
        self.commands = CommandRegistry(logger_name="bidi_scope.commands")
        self.logger = telemetry.get_logger("bidi_scope.controller")
        self._current: Optional[LineKey] = None
        self._checked_buffers: Set[str] = set()
        self._register_commands()

    @property
    def active(self) -> bool:
        return self.cache.hint is not None

    def setup(self) -> None:
        """Apply one-time host adjustments requested by the configuration."""

        if self.config.fix_iskeyword:
            self.hooks.extend_keywords(KEYWORD_RANGES)
            self._log_state("setup ->", keywords=KEYWORD_RANGES)

    def update(self, key: LineKey) -> Optional[HintLine]:
        """Show the hint for ``key`` unless the cached one is still current."""

        self._current = key
        if self.cache.matches(key):
            telemetry.record_event(
                "hint.cache_hit",
                level="debug",
                data={"buffer": key.buffer, "line": key.line},
            )
            return self.cache.hint

        self.clear()
        with telemetry.span(
            "hint::update",
            component="hint",
            metadata={"buffer": key.buffer, "line": key.line},
        ) as handle:
            hint = compose_hint(
                key.content, key.cursor_col, self.config, tab_width=self.tab_width
            )
            handle.add_metadata("shown", hint is not None)
        if hint is None:
            return None

        self.hooks.show_hint(key.buffer, key.line, hint)
        self.cache.store(key, hint)
        self._log_state("hint ->", text=hint.plain, cursor=hint.cursor_text)
        return hint

    def refresh(self) -> Optional[HintLine]:
        """Recompute the hint for the last position the host reported."""

        if self._current is None:
            return None
        self.cache.reset()
        return self.update(self._current)

    def clear(self) -> None:
        previous = self.cache.reset()
        if previous is not None:
            self.hooks.clear_hint(previous.buffer, previous.line)
            self._log_state("clear ->", buffer=previous.buffer, line=previous.line)

    def toggle(self) -> Optional[HintLine]:
        if self.active:
            self.clear()
            return None
        return self.refresh()

    def enter_buffer(self, buffer: str, lines: Iterable[Text]) -> bool:
        """Prescan ``buffer`` once and request native motions if it holds RTL."""

        if not self.config.native_motions or buffer in self._checked_buffers:
            return False
        self._checked_buffers.add(buffer)
        if not has_rtl(lines):
            return False
        self.hooks.enable_native_motions(buffer)
        telemetry.record_event("buffer.native_motions", data={"buffer": buffer})
        return True

    def leave_buffer(self, buffer: str) -> None:
        del buffer
        self.clear()

    def command(self, name: str) -> bool:
        """Run ``BidiScope <name>``; unknown names are reported to the host."""

        try:
            self.commands.dispatch(name)
        except UnknownCommandError as exc:
            usage = f"Usage: {COMMAND_NAME} {'|'.join(exc.choices)}"
            telemetry.record_event(
                "command.unknown", level="error", data={"command": exc.name}
            )
            self.hooks.notify(usage, "error")
            return False
        return True

    def handle_event(self, name: str, payload: object | None = None) -> None:
        """Dispatch a host notification to the matching controller method."""

        self._log_state("event ->", event=name)
        if name in UPDATE_EVENTS:
            if not isinstance(payload, LineKey):
                raise TypeError(f"'{name}' expects a LineKey payload")
            self.update(payload)
        elif name == "buffer.enter":
            if not isinstance(payload, BufferEntered):
                raise TypeError("'buffer.enter' expects a BufferEntered payload")
            self.enter_buffer(payload.buffer, payload.lines)
        elif name == "buffer.leave":
            self.leave_buffer(str(payload))
        else:
            raise ValueError(f"Unsupported event '{name}'.")

    def _register_commands(self) -> None:
        for ref in (
            CommandRef("on", self.refresh, "Show the hint for the current line"),
            CommandRef("off", self.clear, "Hide the hint until the cursor moves"),
            CommandRef("toggle", self.toggle, "Show or hide the hint"),
        ):
            self.commands.register(ref)

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        current = self._current
        return {
            "buffer": current.buffer if current else None,
            "line": current.line if current else None,
            "cursor_col": current.cursor_col if current else None,
            "active": self.active,
        }


__all__ = ["BufferEntered", "HintController", "HintHooks", "UPDATE_EVENTS"]
